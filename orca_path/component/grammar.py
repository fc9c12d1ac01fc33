import yaml

from orca_path.log.orca_log import get_orca_logger

_logger = get_orca_logger()


class PathGrammar:
    """
    The textual rules a path is parsed with: one separator character and the set of
    characters that may not appear inside a segment. The separator is always part of
    the invalid set.

    Attributes:
        separator (str): Single character between segments.
        invalid_chars (str): Characters rejected inside a segment, separator included.

    Raises:
        TypeError: If separator or invalid_chars is not a string.
        ValueError: If separator is not exactly one character or is '.'.
    """

    def __init__(self, separator: str = "/", invalid_chars: str = "\\/*+"):
        if not isinstance(separator, str) or not isinstance(invalid_chars, str):
            raise TypeError("separator and invalid_chars must be strings.")
        if len(separator) != 1:
            raise ValueError(f"separator must be a single character, got '{separator}'.")
        if separator == ".":
            raise ValueError("separator cannot be '.'.")

        if separator not in invalid_chars:
            invalid_chars = invalid_chars + separator
        self._separator = separator
        self._invalid_chars = invalid_chars

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def invalid_chars(self) -> str:
        return self._invalid_chars

    def find_invalid_char(self, name: str) -> str | None:
        """Return the first invalid character in name, or None."""
        for ch in name:
            if ch in self._invalid_chars:
                return ch
        return None

    def __repr__(self):
        return f"PathGrammar(separator={self._separator!r}, invalid_chars={self._invalid_chars!r})"

    def __eq__(self, other):
        if not isinstance(other, PathGrammar):
            return NotImplemented
        return (
            self._separator == other._separator
            and set(self._invalid_chars) == set(other._invalid_chars)
        )

    def __hash__(self):
        return hash((self._separator, frozenset(self._invalid_chars)))

    @classmethod
    def from_dict(cls, config: dict) -> "PathGrammar":
        if not isinstance(config, dict):
            raise ValueError("Grammar config must be a mapping.")

        unknown = set(config.keys()) - {"separator", "invalid_chars"}
        if unknown:
            raise ValueError(f"Unknown grammar keys: {', '.join(sorted(unknown))}")

        try:
            return cls(
                separator=config.get("separator", "/"),
                invalid_chars=config.get("invalid_chars", "\\/*+"),
            )
        except TypeError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def from_yaml(cls, path: str) -> "PathGrammar":
        """
        Load a grammar from a YAML file with optional keys ``separator`` and
        ``invalid_chars``. An empty file gives the default component grammar.
        """
        with open(path, "r", encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Malformed grammar file {path}: {e}") from e

        if config is None:
            config = {}
        grammar = cls.from_dict(config)
        _logger.debug(f"Loaded {grammar!r} from {path}")
        return grammar


# '/' separates, '\', '*' and '+' are reserved in component names.
COMPONENT_GRAMMAR = PathGrammar("/", "\\/*+")
