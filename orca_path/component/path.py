from typing import Iterable, Self

from orca_path.component.errors import (
    BoundaryViolationError,
    IndexOutOfRangeError,
    InvalidCharacterError,
    PreconditionViolationError,
)
from orca_path.component.grammar import COMPONENT_GRAMMAR, PathGrammar
from orca_path.log.orca_log import get_orca_logger

_logger = get_orca_logger()

CURRENT = "."
PARENT = ".."


def _check_text(path) -> str:
    if not isinstance(path, str):
        raise TypeError(f"path must be a string, got {type(path).__name__}.")
    return path


def _resolve(tokens: Iterable[str], is_absolute: bool, grammar: PathGrammar, text: str) -> list[str]:
    """
    Walk tokens left to right, dropping '.', cancelling '..' against the previous
    concrete segment and validating everything else. A relative result keeps its
    leading '..'; an absolute one may never climb above the root.
    """
    stack: list[str] = []
    for token in tokens:
        if token == "" or token == CURRENT:
            continue

        if token == PARENT:
            if stack and stack[-1] != PARENT:
                stack.pop()
            elif not is_absolute:
                stack.append(PARENT)
            else:
                _logger.debug(f"Rejected '{text}': ascends above root")
                raise BoundaryViolationError(text)
            continue

        bad = grammar.find_invalid_char(token)
        if bad is not None:
            _logger.debug(f"Rejected '{text}': invalid character '{bad}'")
            raise InvalidCharacterError(text, bad)
        stack.append(token)

    return stack


def _join(segments: Iterable[str], is_absolute: bool, grammar: PathGrammar) -> str:
    body = grammar.separator.join(segments)
    if is_absolute:
        return grammar.separator + body
    return body


def normalize(path: str, grammar: PathGrammar = COMPONENT_GRAMMAR) -> str:
    """
    Return the canonical form of path.

    The result has no '.' elements, no repeated or trailing separators, and no '..'
    except at the start of a relative path. 'a///b/../c/' becomes 'a/c', '/./a/../'
    becomes '/', and '../a/../..' becomes '../..'.

    Raises:
        TypeError: If path is not a string.
        InvalidCharacterError: If a segment contains a character the grammar forbids.
        BoundaryViolationError: If an absolute path steps above the root, e.g. '/../a'.
    """
    _check_text(path)
    sep = grammar.separator
    is_absolute = path.startswith(sep)
    tokens = path[1:].split(sep) if is_absolute else path.split(sep)
    return _join(_resolve(tokens, is_absolute, grammar, path), is_absolute, grammar)


def split(path: str, grammar: PathGrammar = COMPONENT_GRAMMAR) -> tuple[str, str]:
    """
    Split path into (head, tail) around its last separator.

    No normalization or validation is done. The tail never contains a separator and
    is empty when path ends with one. Trailing separators are stripped from the head
    unless the head is the root.
    """
    _check_text(path)
    sep = grammar.separator
    pos = path.rfind(sep)
    if pos < 0:
        return "", path

    head, tail = path[: pos + 1], path[pos + 1 :]
    stripped = head.rstrip(sep)
    if stripped == "":
        # Only separators before the tail: the head is the root.
        return sep, tail
    return stripped, tail


class ComponentPath:
    """
    Immutable address of a component in a model tree, e.g. '/model/arm/elbow' or
    '../wrist'.

    The value is normalized when constructed and never changes afterwards; every
    operation returns a new ComponentPath. Two paths are equal when their canonical
    strings are equal, so they can be used as dictionary keys.
    """

    __slots__ = ("_segments", "_is_absolute", "_grammar", "_string")

    def __init__(self, path: str = "", grammar: PathGrammar = COMPONENT_GRAMMAR):
        _check_text(path)
        is_absolute = path.startswith(grammar.separator)
        canonical = normalize(path, grammar)
        body = canonical[1:] if is_absolute else canonical
        segments = body.split(grammar.separator) if body else []
        self._init(segments, is_absolute, grammar)

    def _init(self, segments, is_absolute: bool, grammar: PathGrammar):
        object.__setattr__(self, "_segments", tuple(segments))
        object.__setattr__(self, "_is_absolute", bool(is_absolute))
        object.__setattr__(self, "_grammar", grammar)
        object.__setattr__(self, "_string", _join(self._segments, self._is_absolute, grammar))

    @classmethod
    def _from_trusted(cls, segments, is_absolute: bool, grammar: PathGrammar) -> Self:
        path = cls.__new__(cls)
        path._init(segments, is_absolute, grammar)
        return path

    @classmethod
    def from_segments(
        cls, segments: Iterable[str], is_absolute: bool, grammar: PathGrammar = COMPONENT_GRAMMAR
    ) -> Self:
        """
        Build a path from already split component names. Each name must be a legal
        segment: '.', '..' and empty names are rejected rather than resolved.
        """
        if isinstance(segments, str):
            raise TypeError("segments must be a sequence of names, not a string.")
        segments = list(segments)
        for name in segments:
            if not isinstance(name, str):
                raise TypeError(f"segment must be a string, got {type(name).__name__}.")

        text = _join(segments, is_absolute, grammar)
        for name in segments:
            if name in ("", CURRENT, PARENT):
                raise InvalidCharacterError(text, segment=name)
            bad = grammar.find_invalid_char(name)
            if bad is not None:
                raise InvalidCharacterError(text, bad)

        return cls._from_trusted(segments, is_absolute, grammar)

    @classmethod
    def root_path(cls, grammar: PathGrammar = COMPONENT_GRAMMAR) -> Self:
        return cls._from_trusted((), True, grammar)

    @classmethod
    def is_valid_name(cls, name: str, grammar: PathGrammar = COMPONENT_GRAMMAR) -> bool:
        if not isinstance(name, str) or name in ("", CURRENT, PARENT):
            return False
        return grammar.find_invalid_char(name) is None

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __reduce__(self):
        return type(self), (self._string, self._grammar)

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def is_absolute(self) -> bool:
        return self._is_absolute

    @property
    def grammar(self) -> PathGrammar:
        return self._grammar

    def to_string(self) -> str:
        return self._string

    def get_num_path_levels(self) -> int:
        return len(self._segments)

    def form_absolute_path(self, base: "ComponentPath") -> "ComponentPath":
        """
        Resolve this path against the absolute path base. Absolute paths are returned
        as they are.

        Raises:
            PreconditionViolationError: If base is not absolute.
            BoundaryViolationError: If the '..' elements climb above base's root.
        """
        if self._is_absolute:
            return self
        if not isinstance(base, ComponentPath):
            raise TypeError("base must be a ComponentPath.")
        if not base._is_absolute:
            raise PreconditionViolationError(
                f"Cannot resolve '{self}' against relative path '{base}'.", self._string, base._string
            )

        sep = self._grammar.separator
        text = base._string.rstrip(sep) + sep + self._string
        segments = _resolve(base._segments + self._segments, True, self._grammar, text)
        return self._from_trusted(segments, True, self._grammar)

    def form_relative_path(self, other: "ComponentPath") -> "ComponentPath":
        """
        Return the relative path that leads from other to this path. Both must be
        absolute. '/a/b/c' relative to '/a/x/y' is '../../b/c'; a path relative to
        itself is the empty path.
        """
        if not isinstance(other, ComponentPath):
            raise TypeError("other must be a ComponentPath.")
        if not self._is_absolute or not other._is_absolute:
            raise PreconditionViolationError(
                f"Both paths must be absolute to form a relative path, got '{self}' and '{other}'.",
                self._string,
                other._string,
            )

        common = 0
        for mine, theirs in zip(self._segments, other._segments):
            if mine != theirs:
                break
            common += 1

        segments = [PARENT] * (len(other._segments) - common) + list(self._segments[common:])
        return self._from_trusted(segments, False, self._grammar)

    def get_parent_path(self) -> "ComponentPath":
        # The parent of the root or of the empty path is the path itself.
        if not self._segments:
            return self
        return self._from_trusted(self._segments[:-1], self._is_absolute, self._grammar)

    def get_parent_path_string(self) -> str:
        return self.get_parent_path().to_string()

    def get_subcomponent_name_at_level(self, index: int) -> str:
        if index < 0 or index >= len(self._segments):
            raise IndexOutOfRangeError(self._string, index, len(self._segments))
        return self._segments[index]

    def get_component_name(self) -> str:
        if not self._segments:
            return ""
        return self._segments[-1]

    def append(self, name: str) -> "ComponentPath":
        if not isinstance(name, str):
            raise TypeError("name must be a string.")
        if not self.is_valid_name(name, self._grammar):
            text = _join(self._segments + (name,), self._is_absolute, self._grammar)
            raise InvalidCharacterError(text, self._grammar.find_invalid_char(name) or "", segment=name)
        return self._from_trusted(self._segments + (name,), self._is_absolute, self._grammar)

    def is_descendant_of(self, other: "ComponentPath") -> bool:
        if not isinstance(other, ComponentPath):
            raise TypeError("other must be an instance of ComponentPath.")
        if self._is_absolute != other._is_absolute:
            return False
        n = len(other._segments)
        if len(self._segments) <= n or self._segments[:n] != other._segments:
            return False
        # '..' beyond the shared prefix climbs out of other instead of descending.
        return self._segments[n] != PARENT

    def __truediv__(self, other):
        if isinstance(other, str):
            return self.append(other)
        if isinstance(other, ComponentPath):
            if other._is_absolute:
                raise PreconditionViolationError(
                    f"Cannot append absolute path '{other}' to '{self}'.", self._string, other._string
                )
            sep = self._grammar.separator
            text = self._string.rstrip(sep) + sep + other._string if self._string else other._string
            segments = _resolve(self._segments + other._segments, self._is_absolute, self._grammar, text)
            return self._from_trusted(segments, self._is_absolute, self._grammar)
        return NotImplemented

    def __len__(self):
        return len(self._segments)

    def __str__(self):
        return self._string

    def __repr__(self):
        return f"ComponentPath('{self._string}')"

    def __hash__(self):
        return hash(self._string)

    def __eq__(self, other):
        if not isinstance(other, ComponentPath):
            return NotImplemented
        return self._string == other._string

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
