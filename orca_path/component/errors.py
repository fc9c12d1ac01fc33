"""
Exceptions raised by the component path engine.

Every error carries the offending input so that callers (document loaders,
socket resolution) can attach their own file/line context.
"""


class ComponentPathError(ValueError):
    """Base class for all component path failures."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class InvalidCharacterError(ComponentPathError):
    def __init__(self, path: str, character: str = "", segment: str | None = None):
        if segment is not None and not character:
            message = f"Invalid path element '{segment}' in '{path}'."
        else:
            message = f"Invalid character '{character}' in path '{path}'."
        super().__init__(message, path)
        self.character = character
        self.segment = segment


class BoundaryViolationError(ComponentPathError):
    def __init__(self, path: str):
        super().__init__(f"Path '{path}' ascends above the root.", path)


class PreconditionViolationError(ComponentPathError):
    def __init__(self, message: str, path: str = "", other: str = ""):
        super().__init__(message, path)
        self.other = other


class IndexOutOfRangeError(ComponentPathError, IndexError):
    def __init__(self, path: str, index: int, size: int):
        super().__init__(
            f"Level {index} is out of range for path '{path}' ({size} levels).", path
        )
        self.index = index
        self.size = size


class ComponentNotFoundError(ComponentPathError, LookupError):
    def __init__(self, reference: str, address: str):
        super().__init__(
            f"No component found at '{address}' (referenced as '{reference}').",
            reference,
        )
        self.reference = reference
        self.address = address
