from .component import (
    ComponentPath,
    PathGrammar,
    COMPONENT_GRAMMAR,
    normalize,
    split,
    ComponentPathError,
    InvalidCharacterError,
    BoundaryViolationError,
    PreconditionViolationError,
    IndexOutOfRangeError,
    ComponentNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    'ComponentPath', 'PathGrammar', 'COMPONENT_GRAMMAR', 'normalize', 'split',
    'ComponentPathError', 'InvalidCharacterError', 'BoundaryViolationError',
    'PreconditionViolationError', 'IndexOutOfRangeError', 'ComponentNotFoundError',
]
