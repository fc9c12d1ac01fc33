from .errors import (
    ComponentPathError,
    InvalidCharacterError,
    BoundaryViolationError,
    PreconditionViolationError,
    IndexOutOfRangeError,
    ComponentNotFoundError,
)
from .grammar import PathGrammar, COMPONENT_GRAMMAR
from .path import ComponentPath, normalize, split
from .references import ComponentLookup, absolute_reference, resolve_reference, make_reference

__all__ = [
    'ComponentPathError', 'InvalidCharacterError', 'BoundaryViolationError',
    'PreconditionViolationError', 'IndexOutOfRangeError', 'ComponentNotFoundError',
    'PathGrammar', 'COMPONENT_GRAMMAR',
    'ComponentPath', 'normalize', 'split',
    'ComponentLookup', 'absolute_reference', 'resolve_reference', 'make_reference',
]
