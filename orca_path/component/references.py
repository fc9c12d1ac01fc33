"""
Helpers for components that refer to each other by path, such as a socket storing
the path of its connectee. The component tree itself is supplied by the caller
through the ComponentLookup protocol.
"""

from typing import Protocol

from orca_path.component.errors import ComponentNotFoundError, PreconditionViolationError
from orca_path.component.path import ComponentPath
from orca_path.log.orca_log import get_orca_logger

_logger = get_orca_logger()


class ComponentLookup(Protocol):
    def find_component(self, path: str) -> object | None:
        """Return the component at the canonical absolute path, or None."""
        ...


def _as_path(value, owner: ComponentPath | None = None) -> ComponentPath:
    if isinstance(value, ComponentPath):
        return value
    if isinstance(value, str):
        if owner is not None:
            return ComponentPath(value, owner.grammar)
        return ComponentPath(value)
    raise TypeError(f"Expected a path string or ComponentPath, got {type(value).__name__}.")


def absolute_reference(reference: str | ComponentPath, owner_path: str | ComponentPath) -> ComponentPath:
    """Canonical absolute address of reference, read relative to owner_path."""
    owner = _as_path(owner_path)
    if not owner.is_absolute:
        raise PreconditionViolationError(
            f"Owner path '{owner}' must be absolute.", str(reference), owner.to_string()
        )
    return _as_path(reference, owner).form_absolute_path(owner)


def resolve_reference(
    reference: str | ComponentPath, owner_path: str | ComponentPath, lookup: ComponentLookup
) -> object:
    """
    Find the component that reference points to from owner_path.

    Raises:
        ComponentNotFoundError: If the lookup has nothing at the resolved address.
    """
    address = absolute_reference(reference, owner_path).to_string()
    component = lookup.find_component(address)
    if component is None:
        raise ComponentNotFoundError(str(reference), address)

    _logger.debug(f"Resolved '{reference}' from '{owner_path}' to '{address}'")
    return component


def make_reference(
    target_path: str | ComponentPath, owner_path: str | ComponentPath, prefer_relative: bool = True
) -> str:
    """
    String to store in owner_path's document so that it points at target_path. A
    relative reference keeps working when the subtree holding both is moved; an
    empty string means the owner itself.
    """
    target = _as_path(target_path)
    owner = _as_path(owner_path)
    if not prefer_relative:
        if not target.is_absolute:
            raise PreconditionViolationError(
                f"Target path '{target}' must be absolute.", target.to_string(), owner.to_string()
            )
        return target.to_string()
    return target.form_relative_path(owner).to_string()
