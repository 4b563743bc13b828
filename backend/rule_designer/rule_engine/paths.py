"""Dotted-path access into JSON-like input trees."""

from typing import Any

from rule_designer.rule_engine.literals import UNDEFINED


class PathConflictError(TypeError):
    """Raised when a path runs through a value that is not a mapping."""

    def __init__(self, path: str, key: str, value: Any):
        self.path = path
        self.key = key
        super().__init__(
            f"Cannot set '{path}': '{key}' holds a {type(value).__name__}, not an object"
        )


def resolve(tree: Any, path: str) -> Any:
    """Resolve a dotted path to a value.

    Paths address nested mappings only, e.g. "customer.address.city".

    Args:
        tree: Input value tree
        path: Dot-separated property path

    Returns:
        The value at the path, or UNDEFINED if any key along the way is
        missing or the current value is not a mapping
    """
    current = tree
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return UNDEFINED
        current = current[key]
    return current


def assign(tree: dict[str, Any], path: str, value: Any) -> None:
    """Set the value at a dotted path, creating intermediate mappings.

    The tree is mutated in place; callers pass their own copy.

    Args:
        tree: Value tree to modify
        path: Dot-separated property path
        value: Value to store at the final key

    Raises:
        PathConflictError: If an intermediate key holds a non-mapping value
    """
    if not path.strip():
        return

    *parents, last = path.split(".")
    current = tree
    for key in parents:
        child = current.get(key)
        if child is None:
            child = {}
            current[key] = child
        elif not isinstance(child, dict):
            raise PathConflictError(path, key, child)
        current = child

    current[last] = value
