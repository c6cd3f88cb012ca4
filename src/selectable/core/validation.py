"""Option validation with clear error messages for host integrators."""

from __future__ import annotations

from typing import Any


def validate_selector(selector: Any) -> Any:
    """Validate the item selector: None (direct children), a string or a predicate.

    Returns the selector (unchanged).
    """
    if selector is None or callable(selector):
        return selector
    if not isinstance(selector, str):
        raise TypeError(
            f"selector must be a string, a callable or None, "
            f"got {type(selector).__name__}."
        )
    if not selector.strip():
        raise ValueError("selector is an empty string. Use None to select direct children.")
    return selector


def validate_cancel(cancel: Any) -> Any:
    """Validate the cancel-zone selector: a string or a predicate."""
    if callable(cancel):
        return cancel
    if not isinstance(cancel, str):
        raise TypeError(
            f"cancel must be a string or a callable, got {type(cancel).__name__}."
        )
    return cancel


def validate_callback(fn: Any, option: str) -> Any:
    """Validate an optional callback option."""
    if fn is not None and not callable(fn):
        raise TypeError(f"{option} must be callable, got {type(fn).__name__}.")
    return fn
