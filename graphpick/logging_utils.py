from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10
_repr.maxset = 10
_repr.maxdict = 10


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if isinstance(value, np.ndarray):
        summary = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if 0 < value.size <= max_items:
            summary += f", values={_repr.repr(value.tolist())}"
        return summary

    if isinstance(value, (set, frozenset)) and len(value) > max_items:
        return f"{type(value).__name__}(size={len(value)})"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator that logs arguments, result and exceptions at DEBUG level."""

    def decorator(func: F) -> F:
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            rendered = [_safe_repr(arg) for arg in args]
            rendered += [f"{key}={_safe_repr(value)}" for key, value in kwargs.items()]
            logger.debug("Entering %s (%s)", label, ", ".join(rendered))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", label)
                raise
            logger.debug("Exiting %s -> %s", label, _safe_repr(result))
            return result

        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Iterable[str] = (),
) -> None:
    """Trace the public methods of every class defined in a module namespace.

    ``skip`` holds class names or ``Class.method`` names to leave untouched.
    Private and dunder methods are never wrapped.
    """

    module_name = namespace["__name__"]
    logger = logger or logging.getLogger(module_name)
    skipped = set(skip)

    for class_name, cls in list(namespace.items()):
        if not inspect.isclass(cls) or cls.__module__ != module_name or class_name in skipped:
            continue
        for attr_name, attr_value in list(vars(cls).items()):
            qualified = f"{class_name}.{attr_name}"
            if attr_name.startswith("_") or qualified in skipped or not inspect.isfunction(attr_value):
                continue
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))
