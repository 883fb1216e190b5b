from collections.abc import Callable
from typing import Any

from .errors import UnresolvedCallableError
from .handle import CallableHandle

HANDLE_REGISTRY: dict[str, CallableHandle] = {}


def register(name: str, descriptor: Any, /) -> CallableHandle:
    """Create a handle for a descriptor and register it by name."""
    handle = CallableHandle(descriptor)
    HANDLE_REGISTRY.setdefault(name, handle)
    assert HANDLE_REGISTRY[name] is handle, f"Failed to register {name!r}"
    return handle


def handle(*, name: str | None = None):
    """Decorate a function to register it as a handle."""

    def create_handle(fn: Callable[..., Any]) -> CallableHandle:
        return register(name or f"{fn.__module__}.{fn.__qualname__}", fn)

    return create_handle


def lookup(name: str, /) -> CallableHandle:
    try:
        return HANDLE_REGISTRY[name]
    except KeyError:
        raise UnresolvedCallableError(name) from None
