from collections.abc import Callable
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from .descriptor import ClassMethod
from .descriptor import Closure
from .descriptor import Descriptor
from .descriptor import FunctionRef
from .descriptor import InstanceMethod
from .errors import UnresolvedCallableError
from .resolve import resolve


@runtime_checkable
class DynamicDispatchTarget(Protocol):
    """A receiver that answers calls to instance methods it does not define."""

    def invoke_missing(
        self, name: str, args: tuple[Any, ...], /, **kwargs: Any
    ) -> Any: ...


@runtime_checkable
class DynamicDispatchType(Protocol):
    """A class that answers calls to class methods it does not define."""

    @classmethod
    def invoke_missing_class(
        cls, name: str, args: tuple[Any, ...], /, **kwargs: Any
    ) -> Any: ...


def dispatch(
    descriptor: Descriptor,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    /,
) -> Any:
    """Call the target of a descriptor and return what it returns."""

    match descriptor:
        case FunctionRef(name=name):
            target = resolve(name)
        case Closure(fn=fn):
            target = fn
        case InstanceMethod(receiver=receiver, method=method):
            target = _method(receiver, method)
        case ClassMethod(owner=owner, method=method):
            if isinstance(owner, str):
                owner = resolve(owner)
            target = _class_method(owner, method)

    return target(*args, **kwargs)


def _method(receiver: object, method: str, /) -> Callable[..., Any]:
    try:
        return getattr(receiver, method)
    except AttributeError:
        pass

    if isinstance(receiver, DynamicDispatchTarget):
        return _missing(receiver.invoke_missing, method)

    raise UnresolvedCallableError(f"{type(receiver).__qualname__}.{method}")


def _class_method(owner: Any, method: str, /) -> Callable[..., Any]:
    try:
        return getattr(owner, method)
    except AttributeError:
        pass

    if isinstance(owner, type) and isinstance(owner, DynamicDispatchType):
        return _missing(owner.invoke_missing_class, method)

    owner_name = owner.__qualname__ if isinstance(owner, type) else repr(owner)
    raise UnresolvedCallableError(f"{owner_name}::{method}")


def _missing(hook: Callable[..., Any], method: str, /) -> Callable[..., Any]:
    def call_missing(*args: Any, **kwargs: Any) -> Any:
        return hook(method, args, **kwargs)

    return call_missing
