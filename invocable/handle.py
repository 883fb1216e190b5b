from collections.abc import Iterable
from typing import Any

from .descriptor import ClassMethod
from .descriptor import Closure
from .descriptor import Descriptor
from .descriptor import FunctionRef
from .descriptor import InstanceMethod
from .descriptor import Kind
from .descriptor import parse
from .dispatch import dispatch


class CallableHandle:
    """One interface over the ways a callable can be referenced.

    The descriptor is classified once, when the handle is created, and the
    handle never changes afterwards. Whether the target actually exists is
    only discovered when it is invoked.
    """

    def __init__(self, descriptor: Any, /):
        self.__raw = descriptor
        self.__descriptor: Descriptor = parse(descriptor)
        self.__kind = self.__descriptor.kind

    def __repr__(self):
        return f"<{type(self).__name__} {self.__kind.value} {self.target}>"

    @property
    def kind(self) -> Kind:
        return self.__kind

    @property
    def target(self) -> str:
        """A readable name for what the handle calls."""
        match self.__descriptor:
            case FunctionRef(name=name):
                return name
            case Closure(fn=fn):
                return getattr(fn, "__qualname__", None) or repr(fn)
            case InstanceMethod(receiver=receiver, method=method):
                return f"{type(receiver).__qualname__}.{method}"
            case ClassMethod(owner=str() as owner, method=method):
                return f"{owner}::{method}"
            case ClassMethod(owner=owner, method=method):
                return f"{owner.__module__}.{owner.__qualname__}::{method}"

    def get(self) -> Any:
        """Return the descriptor as it was given.

        A "Type::method" string comes back as the pair ("Type", "method").
        """
        if isinstance(self.__raw, str) and self.__kind is Kind.CLASS_METHOD:
            return (self.__descriptor.owner, self.__descriptor.method)
        return self.__raw

    def is_function(self) -> bool:
        return self.__kind is Kind.FUNCTION

    def is_closure(self) -> bool:
        return self.__kind is Kind.CLOSURE

    def is_instance_method(self) -> bool:
        return self.__kind is Kind.INSTANCE_METHOD

    def is_class_method(self) -> bool:
        return self.__kind is Kind.CLASS_METHOD

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        return dispatch(self.__descriptor, args, kwargs)

    def invoke_args(
        self,
        args: Iterable[Any] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> Any:
        if isinstance(args, str | bytes):
            raise TypeError(
                f"Expected a collection of arguments, got: {args!r}"
            )
        return dispatch(self.__descriptor, tuple(args), kwargs or {})

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return dispatch(self.__descriptor, args, kwargs)
