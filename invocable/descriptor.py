from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import ClassVar
from typing import TypeAlias

from .errors import InvalidDescriptorError

SEPARATOR = "::"


class Kind(Enum):
    FUNCTION = "function"
    CLOSURE = "closure"
    INSTANCE_METHOD = "instance_method"
    CLASS_METHOD = "class_method"


@dataclass(frozen=True)
class FunctionRef:
    kind: ClassVar[Kind] = Kind.FUNCTION
    name: str


@dataclass(frozen=True, eq=False)
class Closure:
    kind: ClassVar[Kind] = Kind.CLOSURE
    fn: Callable[..., Any]


@dataclass(frozen=True, eq=False)
class InstanceMethod:
    kind: ClassVar[Kind] = Kind.INSTANCE_METHOD
    receiver: object
    method: str


@dataclass(frozen=True)
class ClassMethod:
    kind: ClassVar[Kind] = Kind.CLASS_METHOD
    owner: type | str
    method: str


Descriptor: TypeAlias = FunctionRef | Closure | InstanceMethod | ClassMethod


def parse(value: Any, /) -> Descriptor:
    """Classify a raw callable descriptor.

    Classification looks only at the shape of the value:

    | value                          | descriptor                      |
    +--------------------------------+---------------------------------+
    | "pkg.module.function"          | FunctionRef                     |
    | "pkg.module.Class::method"     | ClassMethod("pkg.module.Class") |
    | lambda, function, callable     | Closure                         |
    | (instance, "method")           | InstanceMethod                  |
    | (Class, "method")              | ClassMethod(Class)              |
    | ("pkg.module.Class", "method") | ClassMethod("pkg.module.Class") |

    Nothing is imported or looked up here.
    """

    match value:
        case str() if SEPARATOR in value:
            owner, _, method = value.partition(SEPARATOR)
            if not owner or not method or SEPARATOR in method:
                raise InvalidDescriptorError(
                    f"Expected 'Type::method', got: {value!r}"
                )
            return ClassMethod(owner, method)
        case str():
            if not value:
                raise InvalidDescriptorError("Function name cannot be empty")
            return FunctionRef(value)
        case tuple() | list():
            return _parse_pair(value)
        case _ if callable(value):
            return Closure(value)
        case _:
            raise InvalidDescriptorError(
                f"Expected a function name, a callable, or a (target, method) "
                f"pair, got: {value!r}"
            )


def _parse_pair(value: tuple | list, /) -> InstanceMethod | ClassMethod:
    if len(value) != 2:
        raise InvalidDescriptorError(
            f"A method pair must have exactly two elements, got: {value!r}"
        )

    target, method = value
    if not isinstance(method, str) or not method:
        raise InvalidDescriptorError(
            f"Method name must be a non-empty string, got: {method!r}"
        )

    if isinstance(target, str):
        if not target:
            raise InvalidDescriptorError("Class name cannot be empty")
        return ClassMethod(target, method)
    if isinstance(target, type):
        return ClassMethod(target, method)
    return InstanceMethod(target, method)
