from typing import Any

from .registry import handle
from .registry import register


def function_with_parameters(parameter1, parameter2):
    return [parameter1, parameter2]


def function_without_parameters():
    pass


def function_that_raises():
    raise AttributeError("raised by the target")


class SampleClass:
    def invoke_missing(
        self, name: str, args: tuple[Any, ...], /, **kwargs: Any
    ) -> Any:
        return name

    @classmethod
    def invoke_missing_class(
        cls, name: str, args: tuple[Any, ...], /, **kwargs: Any
    ) -> Any:
        return name

    @staticmethod
    def class_method_with_parameters(parameter1, parameter2):
        return [parameter1, parameter2]

    @staticmethod
    def class_method_without_parameters():
        pass

    def instance_method_with_parameters(self, parameter1, parameter2):
        return [parameter1, parameter2]

    def instance_method_without_parameters(self):
        pass


class PlainClass:
    """A class without fallback hooks."""

    @classmethod
    def create(cls):
        return cls()

    def method(self):
        return "method"


class Counter:
    def __init__(self):
        self.count = 0

    def increment(self, by: int = 1) -> int:
        self.count += by
        return self.count


@handle(name="pair")
def pair(first, second):
    return [first, second]


register("sample.static", f"{__name__}.SampleClass::class_method_with_parameters")
