import builtins
import importlib
from types import ModuleType
from typing import Any

from .errors import UnresolvedCallableError


def resolve(name: str, /) -> Any:
    """Find the object a dotted name refers to.

    The longest importable module prefix is imported and the rest of the
    name is looked up as attributes on it. A single name is looked up in
    builtins before it is tried as a module.
    """

    parts = name.split(".")
    if not all(parts):
        raise UnresolvedCallableError(name)

    if len(parts) == 1 and hasattr(builtins, name):
        return getattr(builtins, name)

    for index in range(len(parts), 0, -1):
        module = _import(".".join(parts[:index]))
        if module is not None:
            break
    else:
        raise UnresolvedCallableError(name)

    value: Any = module
    for attribute in parts[index:]:
        try:
            value = getattr(value, attribute)
        except AttributeError:
            raise UnresolvedCallableError(name) from None
    return value


def _import(module_name: str, /) -> ModuleType | None:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as error:
        # Missing dependencies of an existing module are not a lookup miss.
        if error.name == module_name or module_name.startswith(f"{error.name}."):
            return None
        raise
