import importlib
import os
import tomllib
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self


def pyproject() -> Path | None:
    for path in [cwd := Path.cwd(), *cwd.parents]:
        candidate = path / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


@dataclass
class Config:
    """Settings from [tool.invocable] in pyproject.toml.

    The INVOCABLE_REGISTER environment variable, a comma-separated list of
    modules, takes precedence over the ``register`` setting.
    """

    register: list[str] = field(default_factory=list)

    @classmethod
    def load(cls) -> Self:
        settings = {}
        if path := pyproject():
            with path.open("rb") as f:
                settings = tomllib.load(f).get("tool", {}).get("invocable", {})

        if env_register := os.environ.get("INVOCABLE_REGISTER"):
            register = [m.strip() for m in env_register.split(",") if m.strip()]
        else:
            register = settings.get("register", [])

        if not isinstance(register, list) or not all(
            isinstance(module, str) for module in register
        ):
            raise ValueError(
                f"'register' must be a list of module names, got: {register!r}"
            )

        return cls(register=register)

    def register_modules(self):
        """Import the configured modules so their handles get registered."""
        for module_name in self.register:
            importlib.import_module(module_name)
