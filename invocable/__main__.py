import json
from typing import Annotated
from typing import Any

from typer import Argument
from typer import Exit
from typer import Typer

from .config import Config
from .errors import InvocableError
from .handle import CallableHandle
from .registry import HANDLE_REGISTRY

app = Typer()


@app.callback()
def main():
    """Inspect and invoke callables by name."""
    Config.load().register_modules()


def decode(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def find(descriptor: str) -> CallableHandle:
    return HANDLE_REGISTRY.get(descriptor) or CallableHandle(descriptor)


@app.command()
def handles():
    """Show all registered handles."""
    if not HANDLE_REGISTRY:
        print("No handles registered.")
        return

    rows = [
        (name, handle.kind.value, handle.target)
        for name, handle in HANDLE_REGISTRY.items()
    ]
    headers = ("Name", "Kind", "Target")
    widths = [max(len(row[i]) for row in [headers, *rows]) for i in range(3)]

    print(" | ".join(f"{h:<{w}}" for h, w in zip(headers, widths, strict=True)))
    print("-+-".join("-" * w for w in widths))
    for row in rows:
        print(" | ".join(f"{c:<{w}}" for c, w in zip(row, widths, strict=True)))


@app.command()
def kind(
    descriptor: Annotated[
        str,
        Argument(
            help="A registered handle name, a function such as 'os.getcwd', "
            "or a class method such as 'pathlib.Path::home'.",
        ),
    ],
):
    """Show how a descriptor is classified."""
    try:
        print(find(descriptor).kind.value)
    except InvocableError as error:
        print(f"Error: {error}")
        raise Exit(1) from None


@app.command()
def call(
    descriptor: Annotated[
        str,
        Argument(
            help="A registered handle name, a function such as 'os.getcwd', "
            "or a class method such as 'pathlib.Path::home'.",
        ),
    ],
    args: Annotated[
        list[str] | None,
        Argument(
            help="Positional arguments, decoded as JSON when possible.",
            metavar="[ARGS]...",
        ),
    ] = None,
):
    """Invoke a callable and print its result as JSON."""
    try:
        result = find(descriptor).invoke_args(map(decode, args or []))
    except InvocableError as error:
        print(f"Error: {error}")
        raise Exit(1) from None

    print(json.dumps(result, default=repr))


if __name__ == "__main__":
    app()
