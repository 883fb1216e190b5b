class InvocableError(Exception):
    """Base exception for invocable."""


class InvalidDescriptorError(InvocableError, TypeError):
    """The value given to a handle is not a callable descriptor."""


class UnresolvedCallableError(InvocableError, LookupError):
    """The named function or method could not be found."""

    def __init__(self, name: str, /):
        super().__init__(f"Unable to resolve callable: {name!r}")
        self.name = name
