from __future__ import annotations

import typing


class MonadError(Exception):
    """Base class for failures raised by the library itself."""


class UnsupportedOperation(MonadError):
    """Operation needs a capability (zero/plus) the monad does not have."""

    monad: str
    operation: str

    def __init__(self, monad: str, operation: str) -> None:
        self.monad = monad
        self.operation = operation
        super().__init__(f"{operation}() is not supported by the {monad} monad")


class UnboundName(MonadError, KeyError):
    """Environment lookup of a name that no step has bound yet."""

    name: str
    available: tuple[str, ...]

    def __init__(self, name: str, available: typing.Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(name)

    def __str__(self) -> str:
        bound = ", ".join(self.available) or "<none>"
        return f"Name {self.name!r} is not bound (bound: {bound})"


class TypeMismatch(MonadError, TypeError):
    """Value tagged for another monad reached an operation of this one."""

    monad: str
    value: object
    operation: str

    def __init__(self, monad: str, value: object, operation: str) -> None:
        self.monad = monad
        self.value = value
        self.operation = operation
        super().__init__(
            f"{operation}(): expected a {monad} value, got {type(value).__name__}: {value!r}"
        )


__all__ = ("MonadError", "TypeMismatch", "UnboundName", "UnsupportedOperation")
