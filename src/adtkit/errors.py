from dataclasses import dataclass
from typing import Sequence
from typing import cast


@dataclass(init=False, eq=False)
class AdtError(Exception):
    message: str

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        if not isinstance(message, str):
            raise TypeError(f"first argument must be a str message: {message!r}")

    @property  # type: ignore[no-redef]
    def message(self) -> str:
        return cast(str, self.args[0])


class NonExhaustiveMatchError(AdtError, TypeError):
    """A matcher was defined without a handler for every variant of its union."""

    def __init__(self, message: str, missing: Sequence[str]) -> None:
        super().__init__(message, tuple(missing))

    @property
    def missing(self) -> tuple[str, ...]:
        return cast(tuple[str, ...], self.args[1])


class UnknownVariantError(AdtError, ValueError):
    """A matcher was given handlers for tags its union does not have."""

    def __init__(self, message: str, unknown: Sequence[str]) -> None:
        super().__init__(message, tuple(unknown))

    @property
    def unknown(self) -> tuple[str, ...]:
        return cast(tuple[str, ...], self.args[1])


class SealedVariantError(AdtError, TypeError):
    pass


class UnwrapError(AdtError, ValueError):
    pass
