"""Tagged states of an asynchronous query: loading, failed or ready.

Views branch on these instead of juggling separate loading/error/data flags.
Each variant carries a ``kind`` tag so templates can switch on it.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "An error occurred"


@dataclass(frozen=True)
class Loading:
    """The query has been started and has not settled yet."""

    kind: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Failed:
    """The query settled with an error; ``message`` is safe to display."""

    message: str = DEFAULT_ERROR_MESSAGE
    kind: ClassVar[str] = "failed"

    @classmethod
    def from_error(cls, error: BaseException) -> "Failed":
        return cls(str(error) or DEFAULT_ERROR_MESSAGE)


@dataclass(frozen=True)
class Ready(Generic[T]):
    """The query settled with a value."""

    value: T
    kind: ClassVar[str] = "ready"


QueryState = Union[Loading, Failed, Ready]
