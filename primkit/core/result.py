"""
Tagged success/failure outcomes.

For callers that prefer branching on a returned value over catching
exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import ErrorKind, PrimkitError


@dataclass(frozen=True)
class Outcome:
    """
    Result of an attempted operation.

    Fields:
        value: Return value when the operation succeeded
        error_kind: Kind of the captured error (None on success)
        error_message: Message of the captured error (None on success)
    """
    value: Any = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def unwrap(self) -> Any:
        """
        Get the value or raise if the outcome is a failure.

        Raises:
            ValueError: If the outcome holds an error
        """
        if not self.ok:
            raise ValueError(f"Outcome is a failure: {self.error_kind.value}: {self.error_message}")
        return self.value


def attempt(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Run a primkit operation and capture its PrimkitError, if any.

    Other exceptions propagate unchanged.

    Example:
        out = attempt(stringify_deterministic, 42)
        out.ok -> False
        out.error_kind -> ErrorKind.UNSUPPORTED_DATA_TYPE
    """
    try:
        return Outcome(value=func(*args, **kwargs))
    except PrimkitError as e:
        return Outcome(error_kind=e.kind, error_message=e.message)
