"""Oracle result - outcome of a single consultation (success or failure)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .oracle_response import OracleResponse


class FailureCause(str, Enum):
    """Why a consultation failed. Only logged and tested; the UI ignores it."""

    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    INVALID_RESPONSE = "invalid_response"


@dataclass(frozen=True)
class OracleResult:
    """Result of an oracle request. Exactly one of response/error is set."""

    response: Optional[OracleResponse]
    model: str
    error: Optional[str] = None
    cause: Optional[FailureCause] = None

    def __post_init__(self):
        if (self.response is None) == (self.error is None):
            raise ValueError("OracleResult needs exactly one of response or error")

    @classmethod
    def success(cls, response: OracleResponse, model: str) -> "OracleResult":
        return cls(response=response, model=model)

    @classmethod
    def failure(cls, cause: FailureCause, error: str, model: str) -> "OracleResult":
        return cls(response=None, model=model, error=error, cause=cause)

    @property
    def is_error(self) -> bool:
        """True if the consultation failed."""
        return self.error is not None
