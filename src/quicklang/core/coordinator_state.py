"""Observable state of the translation request coordinator."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quicklang.core.errors import ErrorKind


class Phase(Enum):
    IDLE = "idle"
    CHECKING_AVAILABILITY = "checking_availability"
    AWAITING_DOWNLOAD_CONSENT = "awaiting_download_consent"
    DOWNLOADING = "downloading"
    TRANSLATING = "translating"
    COMPLETED = "completed"
    FAILED = "failed"


_IN_FLIGHT = {
    Phase.CHECKING_AVAILABILITY,
    Phase.AWAITING_DOWNLOAD_CONSENT,
    Phase.DOWNLOADING,
    Phase.TRANSLATING,
}


@dataclass(frozen=True)
class CoordinatorState:
    """
    Single source of truth for what the UI renders.

    Only COMPLETED carries ``text`` and only FAILED carries ``error_kind``
    and ``message``; use the constructors below rather than building
    combinations by hand.
    """

    phase: Phase
    text: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "CoordinatorState":
        return cls(Phase.IDLE)

    @classmethod
    def checking(cls) -> "CoordinatorState":
        return cls(Phase.CHECKING_AVAILABILITY)

    @classmethod
    def awaiting_download_consent(cls) -> "CoordinatorState":
        return cls(Phase.AWAITING_DOWNLOAD_CONSENT)

    @classmethod
    def downloading(cls) -> "CoordinatorState":
        return cls(Phase.DOWNLOADING)

    @classmethod
    def translating(cls) -> "CoordinatorState":
        return cls(Phase.TRANSLATING)

    @classmethod
    def completed(cls, text: str) -> "CoordinatorState":
        return cls(Phase.COMPLETED, text=text)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> "CoordinatorState":
        return cls(Phase.FAILED, error_kind=kind, message=message)

    @property
    def is_terminal(self) -> bool:
        """True once a request has completed or failed."""
        return self.phase in (Phase.COMPLETED, Phase.FAILED)

    @property
    def is_in_flight(self) -> bool:
        """True while a request is live and cancellable."""
        return self.phase in _IN_FLIGHT
