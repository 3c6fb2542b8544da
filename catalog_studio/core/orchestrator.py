"""
Generation request lifecycle.

Owns the current selection, its generation parameters and the single
request state: Idle -> InFlight -> Success | Failed -> Idle.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Awaitable, Callable, Optional

from catalog_studio.utils.errors import GenerationError, ValidationError
from catalog_studio.utils.logging import logger
from catalog_studio.utils.security import is_valid_date
from catalog_studio.utils.typing import GenerationParameters, Item, LicenseType, default_expiry

# (code, licensee_name, assignee_name, expiry_date) -> payload
Generator = Callable[[Optional[str], str, str, str], Awaitable[str]]

class RequestStatus(Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    FAILED = "failed"

@dataclass(frozen=True)
class RequestState:
    status: RequestStatus = RequestStatus.IDLE
    payload: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls()

    @classmethod
    def in_flight(cls) -> "RequestState":
        return cls(RequestStatus.IN_FLIGHT)

    @classmethod
    def success(cls, payload: str) -> "RequestState":
        return cls(RequestStatus.SUCCESS, payload=payload)

    @classmethod
    def failed(cls, reason: str) -> "RequestState":
        return cls(RequestStatus.FAILED, reason=reason)

    @property
    def is_in_flight(self) -> bool:
        return self.status is RequestStatus.IN_FLIGHT

class RequestOrchestrator:
    def __init__(self, generate: Generator, today: Callable[[], date] = date.today):
        self._generate = generate
        self._today = today
        self._attempt = 0
        self.state = RequestState.idle()
        self.selection: Optional[Item] = None
        self.parameters = self._default_parameters()

    def _default_parameters(self) -> GenerationParameters:
        return GenerationParameters(expiry_date=default_expiry(self._today()))

    # --- selection & parameters ---

    def select(self, item: Item) -> bool:
        """Pick an item; parameters start from their defaults.

        Ignored while a request is in flight, so the pending result always
        belongs to the current selection.
        """
        if self.state.is_in_flight:
            logger.debug("orchestrator: selection of %s ignored while in flight", item.key)
            return False
        self.selection = item
        self.parameters = self._default_parameters()
        self.state = RequestState.idle()
        logger.info("orchestrator: selected %s", item.key)
        return True

    def set_expiry_offset(self, days: int) -> str:
        days = int(days)
        self.parameters.expiry_date = (self._today() + timedelta(days=days)).isoformat()
        return self.parameters.expiry_date

    def set_expiry_date(self, value: str) -> None:
        if not is_valid_date(value):
            raise ValidationError(f"Invalid expiry date: {value!r} (expected YYYY-MM-DD)")
        self.parameters.expiry_date = value

    def set_license_type(self, value: LicenseType | str) -> None:
        try:
            self.parameters.license_type = LicenseType(value)
        except ValueError as e:
            raise ValidationError(f"Unknown license type: {value!r}") from e

    def set_user_count(self, count: int) -> None:
        if isinstance(count, bool) or int(count) < 1:
            raise ValidationError("User count must be a positive integer")
        self.parameters.user_count = int(count)

    # --- request lifecycle ---

    def can_submit(self, licensee_name: str, assignee_name: str) -> bool:
        return (
            self.selection is not None
            and bool((licensee_name or "").strip())
            and bool((assignee_name or "").strip())
            and not self.state.is_in_flight
        )

    async def submit(self, licensee_name: str, assignee_name: str) -> bool:
        """
        Issue the generation request for the current selection.

        Returns False without touching state when the guard refuses the
        submission. Otherwise awaits the request and ends in Success or
        Failed, unless reset() ran in the meantime, in which case the late
        result is dropped.
        """
        if not self.can_submit(licensee_name, assignee_name):
            logger.debug("orchestrator: submit refused (state=%s)", self.state.status.value)
            return False

        item = self.selection
        expiry = self.parameters.expiry_date
        self._attempt += 1
        attempt = self._attempt
        self.state = RequestState.in_flight()
        logger.info("orchestrator: generating for %s (attempt %d)", item.key, attempt)

        try:
            payload = await self._generate(item.code, licensee_name.strip(), assignee_name.strip(), expiry)
        except GenerationError as e:
            self._finish(attempt, RequestState.failed(str(e) or "Generation failed"))
            return True
        except Exception as e:
            self._finish(attempt, RequestState.failed(f"Unexpected error: {e}"))
            raise

        if self._finish(attempt, RequestState.success(payload)):
            self.selection = None
            self.parameters = self._default_parameters()
        return True

    def _finish(self, attempt: int, state: RequestState) -> bool:
        if attempt != self._attempt:
            logger.debug("orchestrator: dropping stale result of attempt %d", attempt)
            return False
        self.state = state
        if state.status is RequestStatus.FAILED:
            logger.warning("orchestrator: generation failed: %s", state.reason)
        else:
            logger.info("orchestrator: generation succeeded")
        return True

    def acknowledge(self) -> None:
        """Close the result (or error) and return to Idle, keeping the selection."""
        if self.state.status in (RequestStatus.SUCCESS, RequestStatus.FAILED):
            self.state = RequestState.idle()

    def reset(self) -> None:
        """Back to Idle from any state; selection and parameters return to defaults."""
        if self.state.is_in_flight:
            self._attempt += 1  # invalidates the outstanding request
        self.state = RequestState.idle()
        self.selection = None
        self.parameters = self._default_parameters()
