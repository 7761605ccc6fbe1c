"""
Review submission flow.

State lives in an immutable ``SubmissionState`` and only changes through
``reduce(state, event)``:

    Idle (is_loading=False) --SubmitStarted--> Submitting (is_loading=True)
    Submitting --SubmitSettled--> Idle

Overlapping submits are not serialized: each one proceeds on its own and the
first to settle clears ``is_loading`` even if another is still in flight.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, Union

from reviewledger.core.config import ClientConfig

logger = logging.getLogger("reviewledger.client")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ReviewDraft:
    journal_id: str = ""
    manuscript_id: str = ""
    manuscript_hash: str = ""
    timestamp: datetime = field(default_factory=_now)
    recommendation: Optional[Union[int, str]] = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "journalId": self.journal_id,
            "manuscriptId": self.manuscript_id,
            "manuscriptHash": self.manuscript_hash,
            "timestamp": self.timestamp.isoformat(),
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class SubmissionState:
    review: ReviewDraft
    account: str
    is_loading: bool = False
    last_error: Optional[str] = None


@dataclass(frozen=True)
class DateChanged:
    date: datetime


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSettled:
    error: Optional[str] = None


Event = Union[DateChanged, SubmitStarted, SubmitSettled]


def initial_state(account: Optional[str] = None) -> SubmissionState:
    return SubmissionState(
        review=ReviewDraft(),
        account=account or ClientConfig.from_env().account,
    )


def reduce(state: SubmissionState, event: Event) -> SubmissionState:
    """Return the next state; ``state`` itself is never modified."""
    if isinstance(event, DateChanged):
        return replace(state, review=replace(state.review, timestamp=event.date))
    if isinstance(event, SubmitStarted):
        return replace(state, is_loading=True, last_error=None)
    if isinstance(event, SubmitSettled):
        return replace(state, is_loading=False, last_error=event.error)
    raise TypeError(f"unknown event: {event!r}")


class ReviewSubmitter(Protocol):
    async def add_review(self, account: str, review: Any) -> Any: ...


class ReviewSubmissionFlow:
    def __init__(self, api: ReviewSubmitter, state: Optional[SubmissionState] = None):
        self.api = api
        self.state = state or initial_state()

    def dispatch(self, event: Event) -> SubmissionState:
        self.state = reduce(self.state, event)
        return self.state

    def change_date(self, date: datetime) -> SubmissionState:
        return self.dispatch(DateChanged(date))

    async def submit(self, data: Optional[dict[str, Any]] = None) -> Optional[Any]:
        """
        Submit ``data`` (defaults to the current draft) for the session account.

        Failures are logged and kept on ``state.last_error``; they are not
        raised to the caller.
        """
        payload = data if data is not None else self.state.review.to_payload()
        account = self.state.account
        self.dispatch(SubmitStarted())
        try:
            result = await self.api.add_review(account, payload)
        except Exception as e:
            logger.warning("review submission for %s failed: %s", account, e)
            self.dispatch(SubmitSettled(error=str(e)))
            return None
        logger.info("review submitted for %s: %s", account, result)
        self.dispatch(SubmitSettled())
        return result
