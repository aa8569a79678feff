from __future__ import annotations
from typing import Callable
from daraza_core.logger import get_logger
from daraza_core.storage.provider import SettingsStore
from daraza_core.utils import now_epoch

log = get_logger("daraza.RateLimit")

REMIT_RATE_LIMIT_PREFIX = "daraza_remit_rate_limit_"
RTP_RATE_LIMIT_PREFIX = "daraza_rtp_rate_limit_"


class RateLimiter:
    """
    Fixed-window attempt counter per actor, persisted in the settings store
    so that separate processes sharing a store share the budget.

    Defaults throttle manual remittances to 5 attempts per 5 minutes. Give
    each use its own prefix so their counters stay separate, e.g.
    RTP_RATE_LIMIT_PREFIX with limit=10 for checkout request-to-pay.
    """

    def __init__(
        self,
        store: SettingsStore,
        limit: int = 5,
        window_seconds: int = 300,
        now: Callable[[], float] = now_epoch,
        prefix: str = REMIT_RATE_LIMIT_PREFIX,
    ):
        self.store = store
        self.prefix = prefix
        self.limit = limit
        self.window_seconds = window_seconds
        self._now = now

    def _option(self, actor_id) -> str:
        return f"{self.prefix}{actor_id}"

    def _current(self, actor_id) -> dict:
        state = self.store.get(self._option(actor_id))
        if not state or self._now() >= state["window_start"] + self.window_seconds:
            return {"count": 0, "window_start": int(self._now())}
        return state

    def hit(self, actor_id) -> bool:
        """Record an attempt; False if the actor is already over the limit."""
        state = self._current(actor_id)
        if state["count"] >= self.limit:
            log.warning(f"Rate limit reached for {actor_id}")
            return False
        state["count"] += 1
        self.store.set(self._option(actor_id), state)
        return True

    def remaining(self, actor_id) -> int:
        return max(0, self.limit - self._current(actor_id)["count"])

    def reset(self, actor_id) -> None:
        self.store.delete(self._option(actor_id))
