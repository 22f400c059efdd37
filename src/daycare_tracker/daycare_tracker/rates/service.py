from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.clock import now_local
from ..common.validators import require_rate, require_year
from ..core.app_logger import get_logger
from ..core.constants import DEFAULT_RATE_YEAR_MAX, DEFAULT_RATE_YEAR_MIN, RATES
from ..realtime.hub import SnapshotHub
from ..users.service import require_uid
from .model import RateSet
from .repository import RateRepository
from .resolver import RateResolver

logger = get_logger(__name__)


class RateService:
    """Use case: maintain the yearly reimbursement rates."""

    def __init__(
        self,
        rates: RateRepository,
        hub: Optional[SnapshotHub] = None,
        *,
        min_year: int = DEFAULT_RATE_YEAR_MIN,
        max_year: int = DEFAULT_RATE_YEAR_MAX,
    ):
        self._rates = rates
        self._hub = hub
        self._min_year = int(min_year)
        self._max_year = int(max_year)

    def save_rates(
        self,
        uid: Optional[str],
        *,
        year: Any,
        breakfast: Any,
        snack: Any,
        lunch: Any,
        now: Optional[datetime] = None,
    ) -> RateSet:
        uid = require_uid(uid)
        # Validate everything before touching the store.
        rate_set = RateSet(
            year=require_year(year, min_year=self._min_year, max_year=self._max_year),
            breakfast=require_rate(breakfast, "Breakfast rate"),
            snack=require_rate(snack, "Snack rate"),
            lunch=require_rate(lunch, "Lunch rate"),
            updated_at=(now or now_local()).isoformat(timespec="seconds"),
        )

        self._rates.put(
            uid,
            str(rate_set.year),
            {
                "year": rate_set.year,
                "breakfast": rate_set.breakfast,
                "snack": rate_set.snack,
                "lunch": rate_set.lunch,
                "updated_at": rate_set.updated_at,
            },
        )
        logger.info("saved rates for %s", rate_set.year)
        if self._hub:
            self._hub.refresh(uid, RATES, lambda: self._rates.list_all(uid))
        return rate_set

    def list_rates(self, uid: Optional[str]) -> Sequence[RateSet]:
        return list(self._rates.list_all(require_uid(uid)))

    def resolver(self, uid: Optional[str]) -> RateResolver:
        return RateResolver(self.list_rates(uid))

    def resolve(self, uid: Optional[str], year: int) -> RateSet:
        return self.resolver(uid).resolve(year)
