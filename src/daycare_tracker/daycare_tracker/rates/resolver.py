from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Mapping, Union

from .model import RateSet


class RateResolver:
    """Pick the rate set that applies to a calendar year.

    Exact year first, else the closest earlier year, else zero rates.
    Rates of a later year never apply retroactively.
    """

    def __init__(self, rates: Union[Mapping[int, RateSet], Iterable[RateSet]]):
        if isinstance(rates, Mapping):
            by_year = {int(y): r for y, r in rates.items()}
        else:
            by_year = {int(r.year): r for r in rates}
        self._by_year = by_year
        self._years = sorted(by_year)

    def resolve(self, year: int) -> RateSet:
        year = int(year)
        exact = self._by_year.get(year)
        if exact is not None:
            return exact

        # Predecessor query: index of the largest known year <= target.
        idx = bisect_right(self._years, year)
        if idx:
            return self._by_year[self._years[idx - 1]]
        return RateSet.zero(year)
