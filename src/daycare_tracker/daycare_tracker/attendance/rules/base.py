from __future__ import annotations

from abc import ABC, abstractmethod


class MealRule(ABC):
    """Strategy Pattern: decide whether an attendance interval covers a meal."""

    @abstractmethod
    def covers(self, *, check_in: int, check_out: int) -> bool:
        raise NotImplementedError
