from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import Percentage


class ThresholdCalculator(ABC):
    """Calculator interface (Strategy Pattern for threshold metrics)."""

    @abstractmethod
    def percentage(self, *, present: int, conducted: int) -> Percentage:
        raise NotImplementedError

    @abstractmethod
    def safe_leaves(self, *, present: int, conducted: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def classes_to_attend(self, *, present: int, conducted: int) -> int:
        raise NotImplementedError
