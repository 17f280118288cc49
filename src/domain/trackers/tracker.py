from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from domain.trackers.reports import Report
from domain.utils.conditions import arg_not_null

R = TypeVar("R", bound=Report)


class Tracker(ABC, Generic[R]):
    """Interface of a tracker filling reports of type ``R``."""

    __beta__ = True

    @abstractmethod
    def start(self, report: R, end_callback: Callable[[], None]) -> None:
        """Start tracking the target action.

        *report* must be empty or unused; *end_callback* is called once
        tracking ends.
        """

    @staticmethod
    def validate_start(report: Optional[R], end_callback: Optional[Callable[[], None]]) -> None:
        arg_not_null("report", report)
        arg_not_null("end_callback", end_callback)
