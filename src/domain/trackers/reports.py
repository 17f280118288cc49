from __future__ import annotations

from abc import ABC


class Report(ABC):
    """Base class for reports.

    A report is handed to a tracker empty and collects whatever the
    tracker observes.
    """

    __beta__ = True

    def __new__(cls, *args: object, **kwargs: object) -> "Report":
        if cls is Report:
            raise TypeError("Report is abstract and cannot be instantiated directly")
        return super().__new__(cls)
