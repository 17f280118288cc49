from domain.trackers.reports import Report
from domain.trackers.tracker import Tracker

__all__ = [
    "Report",
    "Tracker",
]
