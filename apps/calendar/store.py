"""
In-memory calendar store

The calendar itself assumes exclusive access, so the service keeps exactly
one instance behind a lock and routes every request through it.
"""
import logging
import threading
from typing import Iterable, List

from apps.calendar.advent import AdventCalendar
from apps.calendar.candy import Candy
from apps.calendar.constants import ADVENT_DAYS, DEFAULT_CANDY_NAMES

logger = logging.getLogger(__name__)


def default_candies(days: int = ADVENT_DAYS) -> List[Candy]:
    """Build the contents the service starts with"""
    return [
        Candy(DEFAULT_CANDY_NAMES[i % len(DEFAULT_CANDY_NAMES)], i // len(DEFAULT_CANDY_NAMES) + 1)
        for i in range(days)
    ]


class CalendarStore:
    """Holds the service's single calendar and the lock guarding it"""

    def __init__(self, candies: Iterable[Candy]):
        self.lock = threading.Lock()
        self._calendar = AdventCalendar(candies)

    @property
    def calendar(self) -> AdventCalendar:
        """Only touch the calendar while holding `lock`"""
        return self._calendar

    def replace(self, candies: Iterable[Candy]) -> AdventCalendar:
        """Swap in a freshly constructed calendar"""
        calendar = AdventCalendar(candies)
        with self.lock:
            self._calendar = calendar
        logger.info(f"Calendar replaced with {len(calendar)} doors")
        return calendar


store = CalendarStore(default_candies())


def get_store() -> CalendarStore:
    """
    Dependency for the calendar store
    Usage in FastAPI endpoints:

    @router.get("/endpoint")
    def endpoint(store: CalendarStore = Depends(get_store)):
        with store.lock:
            store.calendar.get_day()
    """
    return store
