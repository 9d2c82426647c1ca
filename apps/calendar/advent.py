"""
Advent Calendar state machine

Tracks the simulated day, which doors have been opened and the candies
behind them. Refusals (too early, out of range, already opened) are ordinary
results - False, None or an empty list - never exceptions, so callers can
speculatively try to advance the day or open a door.
"""
import logging
import os
from typing import Iterable, List, Optional

from apps.calendar.candy import Candy
from apps.calendar.constants import (
    DOORS_PER_LINE,
    DOOR_REPRESENTATION_FORMAT,
    EMPTY_DOOR_CONTENT,
)

logger = logging.getLogger(__name__)


def copy_candies(candies: Iterable[Candy]) -> List[Candy]:
    """Copy every candy so the result shares no state with the input"""
    return [candy.copy() for candy in candies]


class AdventCalendar:
    """
    An advent calendar with one door per candy.

    Day 0 is the day before the first door, so nothing can be opened until
    the day has been advanced at least once. Door numbers are 1-based.
    """

    def __init__(self, candies: Iterable[Candy]):
        self._backup = tuple(copy_candies(candies))
        self._max_days = len(self._backup)
        self.reset()

    @property
    def current_day(self) -> int:
        return self._current_day

    @property
    def max_days(self) -> int:
        return self._max_days

    @property
    def doors(self) -> List[bool]:
        """Snapshot of the door flags, index 0 is door 1"""
        return list(self._doors)

    def get_day(self) -> int:
        """Return the current day"""
        return self._current_day

    def next_day(self) -> bool:
        """Advance by one day. Returns False if the last door was already reached."""
        return self.next_days(1)

    def next_days(self, days: int) -> bool:
        """
        Advance the current day by `days`.

        The day only moves forward and never past the last door.

        Returns:
            True if the day was advanced, False if it was left unchanged
        """
        if days <= 0 or self._current_day + days > self._max_days:
            logger.debug(
                "Refused to advance %s day(s) from day %s of %s",
                days, self._current_day, self._max_days,
            )
            return False

        self._current_day += days
        return True

    def is_door_open(self, number: int) -> bool:
        """Door numbers outside the calendar are reported as closed"""
        return 1 <= number <= self._max_days and self._doors[number - 1]

    def _can_open(self, number: int) -> bool:
        return 1 <= number <= self._current_day and not self._doors[number - 1]

    def open_door(self, number: int) -> Optional[Candy]:
        """
        Open the door with the given number.

        A door can be opened once the current day has reached its number,
        and only once.

        Returns:
            The candy behind the door, or None if it cannot be or has already
            been opened. The candy belongs to the calendar and is replaced on
            reset().
        """
        if not self._can_open(number):
            logger.debug("Door %s cannot be opened on day %s", number, self._current_day)
            return None

        self._doors[number - 1] = True
        return self._candies[number - 1]

    def open_doors(self, numbers: Iterable[int]) -> List[Candy]:
        """Open each door in order, returning the candies of the doors that opened"""
        opened = []
        for number in numbers:
            candy = self.open_door(number)
            if candy is not None:
                opened.append(candy)
        return opened

    def number_of_unopened_doors(self) -> int:
        """Number of doors up to the current day that are still closed"""
        return self._doors[:self._current_day].count(False)

    def reset(self) -> None:
        """Close all doors, restore every candy and go back to day 0"""
        self._current_day = 0
        self._doors = [False] * self._max_days
        self._candies = copy_candies(self._backup)
        logger.debug("Calendar with %s doors reset", self._max_days)

    def render(self) -> str:
        lines = []
        for start in range(0, self._max_days, DOORS_PER_LINE):
            cells = []
            for index in range(start, min(start + DOORS_PER_LINE, self._max_days)):
                content = EMPTY_DOOR_CONTENT if self._doors[index] else self._candies[index].label
                cells.append(DOOR_REPRESENTATION_FORMAT.format(content=content))
            lines.append("".join(cells))
        return os.linesep.join(lines)

    def __len__(self):
        return self._max_days

    def __str__(self):
        return self.render()
