"""
Advent calendar constants
"""
import os

# Grid layout used when rendering a calendar as text
DOORS_PER_LINE = 4
DOOR_REPRESENTATION_FORMAT = "[{content}]"
CANDY_REPRESENTATION_FORMAT = "{quantity}x{name}"
EMPTY_DOOR_CONTENT = "   "

# Size of the calendar the service starts with (December 1st - 24th)
ADVENT_DAYS = int(os.getenv("ADVENT_DAYS", "24"))

# Default contents cycle through these, quantity grows with the day
DEFAULT_CANDY_NAMES = [
    "Chocolate",
    "Gingerbread",
    "Marzipan",
    "Candy Cane",
    "Toffee",
    "Nougat",
]
