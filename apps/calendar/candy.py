"""
Candy - the reward item hidden behind an advent calendar door
"""
from typing import Any, Dict

from apps.calendar.constants import CANDY_REPRESENTATION_FORMAT


class Candy:
    """
    A named quantity of sweets.

    Each candy has:
    - name: What is behind the door (e.g. "Chocolate")
    - quantity: How many pieces
    """

    def __init__(self, name: str, quantity: int):
        self.name = name
        self.quantity = quantity

    def copy(self) -> "Candy":
        """Return an independent duplicate of this candy"""
        return Candy(self.name, self.quantity)

    @property
    def label(self) -> str:
        return CANDY_REPRESENTATION_FORMAT.format(quantity=self.quantity, name=self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert candy to dictionary for API responses"""
        return {"name": self.name, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candy":
        return cls(name=data["name"], quantity=data["quantity"])

    def __eq__(self, other):
        if not isinstance(other, Candy):
            return NotImplemented
        return self.name == other.name and self.quantity == other.quantity

    def __hash__(self):
        return hash((self.name, self.quantity))

    def __repr__(self):
        return f"Candy(name={self.name!r}, quantity={self.quantity!r})"

    def __str__(self):
        return self.label
