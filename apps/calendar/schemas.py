"""
Pydantic schemas for the Calendar API.

Defines request/response models with validation.
"""
from typing import Optional
from pydantic import BaseModel, Field

from apps.calendar.candy import Candy


class CandySchema(BaseModel):
    """A candy as sent and returned by the API."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=0)

    @classmethod
    def from_candy(cls, candy: Candy) -> "CandySchema":
        return cls(**candy.to_dict())

    def to_candy(self) -> Candy:
        return Candy.from_dict(self.model_dump())


class SeedRequest(BaseModel):
    """Contents of a new calendar, door 1 first. May be empty."""
    candies: list[CandySchema] = Field(default_factory=list)


class AdvanceRequest(BaseModel):
    days: int


class OpenDoorsRequest(BaseModel):
    numbers: list[int] = Field(default_factory=list)


class CalendarState(BaseModel):
    """Snapshot of the whole calendar."""
    day: int
    max_days: int
    doors: list[bool]
    unopened: int
    render: str


class AdvanceResponse(BaseModel):
    advanced: bool
    day: int


class DoorStatus(BaseModel):
    number: int
    open: bool


class OpenDoorResponse(BaseModel):
    number: int
    opened: bool
    candy: Optional[CandySchema] = None


class OpenDoorsResponse(BaseModel):
    candies: list[CandySchema]


class UnopenedResponse(BaseModel):
    day: int
    unopened: int
