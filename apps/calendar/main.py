"""
Advent Calendar Service

Drives a single in-memory advent calendar over HTTP. Nothing is persisted;
restarting the service starts a fresh calendar.
"""
import logging
import os

from fastapi import FastAPI, APIRouter, Depends
from fastapi.responses import PlainTextResponse

from apps.shared.auth import get_api_key
from apps.shared.cors import setup_cors
from apps.shared.errors import setup_error_handlers
from apps.shared.headers import setup_response_headers
from apps.calendar.advent import AdventCalendar
from apps.calendar.store import CalendarStore, get_store
from apps.calendar.schemas import (
    AdvanceRequest,
    AdvanceResponse,
    CalendarState,
    CandySchema,
    DoorStatus,
    OpenDoorResponse,
    OpenDoorsRequest,
    OpenDoorsResponse,
    SeedRequest,
    UnopenedResponse,
)

logger = logging.getLogger("calendar-service")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(
    title="Calendar Service",
    version="1.0.0",
    description="Advent calendar with doors that open as the days go by",
    docs_url="/calendar/docs",
    openapi_url="/calendar/openapi.json",
)

setup_cors(app)
setup_response_headers(app)
setup_error_handlers(app)

router = APIRouter(prefix="/calendar", tags=["calendar"])


def snapshot(calendar: AdventCalendar) -> CalendarState:
    return CalendarState(
        day=calendar.get_day(),
        max_days=calendar.max_days,
        doors=calendar.doors,
        unopened=calendar.number_of_unopened_doors(),
        render=calendar.render(),
    )


# ──────────────────────────────────────────────────────────────────────────────
# Public endpoints (no auth required)
# ──────────────────────────────────────────────────────────────────────────────

@router.get("/health")
def health(store: CalendarStore = Depends(get_store)):
    """Health check endpoint - returns service status and calendar size"""
    with store.lock:
        doors = store.calendar.max_days
    return {"status": "ok", "service": "calendar", "doors": doors}


@router.get("", response_model=CalendarState)
def get_calendar(store: CalendarStore = Depends(get_store)):
    """Current day, door flags and the rendered grid"""
    with store.lock:
        return snapshot(store.calendar)


@router.get("/render", response_class=PlainTextResponse)
def render_calendar(store: CalendarStore = Depends(get_store)):
    """The calendar grid as plain text, four doors per line"""
    with store.lock:
        return store.calendar.render()


@router.get("/doors/unopened", response_model=UnopenedResponse)
def unopened_doors(store: CalendarStore = Depends(get_store)):
    """Doors that could be opened today but are still closed"""
    with store.lock:
        calendar = store.calendar
        return UnopenedResponse(
            day=calendar.get_day(),
            unopened=calendar.number_of_unopened_doors(),
        )


@router.get("/doors/{number}", response_model=DoorStatus)
def door_status(number: int, store: CalendarStore = Depends(get_store)):
    """Whether a door is open. Unknown door numbers are reported as closed."""
    with store.lock:
        return DoorStatus(number=number, open=store.calendar.is_door_open(number))


@router.post("/doors/open", response_model=OpenDoorsResponse)
def open_doors(request: OpenDoorsRequest, store: CalendarStore = Depends(get_store)):
    """
    Open several doors in order.

    Doors that cannot be opened are skipped. Returns the candies of the
    doors that did open.
    """
    with store.lock:
        candies = store.calendar.open_doors(request.numbers)
        opened = [CandySchema.from_candy(candy) for candy in candies]
    logger.info(f"Opened {len(opened)} of {len(request.numbers)} requested doors")
    return OpenDoorsResponse(candies=opened)


@router.post("/doors/{number}/open", response_model=OpenDoorResponse)
def open_door(number: int, store: CalendarStore = Depends(get_store)):
    """
    Open a single door.

    Too early, unknown and already opened doors answer with opened=false
    rather than an error.
    """
    with store.lock:
        candy = store.calendar.open_door(number)
        if candy is None:
            return OpenDoorResponse(number=number, opened=False)
        logger.info(f"Door {number} opened: {candy}")
        return OpenDoorResponse(number=number, opened=True, candy=CandySchema.from_candy(candy))


# ──────────────────────────────────────────────────────────────────────────────
# Admin endpoints (API key required)
# ──────────────────────────────────────────────────────────────────────────────

@router.post("/next-day", response_model=AdvanceResponse)
def next_day(
    store: CalendarStore = Depends(get_store),
    api_key: str = Depends(get_api_key),
):
    """Advance the calendar by one day"""
    with store.lock:
        advanced = store.calendar.next_day()
        day = store.calendar.get_day()
    if advanced:
        logger.info(f"Calendar advanced to day {day}")
    return AdvanceResponse(advanced=advanced, day=day)


@router.post("/next-days", response_model=AdvanceResponse)
def next_days(
    request: AdvanceRequest,
    store: CalendarStore = Depends(get_store),
    api_key: str = Depends(get_api_key),
):
    """
    Advance the calendar by several days.

    Non-positive values and advancing past the last door leave the day
    unchanged and answer with advanced=false.
    """
    with store.lock:
        advanced = store.calendar.next_days(request.days)
        day = store.calendar.get_day()
    if advanced:
        logger.info(f"Calendar advanced by {request.days} to day {day}")
    return AdvanceResponse(advanced=advanced, day=day)


@router.post("/reset", response_model=CalendarState)
def reset_calendar(
    store: CalendarStore = Depends(get_store),
    api_key: str = Depends(get_api_key),
):
    """Close every door, restore all candies and return to day 0"""
    with store.lock:
        store.calendar.reset()
        state = snapshot(store.calendar)
    logger.info("Calendar reset")
    return state


@router.post("/seed", response_model=CalendarState)
def seed_calendar(
    request: SeedRequest,
    store: CalendarStore = Depends(get_store),
    api_key: str = Depends(get_api_key),
):
    """
    Replace the calendar with new contents

    Request body lists the candies door by door:
    {
      "candies": [
        { "name": "Chocolate", "quantity": 2 },
        { "name": "Marzipan", "quantity": 1 }
      ]
    }
    """
    calendar = store.replace(candy.to_candy() for candy in request.candies)
    with store.lock:
        return snapshot(calendar)


app.include_router(router)
