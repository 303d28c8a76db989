# campus_nav/io/status_events.py

from dataclasses import dataclass
from typing import Literal


# Base type for operator-facing events (emitted after a mutation is applied)
@dataclass
class StatusEvent:
    run_id: str
    seq: int  # mutation sequence within one engine (for total ordering)
    name: str  # stable event name


@dataclass
class PathStatusChanged(StatusEvent):
    path_id: str
    from_id: str
    to_id: str
    is_available: bool
    source: Literal["endpoints", "path_id"] = "endpoints"
    status: str | None = None  # open/closed/construction when set by path id
