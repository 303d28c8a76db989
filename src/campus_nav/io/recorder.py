# campus_nav/io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

from campus_nav.io.status_events import StatusEvent

log = logging.getLogger("campus_nav.recorder")


class Sink(Protocol):
    def write(self, ev: StatusEvent) -> None: ...


class JsonlSink:
    """One JSON object per status event; flushes so an operator can tail the file."""

    def __init__(self, fp=sys.stdout, *, flush: bool = True):
        self.fp, self.flush = fp, flush

    def write(self, ev: StatusEvent) -> None:
        self.fp.write(json.dumps(asdict(ev), default=str, sort_keys=True) + "\n")
        if self.flush:
            self.fp.flush()


class MemorySink:
    """Keeps events in order; `latest` answers "what did the operator last set on this path"."""

    def __init__(self):
        self.events: list[StatusEvent] = []
        self._latest: dict[str, StatusEvent] = {}

    def write(self, ev: StatusEvent) -> None:
        self.events.append(ev)
        path_id = getattr(ev, "path_id", None)
        if path_id is not None:
            self._latest[path_id] = ev

    def latest(self, path_id: str) -> StatusEvent | None:
        return self._latest.get(path_id)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev: StatusEvent):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                # a broken sink must never fail a status update
                log.exception("sink %s failed on %s", type(s).__name__, type(ev).__name__)
