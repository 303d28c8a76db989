# campus_nav/io/engine_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from campus_nav.engine.hooks import NoopHooks
from campus_nav.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="campus_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class EngineLogging(NoopHooks):
    """
    Structured JSON logs for graph building, route queries and path status changes.
    Status changes are also forwarded to the recorder, if one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self.queries = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _shape_segment(segment) -> dict:
        if hasattr(segment, "model_dump"):
            return segment.model_dump()
        if is_dataclass(segment):
            return asdict(segment)
        return dict(segment) if isinstance(segment, dict) else {"segment": repr(segment)}

    # --------------------------------------------------------

    # graph build

    def segment_dropped(self, segment, *, reason: str):
        self._emit("DEBUG", "segment_dropped", reason=reason, **self._shape_segment(segment))

    # queries

    def route_found(self, start_id, end_id, *, result, prefer_accessible: bool):
        self.queries += 1
        if self.debug:
            self._emit(
                "DEBUG",
                "route_found",
                start_id=start_id,
                end_id=end_id,
                prefer_accessible=prefer_accessible,
                hops=len(result.path) - 1,
                distance=result.distance,
                eta_min=result.estimated_time,
            )

    def route_not_found(self, start_id, end_id, *, prefer_accessible: bool):
        self.queries += 1
        self._emit(
            "INFO",
            "route_not_found",
            start_id=start_id,
            end_id=end_id,
            prefer_accessible=prefer_accessible,
        )

    # ------------- Status changes --------------------------

    def status_changed(self, ev):
        data = asdict(ev)
        name = data.pop("name")
        data.pop("run_id", None)
        self._emit("INFO", name, **data)
        if self.recorder:
            self.recorder.emit(ev)

    def status_ignored(self, from_id, to_id, **extra):
        if self.debug:
            self._emit("DEBUG", "status_ignored", from_id=from_id, to_id=to_id, **extra)
