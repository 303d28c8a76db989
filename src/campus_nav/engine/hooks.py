# campus_nav/engine/hooks.py
from typing import Protocol


class EngineHooks(Protocol):
    def segment_dropped(self, segment, *, reason: str): ...
    def route_found(self, start_id: str, end_id: str, *, result, prefer_accessible: bool): ...
    def route_not_found(self, start_id: str, end_id: str, *, prefer_accessible: bool): ...
    def status_changed(self, ev): ...
    def status_ignored(self, from_id: str, to_id: str, **kw): ...


class NoopHooks:
    def segment_dropped(self, *_, **__):
        pass

    def route_found(self, *_, **__):
        pass

    def route_not_found(self, *_, **__):
        pass

    def status_changed(self, *_, **__):
        pass

    def status_ignored(self, *_, **__):
        pass
