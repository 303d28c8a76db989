# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.config.models import CampusModel
from campus_nav.domain.graph_builder import build_graph
from campus_nav.domain.routing.route_engine import RouteEngine
from campus_nav.engine.hooks import NoopHooks
from campus_nav.io.engine_logging import EngineLogging  # JSON logs
from campus_nav.io.recorder import JsonlSink, Recorder, Sink
from campus_nav.runtime.registries import make_accessibility


@dataclass
class App:
    config: CampusModel
    engine: RouteEngine
    recorder: Recorder | None


def build(
    cfg: CampusModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, CampusModel) else CampusModel.model_validate(cfg)

    # 1) Hooks (logging + status change recording)
    recorder = Recorder(*(sinks or (JsonlSink(),))) if use_logging else None
    hooks = (
        EngineLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph
    nodes = build_graph(model.locations, model.segments, hooks=hooks)

    # 3) Engine
    engine = RouteEngine(
        nodes,
        accessibility=make_accessibility(model.routing.accessibility),
        accessibility_penalty=model.routing.accessibility_penalty,
        walking_speed=model.routing.walking_speed,
        hooks=hooks,
        run_id=model.run_id,
    )
    return App(model, engine, recorder)
