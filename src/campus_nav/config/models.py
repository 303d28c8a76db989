from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

SegmentStatus = Literal["open", "closed", "construction"]
SEGMENT_STATUSES: tuple[str, ...] = ("open", "closed", "construction")


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- CAMPUS DATA ---------------------


class LocationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    lat: float
    lng: float
    name: str | None = None
    accessible: bool = True

    @field_validator("lat", "lng")
    @classmethod
    def _finite(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        return v


class SegmentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    id: str | None = None
    from_id: str = Field(alias="fromId")
    to_id: str = Field(alias="toId")
    distance: float  # meters
    status: SegmentStatus = "open"
    is_accessible: bool = Field(default=True, alias="isAccessible")
    name: str | None = None

    @field_validator("distance")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        # NaN/Inf would poison every later comparison in the search
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @property
    def path_id(self) -> str:
        return self.id if self.id is not None else f"{self.from_id}-{self.to_id}"


# ----------------- ACCESSIBILITY ---------------------


class AccessibilityAlwaysModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["always"] = "always"


class AccessibilitySegmentFlagModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["segment_flag"] = "segment_flag"
    check_locations: bool = True


AccessibilityUnion = Annotated[
    AccessibilityAlwaysModel | AccessibilitySegmentFlagModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    walking_speed: float = 80.0  # meters per minute
    accessibility_penalty: float = 1.5
    accessibility: AccessibilityUnion = Field(default_factory=AccessibilityAlwaysModel)

    @field_validator("walking_speed")
    @classmethod
    def _positive(cls, v: float) -> float:
        if not (isfinite(v) and v > 0):
            raise ValueError("walking_speed must be > 0")
        return v

    @field_validator("accessibility_penalty")
    @classmethod
    def _penalty(cls, v: float) -> float:
        if not (isfinite(v) and v >= 1.0):
            raise ValueError("accessibility_penalty must be >= 1")
        return v


class CampusModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    locations: list[LocationModel] = Field(default_factory=list)
    segments: list[SegmentModel] = Field(default_factory=list)
    routing: RoutingModel = RoutingModel()
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _unique_location_ids(self):
        seen: set[str] = set()
        for loc in self.locations:
            if loc.id in seen:
                raise ValueError(f"duplicate location id {loc.id!r}")
            seen.add(loc.id)
        return self
