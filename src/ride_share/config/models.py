from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    events: bool = False  # mirror business events as JSON lines on stderr


# ----------------- RIDES ---------------------


class _RideFields(BaseModel):
    model_config = ConfigDict(extra="forbid")
    pickup: str
    dropoff: str
    distance_mi: float

    @field_validator("distance_mi")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v < 0:
            raise ValueError(f"{info.field_name} must be finite and >= 0")
        return v


class BaseRideModel(_RideFields):
    kind: Literal["base"] = "base"


class StandardRideModel(_RideFields):
    kind: Literal["standard"] = "standard"


class PremiumRideModel(_RideFields):
    kind: Literal["premium"] = "premium"
    luxury_multiplier: float = Field(default=2.0, ge=0.0, allow_inf_nan=False)


RideUnion = Annotated[
    BaseRideModel | StandardRideModel | PremiumRideModel,
    Field(discriminator="kind"),
]


# ----------------- PEOPLE ---------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rating: float = Field(default=5.0, ge=0.0, le=5.0)
    rides: list[str] = Field(default_factory=list)  # keys into ScenarioModel.rides


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rides: list[str] = Field(default_factory=list)


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    rides: dict[str, RideUnion] = Field(default_factory=dict)  # built in declaration order
    drivers: list[DriverModel] = Field(default_factory=list)
    riders: list[RiderModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_refs(self):
        for group, people in (("driver", self.drivers), ("rider", self.riders)):
            ids = [p.id for p in people]
            if len(ids) != len(set(ids)):
                raise ValueError(f"duplicate {group} ids: {sorted(ids)}")
            for p in people:
                missing = [k for k in p.rides if k not in self.rides]
                if missing:
                    raise ValueError(f"{group} {p.id} references unknown rides {missing}")
        return self
