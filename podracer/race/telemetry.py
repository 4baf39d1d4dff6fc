from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from podracer.race.constants import UNKNOWN_ANGLE


class PodTelemetry(BaseModel):
    """One pod record as sent by the referee each turn."""

    x: int
    y: int
    vx: int
    vy: int
    angle: int = Field(
        ge=UNKNOWN_ANGLE,
        lt=360,
        description="Absolute heading in degrees, -1 when unknown (first turn)",
    )
    next_checkpoint_id: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def has_angle(self) -> bool:
        return self.angle != UNKNOWN_ANGLE
