from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PlannerConfig(BaseModel):
    """Configuration options controlling GeneticPlanner behaviour."""

    population_size: int = Field(default=8, ge=1)
    horizon: int = Field(
        default=6, ge=1, description="Number of future turns a genome plans for"
    )
    shield_enabled: bool = Field(
        default=False,
        description="Let genes decode to SHIELD when their shield coefficient is high",
    )
    initial_thrust_coeff: float | None = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Thrust coefficient of freshly generated genes (None = random)",
    )
    seed: int | None = Field(
        default=None, description="Seed for the planner's random generator"
    )
    model_config = ConfigDict(frozen=True)
