from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TimingConfig(BaseModel):
    """Per-turn search budgets, kept below the referee's hard limits."""

    initial_timeout_ms: float = Field(
        default=980.0, gt=0, description="Search budget of the first turn"
    )
    timeout_ms: float = Field(
        default=70.0, gt=0, description="Search budget of every later turn"
    )
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_budgets(self) -> TimingConfig:
        if self.timeout_ms > self.initial_timeout_ms:
            raise ValueError(
                f"timeout_ms ({self.timeout_ms}) must not exceed "
                f"initial_timeout_ms ({self.initial_timeout_ms})"
            )
        return self

    def budget(self, first_turn: bool) -> float:
        """Search budget in seconds."""
        ms = self.initial_timeout_ms if first_turn else self.timeout_ms
        return ms / 1000.0
