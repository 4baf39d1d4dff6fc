from __future__ import annotations

from pydantic import BaseModel, Field


class PlannerMetrics(BaseModel):
    """Running counters of the trajectory planner."""

    turns: int = Field(default=0, description="Number of completed searches")
    total_generations: int = Field(
        default=0, description="Total number of generations run"
    )
    last_turn_generations: int = Field(
        default=0, description="Generations completed during the last search"
    )
    starved_turns: int = Field(
        default=0, description="Searches that ended before a single generation"
    )
    best_score: float | None = Field(
        default=None, description="Score of the best genome of the last generation"
    )

    def record_generation(self, best_score: float) -> None:
        self.total_generations += 1
        self.last_turn_generations += 1
        self.best_score = best_score

    def record_search(self) -> None:
        self.turns += 1
        if self.last_turn_generations == 0:
            self.starved_turns += 1

    def start_search(self) -> None:
        self.last_turn_generations = 0

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()
