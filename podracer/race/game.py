from __future__ import annotations

from collections.abc import Sequence

from podracer.geometry.vector import Vector
from podracer.race.constants import PODS_PER_PLAYER
from podracer.race.pod import Pod
from podracer.race.telemetry import PodTelemetry

__all__ = ["Game", "GameState"]


class GameState:
    """Live pods of both players, refreshed from telemetry each turn."""

    def __init__(self) -> None:
        self.pods: list[Pod] = [Pod() for _ in range(PODS_PER_PLAYER)]
        self.opponent_pods: list[Pod] = [Pod() for _ in range(PODS_PER_PLAYER)]

    def start_turn(self, pods_data: Sequence[PodTelemetry], game: Game) -> None:
        if len(pods_data) != 2 * PODS_PER_PLAYER:
            raise ValueError(
                f"Expected {2 * PODS_PER_PLAYER} pod records, got {len(pods_data)}"
            )
        for i in range(PODS_PER_PLAYER):
            self.pods[i].update(pods_data[i], game)
            self.opponent_pods[i].update(pods_data[i + PODS_PER_PLAYER], game)

    @property
    def lead_pod(self) -> Pod:
        return self.pods[0]


class Game:
    """Race course plus the world snapshot for the current turn."""

    def __init__(self, laps: int, checkpoints: Sequence[Vector]):
        if not checkpoints:
            raise ValueError("A race needs at least one checkpoint")
        self.laps = laps
        self.checkpoints: tuple[Vector, ...] = tuple(checkpoints)
        self.turn = 0
        self.state = GameState()

    @property
    def is_first_turn(self) -> bool:
        return self.turn == 0

    def checkpoint(self, index: int) -> Vector:
        """Checkpoint ``index`` on the cyclic course."""
        return self.checkpoints[index % len(self.checkpoints)]

    def start_turn(self, pods_data: Sequence[PodTelemetry]) -> None:
        self.state.start_turn(pods_data, self)

    def close_turn(self) -> None:
        self.turn += 1
