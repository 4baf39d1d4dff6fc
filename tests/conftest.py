from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
import pytest

from podracer.geometry.vector import Vector
from podracer.race.game import Game
from podracer.race.telemetry import PodTelemetry


def _telemetry(
    x: int = 0,
    y: int = 0,
    vx: int = 0,
    vy: int = 0,
    angle: int = 0,
    next_checkpoint_id: int = 0,
) -> PodTelemetry:
    return PodTelemetry(
        x=x, y=y, vx=vx, vy=vy, angle=angle, next_checkpoint_id=next_checkpoint_id
    )


@pytest.fixture
def telemetry() -> Callable[..., PodTelemetry]:
    return _telemetry


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Build a game whose lead pod starts from ``lead`` (others idle far away)."""

    def _make(
        checkpoints: Sequence[tuple[int, int]] = ((8000, 4500), (2000, 2000)),
        lead: PodTelemetry | None = None,
        laps: int = 3,
    ) -> Game:
        game = Game(laps, [Vector(x, y) for x, y in checkpoints])
        game.start_turn(
            [
                lead or _telemetry(),
                _telemetry(x=1000, y=2000),
                _telemetry(x=-5000, y=-5000),
                _telemetry(x=-6000, y=-6000),
            ]
        )
        return game

    return _make


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def stepping_clock() -> Callable[[float], Callable[[], float]]:
    """Fake monotonic clock advancing by ``step`` seconds on every read."""

    def _make(step: float, start: float = 0.0) -> Callable[[], float]:
        calls = 0

        def clock() -> float:
            nonlocal calls
            value = start + calls * step
            calls += 1
            return value

        return clock

    return _make
