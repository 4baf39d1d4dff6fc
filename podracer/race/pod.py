from __future__ import annotations

import math
from typing import TYPE_CHECKING

from podracer.geometry.vector import Vector, round_half_up
from podracer.race.constants import (
    AIM_DISTANCE,
    BOOST_THRUST,
    BOOST_TOKEN,
    CHECKPOINT_RADIUS,
    DRAG_COEFF,
    INITIAL_BOOST_COUNT,
    SHIELD_TOKEN,
)
from podracer.race.instruction import Instruction
from podracer.race.telemetry import PodTelemetry

if TYPE_CHECKING:
    from podracer.race.game import Game

__all__ = ["Pod"]


class Pod:
    """Physical state of one racer.

    Live pods are refreshed from telemetry every turn; ``simulate`` never
    mutates and returns a fresh pod, so simulated copies can be thrown away.
    """

    __slots__ = ("boost_count", "pos", "speed", "angle", "next_checkpoint_id")

    def __init__(
        self,
        boost_count: int = INITIAL_BOOST_COUNT,
        pos: Vector | None = None,
        speed: Vector | None = None,
        angle: float = 0,
        next_checkpoint_id: int = 0,
    ):
        self.boost_count = boost_count
        self.pos = pos if pos is not None else Vector(0, 0)
        self.speed = speed if speed is not None else Vector(0, 0)
        self.angle = angle
        self.next_checkpoint_id = next_checkpoint_id

    def update(self, telemetry: PodTelemetry, game: Game) -> None:
        """Overwrite the physical state with this turn's telemetry.

        The boost counter is not part of telemetry and is left untouched.
        """
        self.pos = Vector(telemetry.x, telemetry.y)
        self.speed = Vector(telemetry.vx, telemetry.vy)
        self.next_checkpoint_id = telemetry.next_checkpoint_id
        if telemetry.has_angle:
            self.angle = telemetry.angle
        else:
            target = game.checkpoint(self.next_checkpoint_id)
            self.angle = round_half_up(self.pos.angle_to(target))

    def simulate(self, instruction: Instruction, game: Game) -> Pod:
        """Advance one referee step under ``instruction``."""
        next_angle = round_half_up(self.angle + instruction.angle)

        boosting = instruction.boost and self.boost_count > 0
        if boosting:
            thrust = BOOST_THRUST
        elif instruction.shield:
            thrust = 0
        else:
            thrust = instruction.thrust

        heading = math.radians(next_angle)
        speed = self.speed.add(
            Vector(thrust * math.cos(heading), thrust * math.sin(heading))
        )
        next_pos = self.pos.add(speed).round()
        next_speed = speed.multiply(DRAG_COEFF).truncate()
        next_boost = self.boost_count - 1 if boosting else self.boost_count

        next_checkpoint_id = self.next_checkpoint_id
        if next_pos.distance(game.checkpoint(self.next_checkpoint_id)) < CHECKPOINT_RADIUS:
            next_checkpoint_id += 1

        return Pod(next_boost, next_pos, next_speed, next_angle, next_checkpoint_id)

    def aim_point(self, instruction: Instruction) -> Vector:
        heading = math.radians((self.angle + instruction.angle) % 360)
        return Vector(
            self.pos.x + round_half_up(math.cos(heading) * AIM_DISTANCE),
            self.pos.y + round_half_up(math.sin(heading) * AIM_DISTANCE),
        )

    def render(self, instruction: Instruction) -> str:
        """Format ``instruction`` as a referee command line.

        Consumes a live boost charge when boosting, so call it once per turn.
        """
        target = self.aim_point(instruction)

        if instruction.shield:
            token = SHIELD_TOKEN
        elif instruction.boost and self.boost_count > 0:
            self.boost_count -= 1
            token = BOOST_TOKEN
        else:
            token = str(round_half_up(instruction.thrust))

        return f"{int(target.x)} {int(target.y)} {token}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pod):
            return NotImplemented
        return (
            self.boost_count == other.boost_count
            and self.pos == other.pos
            and self.speed == other.speed
            and self.angle == other.angle
            and self.next_checkpoint_id == other.next_checkpoint_id
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"Pod(pos={self.pos}, speed={self.speed}, angle={self.angle}, "
            f"boost_count={self.boost_count}, next_checkpoint_id={self.next_checkpoint_id})"
        )
