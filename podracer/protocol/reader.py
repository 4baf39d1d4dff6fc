"""Line protocol of the referee: race header and per-turn pod records."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from podracer.exceptions import EndOfInput, ProtocolError
from podracer.geometry.vector import Vector
from podracer.race.constants import PODS_PER_PLAYER
from podracer.race.telemetry import PodTelemetry

__all__ = ["RaceHeader", "parse_ints", "read_pod", "read_race_header", "read_turn"]

ReadLine = Callable[[], str]

POD_FIELDS = ("x", "y", "vx", "vy", "angle", "next_checkpoint_id")


class RaceHeader(BaseModel):
    """Static race description sent once before the first turn."""

    laps: int = Field(ge=1)
    checkpoints: list[Vector] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


def _next_line(readline: ReadLine) -> str:
    line = readline()
    if not line:
        raise EndOfInput("Referee closed the input stream")
    return line.strip()


def parse_ints(line: str, expected: int | None = None) -> list[int]:
    tokens = line.split()
    if expected is not None and len(tokens) < expected:
        raise ProtocolError(f"Expected {expected} integers, got {line!r}")
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise ProtocolError(f"Non-integer token in {line!r}") from exc


def read_race_header(readline: ReadLine) -> RaceHeader:
    laps = parse_ints(_next_line(readline), expected=1)[0]
    count = parse_ints(_next_line(readline), expected=1)[0]
    if count < 1:
        raise ProtocolError(f"Checkpoint count must be positive, got {count}")

    checkpoints = []
    for _ in range(count):
        x, y = parse_ints(_next_line(readline), expected=2)[:2]
        checkpoints.append(Vector(x, y))

    try:
        return RaceHeader(laps=laps, checkpoints=checkpoints)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid race header: {exc}") from exc


def read_pod(line: str) -> PodTelemetry:
    values = parse_ints(line, expected=len(POD_FIELDS))
    if len(values) != len(POD_FIELDS):
        raise ProtocolError(
            f"Expected {len(POD_FIELDS)} integers per pod, got {len(values)} in {line!r}"
        )
    try:
        return PodTelemetry(**dict(zip(POD_FIELDS, values)))
    except ValidationError as exc:
        raise ProtocolError(f"Invalid pod record {line!r}: {exc}") from exc


def read_turn(readline: ReadLine) -> list[PodTelemetry]:
    """Read the four pod records of one turn: own pods first, then opponents."""
    return [read_pod(_next_line(readline)) for _ in range(2 * PODS_PER_PLAYER)]
