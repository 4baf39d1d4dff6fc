from __future__ import annotations

from dataclasses import dataclass

from podracer.race.constants import MAX_THRUST, MAX_TURN_DEGREES

__all__ = ["Instruction"]


@dataclass(frozen=True)
class Instruction:
    """One control decision for one pod.

    ``angle`` is relative to the pod's current heading. ``shield`` and
    ``boost`` are mutually exclusive.
    """

    angle: float = 0.0
    thrust: float = 0.0
    shield: bool = False
    boost: bool = False

    def __post_init__(self) -> None:
        if not -MAX_TURN_DEGREES <= self.angle <= MAX_TURN_DEGREES:
            raise ValueError(
                f"angle must be within ±{MAX_TURN_DEGREES}, got {self.angle}"
            )
        if not 0 <= self.thrust <= MAX_THRUST:
            raise ValueError(f"thrust must be within [0, {MAX_THRUST}], got {self.thrust}")
        if self.shield and self.boost:
            raise ValueError("shield and boost are mutually exclusive")

    @classmethod
    def noop(cls) -> Instruction:
        return cls()
