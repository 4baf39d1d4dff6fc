from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from podracer.race.constants import MAX_THRUST, MAX_TURN_DEGREES
from podracer.race.instruction import Instruction

__all__ = ["Gene"]

BOOST_THRESHOLD = 0.95
SHIELD_THRESHOLD = 0.95

ANGLE_MUTATION_PROB = 0.4
BOOST_MUTATION_PROB = 0.4
SHIELD_MUTATION_PROB = 0.1
THRUST_MUTATION_PROB = 0.1


@dataclass(frozen=True)
class Gene:
    """Normalized encoding of one :class:`Instruction`.

    Every coefficient lives in [0, 1]. Genes are immutable; ``mutate``
    returns a new gene.
    """

    angle_coeff: float
    boost_coeff: float
    shield_coeff: float
    thrust_coeff: float = 1.0

    def __post_init__(self) -> None:
        for name in ("angle_coeff", "boost_coeff", "shield_coeff", "thrust_coeff"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

    @classmethod
    def random(
        cls, rng: np.random.Generator, thrust_coeff: float | None = 1.0
    ) -> Gene:
        """Random gene; thrust starts at ``thrust_coeff`` (random if None)."""
        angle, boost, shield, thrust = rng.random(4)
        return cls(
            float(angle),
            float(boost),
            float(shield),
            float(thrust) if thrust_coeff is None else thrust_coeff,
        )

    def decode(self, shield_enabled: bool = False) -> Instruction:
        shield = shield_enabled and self.shield_coeff > SHIELD_THRESHOLD
        boost = not shield and self.boost_coeff > BOOST_THRESHOLD

        # Branch order matters: the flat band is only reached between the
        # two saturated ends.
        c = self.angle_coeff
        if c < 0.25:
            angle = -MAX_TURN_DEGREES
        elif c > 0.75:
            angle = MAX_TURN_DEGREES
        elif 0.4 <= c <= 0.6:
            angle = MAX_TURN_DEGREES
        else:
            angle = -MAX_TURN_DEGREES + 2 * MAX_TURN_DEGREES * ((c - 0.25) * 2.0)

        t = self.thrust_coeff
        if t < 0.25:
            thrust = 0
        elif t > 0.75:
            thrust = MAX_THRUST
        else:
            thrust = MAX_THRUST * ((t - 0.25) * 2.0)

        return Instruction(angle=angle, thrust=thrust, shield=shield, boost=boost)

    def mutate(self, rng: np.random.Generator) -> Gene:
        r, thrust_draw = rng.random(2)

        angle, boost, shield = self.angle_coeff, self.boost_coeff, self.shield_coeff
        if r < ANGLE_MUTATION_PROB:
            angle = float(rng.random())
        elif r < ANGLE_MUTATION_PROB + BOOST_MUTATION_PROB:
            boost = float(rng.random())
        elif r < ANGLE_MUTATION_PROB + BOOST_MUTATION_PROB + SHIELD_MUTATION_PROB:
            shield = float(rng.random())

        thrust = self.thrust_coeff
        if thrust_draw < THRUST_MUTATION_PROB:
            thrust = float(rng.random())

        return Gene(angle, boost, shield, thrust)
