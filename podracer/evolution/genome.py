from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from podracer.evolution.gene import Gene

__all__ = ["Genome"]


class Genome:
    """A candidate plan: one gene per turn of the lookahead horizon."""

    __slots__ = ("genes",)

    def __init__(self, genes: Iterable[Gene]):
        self.genes: list[Gene] = list(genes)
        if not self.genes:
            raise ValueError("A genome needs at least one gene")

    @classmethod
    def random(
        cls,
        horizon: int,
        rng: np.random.Generator,
        thrust_coeff: float | None = 1.0,
    ) -> Genome:
        return cls(Gene.random(rng, thrust_coeff) for _ in range(horizon))

    def mutate(self, rng: np.random.Generator) -> Genome:
        """Clone with every gene independently mutated."""
        return Genome(gene.mutate(rng) for gene in self.genes)

    def shift(self, gene: Gene) -> None:
        """Drop the consumed first gene and append ``gene``; length is kept."""
        del self.genes[0]
        self.genes.append(gene)

    @property
    def first(self) -> Gene:
        return self.genes[0]

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self.genes)

    def __getitem__(self, index: int) -> Gene:
        return self.genes[index]

    def __repr__(self) -> str:
        return f"Genome(horizon={len(self.genes)})"
