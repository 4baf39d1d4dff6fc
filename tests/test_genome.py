import pytest

from podracer.evolution.gene import Gene
from podracer.evolution.genome import Genome


def test_random_genome_has_requested_horizon(rng):
    genome = Genome.random(6, rng)

    assert len(genome) == 6
    assert all(isinstance(g, Gene) for g in genome)
    assert genome.first is genome[0]


def test_empty_genome_is_rejected():
    with pytest.raises(ValueError):
        Genome([])


def test_mutate_returns_independent_clone(rng):
    parent = Genome.random(6, rng)
    parent_genes = list(parent)

    child = parent.mutate(rng)

    assert child is not parent
    assert len(child) == len(parent)
    assert list(parent) == parent_genes
    assert all(c is not p for c, p in zip(child, parent))


def test_shift_drops_first_gene_and_appends(rng):
    genome = Genome.random(4, rng)
    before = list(genome)
    fresh = Gene.random(rng)

    genome.shift(fresh)

    assert len(genome) == 4
    assert list(genome)[:3] == before[1:]
    assert genome[3] is fresh
