from podracer.evolution.gene import Gene
from podracer.evolution.genome import Genome

__all__ = ["Gene", "Genome"]
