from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import time

from loguru import logger
import numpy as np

from podracer.evolution.engine.config import PlannerConfig
from podracer.evolution.engine.metrics import PlannerMetrics
from podracer.evolution.gene import Gene
from podracer.evolution.genome import Genome
from podracer.exceptions import PlannerError
from podracer.race.game import Game
from podracer.race.instruction import Instruction
from podracer.race.pod import Pod

__all__ = ["GeneticPlanner", "PlannerState"]

Clock = Callable[[], float]

CHECKPOINT_BONUS = 10000.0
DISTANCE_BASELINE = 5000.0
SPEED_WEIGHT = 10.0


class PlannerState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"


class GeneticPlanner:
    """
    Mutation-only evolutionary search over multi-turn plans:
    - Every generation keeps the single best genome and refills the
      population with independent mutated clones of it.
    - ``search`` runs generations until a deadline; it always returns a genome.
    - ``advance_turn`` shifts the population so the next search starts from
      plans consistent with the move just played.
    """

    def __init__(self, config: PlannerConfig | None = None, rng: np.random.Generator | None = None):
        self.config = config or PlannerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.metrics = PlannerMetrics()
        self._state = PlannerState.IDLE
        self.genomes: list[Genome] = []
        self.initialize()

        logger.info(
            "[GeneticPlanner] Init | population_size={}, horizon={}, shield_enabled={}",
            self.config.population_size,
            self.config.horizon,
            self.config.shield_enabled,
        )

    @property
    def state(self) -> PlannerState:
        return self._state

    @property
    def best(self) -> Genome:
        """Best genome of the last generation (population slot 0)."""
        return self.genomes[0]

    def initialize(self) -> None:
        self.genomes = [self._random_genome() for _ in range(self.config.population_size)]

    def score(self, genome: Genome, game: Game) -> float:
        if len(genome) != self.config.horizon:
            raise PlannerError(
                f"Genome has {len(genome)} genes, planner horizon is {self.config.horizon}"
            )
        pod = game.state.lead_pod
        final = self.rollout(genome, pod, game)

        target = game.checkpoint(final.next_checkpoint_id)
        if final.next_checkpoint_id > pod.next_checkpoint_id:
            distance_score = CHECKPOINT_BONUS
        else:
            distance_score = DISTANCE_BASELINE - final.pos.distance(target)
        speed_score = SPEED_WEIGHT * final.speed.projected_length_on(
            target.subtract(final.pos)
        )
        return distance_score + speed_score

    def rollout(self, genome: Genome, pod: Pod, game: Game) -> Pod:
        """Simulate ``pod`` through every gene of ``genome``."""
        shield_enabled = self.config.shield_enabled
        for gene in genome:
            pod = pod.simulate(gene.decode(shield_enabled), game)
        return pod

    def run_one_generation(self, game: Game) -> Genome:
        """Score the population and breed the next one from its best genome."""
        scores = [self.score(genome, game) for genome in self.genomes]
        best_index = max(range(len(scores)), key=scores.__getitem__)
        top = self.genomes[best_index]

        self.genomes = [top] + [
            top.mutate(self.rng) for _ in range(self.config.population_size - 1)
        ]
        self.metrics.record_generation(scores[best_index])
        return top

    def search(self, game: Game, deadline: float, clock: Clock = time.monotonic) -> Genome:
        """Evolve until ``clock()`` reaches ``deadline`` and return the best plan.

        The clock is only polled between generations. If the deadline has
        already passed, the current first genome is returned unevaluated.
        """
        self._state = PlannerState.SEARCHING
        self.metrics.start_search()
        try:
            while clock() < deadline:
                self.run_one_generation(game)
        finally:
            self._state = PlannerState.IDLE
            self.metrics.record_search()

        self._log_search(game)
        return self.best

    def advance_turn(self) -> None:
        for genome in self.genomes:
            genome.shift(self._random_gene())

    def next_instruction(self) -> Instruction:
        """Decoded first move of the best plan."""
        return self.best.first.decode(self.config.shield_enabled)

    def _random_gene(self) -> Gene:
        return Gene.random(self.rng, self.config.initial_thrust_coeff)

    def _random_genome(self) -> Genome:
        return Genome.random(
            self.config.horizon, self.rng, self.config.initial_thrust_coeff
        )

    def _log_search(self, game: Game) -> None:
        pod = game.state.lead_pod
        if self.metrics.last_turn_generations == 0:
            logger.warning(
                "[GeneticPlanner] Turn {}: deadline passed before the first generation",
                game.turn,
            )
        logger.debug(
            "[GeneticPlanner] Turn {} | generations={}, best_score={}",
            game.turn,
            self.metrics.last_turn_generations,
            self.metrics.best_score,
        )
        logger.debug("[GeneticPlanner] Current: {}", pod)
        # Past the deadline here: only pay for the prediction when DEBUG is on.
        logger.opt(lazy=True).debug(
            "[GeneticPlanner] Predicted: {} | instruction={}",
            lambda: pod.simulate(self.next_instruction(), game),
            self.next_instruction,
        )
