from __future__ import annotations

from collections.abc import Callable, Sequence
import time
from typing import TextIO

from loguru import logger

from podracer.evolution.engine import GeneticPlanner
from podracer.exceptions import EndOfInput, PodRacerError
from podracer.protocol.reader import RaceHeader, read_race_header, read_turn
from podracer.race.constants import MAX_THRUST
from podracer.race.game import Game
from podracer.race.instruction import Instruction
from podracer.race.telemetry import PodTelemetry
from podracer.runner.config import TimingConfig


class RaceRunner:
    """Turn loop: telemetry in, one command per controlled pod out."""

    def __init__(
        self,
        planner: GeneticPlanner,
        timing: TimingConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.planner = planner
        self.timing = timing or TimingConfig()
        self.clock = clock
        self.game: Game | None = None

    def start(self, header: RaceHeader) -> Game:
        self.game = Game(header.laps, header.checkpoints)
        logger.info(
            "[RaceRunner] Race start | laps={}, checkpoints={}",
            header.laps,
            len(header.checkpoints),
        )
        return self.game

    def play_turn(
        self, pods_data: Sequence[PodTelemetry], turn_start: float | None = None
    ) -> list[str]:
        """Plan and render this turn's commands, then roll the planner forward."""
        if self.game is None:
            raise PodRacerError("play_turn() called before start()")
        game = self.game
        if turn_start is None:
            turn_start = self.clock()

        game.start_turn(pods_data)
        deadline = turn_start + self.timing.budget(game.is_first_turn)
        self.planner.search(game, deadline, self.clock)

        lead, wingman = game.state.pods
        if game.is_first_turn:
            # No heading yet: head straight for the checkpoint after the start.
            target = game.checkpoint(1)
            lead_command = f"{int(target.x)} {int(target.y)} {MAX_THRUST}"
        else:
            lead_command = lead.render(self.planner.next_instruction())
        commands = [lead_command, wingman.render(Instruction.noop())]

        game.close_turn()
        self.planner.advance_turn()
        return commands

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Play until the referee closes the input. Returns the number of turns played."""
        self.start(read_race_header(stdin.readline))

        turns = 0
        while True:
            try:
                pods_data = read_turn(stdin.readline)
            except EndOfInput:
                logger.info("[RaceRunner] Input closed after {} turns", turns)
                break
            turn_start = self.clock()

            for command in self.play_turn(pods_data, turn_start):
                stdout.write(command + "\n")
            stdout.flush()
            turns += 1

        logger.info("[RaceRunner] Done | {}", self.planner.metrics.to_dict())
        return turns
