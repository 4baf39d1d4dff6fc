from podracer.race.game import Game, GameState
from podracer.race.instruction import Instruction
from podracer.race.pod import Pod
from podracer.race.telemetry import PodTelemetry

__all__ = ["Game", "GameState", "Instruction", "Pod", "PodTelemetry"]
