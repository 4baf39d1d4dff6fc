from podracer.runner.config import TimingConfig
from podracer.runner.race_runner import RaceRunner

__all__ = ["RaceRunner", "TimingConfig"]
