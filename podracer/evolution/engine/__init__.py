from __future__ import annotations

from podracer.evolution.engine.config import PlannerConfig
from podracer.evolution.engine.core import GeneticPlanner, PlannerState
from podracer.evolution.engine.metrics import PlannerMetrics
