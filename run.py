import sys

import hydra
from hydra.errors import InstantiationException
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig
from pydantic import ValidationError

from podracer.evolution.engine import GeneticPlanner, PlannerConfig
from podracer.exceptions import ConfigurationError
from podracer.runner.config import TimingConfig
from podracer.runner.race_runner import RaceRunner
from podracer.utils.logger_setup import setup_logger


def build_runner(cfg: DictConfig) -> RaceRunner:
    try:
        planner_config: PlannerConfig = instantiate(cfg.planner)
        timing: TimingConfig = instantiate(cfg.timing)
    except (InstantiationException, ValidationError) as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    return RaceRunner(GeneticPlanner(planner_config), timing)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    setup_logger(
        level=cfg.logging.level,
        log_dir=cfg.logging.log_dir,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )

    runner = build_runner(cfg)
    try:
        runner.run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Race interrupted")
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Race failed: {e}")
        raise


if __name__ == "__main__":
    main()
