"""Time a small workload with the registry and print the report."""

from __future__ import annotations

import hydra
from omegaconf import DictConfig

from stopwatch.core.registry import TimerRegistry
from stopwatch.utils.config import config_from_dict
from stopwatch.utils.logging import logger, setup_logging


def busy_work(n: int) -> int:
    return sum(i * i for i in range(n))


@hydra.main(config_path="../configs", config_name="demo", version_base=None)
def main(cfg: DictConfig) -> None:
    setup_logging(level=cfg.demo.log_level)

    registry = TimerRegistry(config_from_dict(cfg.stopwatch))
    for _ in range(int(cfg.demo.iterations)):
        with registry.track("busy_work"):
            busy_work(int(cfg.demo.work))

    registry.start("whole_run")
    busy_work(int(cfg.demo.work))
    registry.pause("whole_run")
    busy_work(int(cfg.demo.work))  # not counted
    registry.start("whole_run")
    busy_work(int(cfg.demo.work))
    registry.stop("whole_run")

    logger.info("Timed {} names", len(registry))
    registry.report_all()


if __name__ == "__main__":
    main()
