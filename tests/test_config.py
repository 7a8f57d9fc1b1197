from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

pytest.importorskip("omegaconf")

from stopwatch.clock.sources import TimeMode
from stopwatch.core.registry import StopwatchConfig, TimerRegistry
from stopwatch.utils.config import load_config
from stopwatch.utils.logging import logger, setup_logging, silence_logging


def test_defaults():
    cfg = load_config()
    assert cfg == StopwatchConfig()


def test_yaml_with_overrides(tmp_path):
    path = tmp_path / "sw.yaml"
    path.write_text("stopwatch:\n  mode: CPU_TIME\n  active: false\n", encoding="utf-8")
    cfg = load_config(path, overrides=["legacy_pause=true"])
    assert isinstance(cfg, StopwatchConfig)
    assert cfg.mode == "CPU_TIME"
    assert cfg.active is False
    assert cfg.legacy_pause is True
    registry = TimerRegistry(cfg)
    assert registry.mode is TimeMode.CPU_TIME


def test_demo_config_is_loadable():
    cfg = load_config(Path(__file__).resolve().parents[1] / "configs" / "demo.yaml")
    assert cfg.mode == "REAL_TIME"


def test_setup_logging_file_sink(tmp_path):
    log_file = tmp_path / "logs" / "sw.log"
    setup_logging(log_file=log_file, level="DEBUG")
    try:
        registry = TimerRegistry(StopwatchConfig(mode="REAL_TIME"))
        registry.start("a")
        logger.complete()
    finally:
        setup_logging()
        silence_logging()
    assert "Creating timer 'a'" in log_file.read_text(encoding="utf-8")


def test_hydra_composes_demo_config():
    pytest.importorskip("hydra")
    from hydra import compose, initialize

    from stopwatch.utils.config import config_from_dict

    with initialize(version_base=None, config_path="../configs"):
        cfg = compose(config_name="demo", overrides=["stopwatch.mode=CPU_TIME"])
    registry = TimerRegistry(config_from_dict(cfg.stopwatch))
    assert registry.mode is TimeMode.CPU_TIME
    assert cfg.demo.iterations == 5
