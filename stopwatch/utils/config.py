"""Load :class:`StopwatchConfig` from YAML files and dotlist overrides."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from omegaconf import DictConfig, OmegaConf

from ..core.registry import StopwatchConfig


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Sequence[str]] = None,
) -> StopwatchConfig:
    """Merge a YAML file and ``key=value`` overrides onto the defaults.

    Args:
        path: Optional YAML file; either flat or with the settings under a ``stopwatch`` key.
        overrides: Optional dotlist such as ``["mode=REAL_TIME", "legacy_pause=true"]``.
    Returns:
        The resulting config object.
    """

    cfg = OmegaConf.structured(StopwatchConfig)
    if path is not None:
        loaded = OmegaConf.load(Path(path))
        if isinstance(loaded, DictConfig) and "stopwatch" in loaded:
            loaded = loaded.stopwatch
        cfg = OmegaConf.merge(cfg, loaded)
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return OmegaConf.to_object(cfg)  # type: ignore[return-value]


def config_from_dict(cfg: DictConfig) -> StopwatchConfig:
    """Validate an already-composed config node (e.g. from hydra)."""

    merged = OmegaConf.merge(OmegaConf.structured(StopwatchConfig), cfg)
    return OmegaConf.to_object(merged)  # type: ignore[return-value]


__all__ = ["load_config", "config_from_dict"]
