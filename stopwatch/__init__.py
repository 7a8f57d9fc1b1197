"""Top-level package for the named stopwatch registry."""

from importlib.metadata import version

from loguru import logger

# Silent until the application opts in through ``stopwatch.utils.logging.setup_logging``.
logger.disable("stopwatch")

__all__ = ["__version__"]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("named-stopwatch")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
