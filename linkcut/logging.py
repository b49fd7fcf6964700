"""Project-wide logging utilities that honour `RuntimeConfig`."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional, Tuple, Union

from . import config as lc_config


class ForestLoggerAdapter(logging.LoggerAdapter):
    """Prefix records with the kernel and arena size of the forest they concern."""

    def __init__(self, logger: logging.Logger, forest: Any) -> None:
        super().__init__(logger, {})
        self.forest = forest

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        forest = self.forest
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("kernel", forest.kernel_name)
        extra.setdefault("arena_capacity", forest.capacity)
        kwargs["extra"] = extra
        return f"[{forest.kernel_name} n={len(forest)}/{forest.capacity}] {msg}", kwargs


def get_logger(
    name: Optional[str] = None, *, forest: Any = None
) -> Union[logging.Logger, ForestLoggerAdapter]:
    """Return a `linkcut` logger at the configured level.

    When `forest` is given, the logger is wrapped so every record names the
    kernel the forest runs and its current arena occupancy.
    """

    logger_name = "linkcut" if name is None else f"linkcut.{name}"
    runtime = lc_config.runtime_config()
    logger = logging.getLogger(logger_name)
    logger.setLevel(runtime.log_level)
    if forest is None:
        return logger
    return ForestLoggerAdapter(logger, forest)
