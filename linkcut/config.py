from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Any, Dict

_DEFAULT_INITIAL_CAPACITY = 64
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_HANDLER_NAME = "linkcut.stderr"


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    # Unrecognised spellings keep the default rather than failing start-up.
    return default


def _env_positive_int(name: str, *, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


@dataclass(frozen=True)
class RuntimeConfig:
    enable_numba: bool
    log_level: str
    initial_capacity: int
    check_preconditions: bool

    @property
    def kernel_name(self) -> str:
        return "numba" if self.enable_numba else "python"

    def describe(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["kernel"] = self.kernel_name
        return payload


def _configure_logging(config: RuntimeConfig) -> None:
    level = config.log_level
    logger = logging.getLogger("linkcut")
    logger.setLevel(level)
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    # A reset cache may carry a new level; the handler follows it.
    handler.setLevel(level)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    enable_numba = _env_flag("LINKCUT_ENABLE_NUMBA", default=False)
    log_level = os.getenv("LINKCUT_LOG_LEVEL", "INFO").strip().upper()
    initial_capacity = _env_positive_int(
        "LINKCUT_INITIAL_CAPACITY", default=_DEFAULT_INITIAL_CAPACITY
    )
    check_preconditions = _env_flag("LINKCUT_CHECK_PRECONDITIONS", default=True)

    config = RuntimeConfig(
        enable_numba=enable_numba,
        log_level=log_level,
        initial_capacity=initial_capacity,
        check_preconditions=check_preconditions,
    )
    _configure_logging(config)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
