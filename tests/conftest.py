import pytest

from linkcut import config as lc_config
from linkcut.api import reset_default_forest

_ENV_KEYS = [
    "LINKCUT_ENABLE_NUMBA",
    "LINKCUT_LOG_LEVEL",
    "LINKCUT_INITIAL_CAPACITY",
    "LINKCUT_CHECK_PRECONDITIONS",
]


@pytest.fixture(autouse=True)
def _clean_runtime(monkeypatch: pytest.MonkeyPatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    lc_config.reset_runtime_config_cache()
    reset_default_forest()
    yield
    lc_config.reset_runtime_config_cache()
    reset_default_forest()
