import logging
import os

import pytest
from hypothesis import HealthCheck, settings

from filecopy.config import CopyConfig

# Timeout settings are unreliable on CI so we disable them
settings.register_profile(
    "no_timeouts",
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
    print_blob=True,
)
settings.load_profile("no_timeouts")


@pytest.fixture(autouse=True)
def log_check():
    logger = logging.getLogger()
    logger.setLevel(logging.WARNING)
    yield
    logger_after = logging.getLogger()
    level_after = logger_after.getEffectiveLevel()
    assert (
        level_after == logging.WARNING
    ), f"Detected differences in log environment: Changed to {level_after}"


@pytest.fixture(autouse=True)
def reset_filecopy_logger():
    yield
    logger = logging.getLogger("filecopy")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def use_tmpdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def zero_umask():
    previous = os.umask(0)
    yield
    os.umask(previous)


@pytest.fixture(params=["buffer", "mmap"])
def strategy_name(request):
    return request.param


@pytest.fixture()
def copy_config(strategy_name):
    return CopyConfig(strategy=strategy_name)
