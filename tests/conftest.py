import logging
import os
import pytest

from composite.core.config import reset_config
from composite.core.logging import HANDLER_NAME, LOGGER_NAME
from composite.domain import Composite


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Clear COMPOSITE_* settings, the cached config and our log handler around every test"""
    for var in list(os.environ):
        if var.startswith("COMPOSITE_"):
            monkeypatch.delenv(var, raising=False)
    reset_config()
    package_logger = logging.getLogger(LOGGER_NAME)
    level = package_logger.level
    yield
    reset_config()
    for handler in [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def composite():
    """A fresh Composite instance"""
    return Composite()
