"""
Global pytest fixtures for mobile-env-check tests.
"""

import pytest

from mobile_env_check.config import Settings
from mobile_env_check.messages import MessageCatalog

from fakes import FakeAndroidProbe


@pytest.fixture
def messages():
    return MessageCatalog.default()


@pytest.fixture
def settings():
    return Settings(environ={})


@pytest.fixture
def android_config(settings):
    return settings.android


@pytest.fixture
def probe():
    return FakeAndroidProbe()


@pytest.fixture
def sdk_root(tmp_path):
    """An on-disk SDK layout with latest command-line tools and platform tools."""
    (tmp_path / "cmdline-tools" / "latest" / "bin").mkdir(parents=True)
    (tmp_path / "platform-tools").mkdir()
    return tmp_path
