"""
Unit test fixtures.

Provides an in-memory VCS provider so resolution logic can be tested
without a repository on disk.
"""

from unittest.mock import MagicMock

import pytest
from fakes import FakeVCSProvider

from repodesc.core.models.config import DescriptorConfig


@pytest.fixture
def fake_vcs() -> FakeVCSProvider:
    """A provider describing a clean master branch, two commits past tag 1.2.3."""
    return FakeVCSProvider()


@pytest.fixture
def descriptor_config() -> DescriptorConfig:
    """Default token configuration."""
    return DescriptorConfig()


@pytest.fixture
def mock_logger() -> MagicMock:
    """A logger recording calls."""
    return MagicMock()
