"""
Test configuration and fixtures for extpack
"""
import os
import sys

import pytest

# Add project root to Python path for development
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Add src directory to path for imports
src_path = os.path.join(project_root, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from extpack.core.config import clear_config
from extpack.core.factory import Factory
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)


# Custom pytest markers
def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests across factory, packer and unpacker"
    )


@pytest.fixture(autouse=True)
def reset_global_config():
    """Give every test a fresh default factory"""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def factory():
    """Empty factory"""
    return Factory()
