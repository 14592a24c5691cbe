"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path
import tempfile
import yaml

from src.config import reset_config
from src.conversion.base import BaseConversionService
from src.utils.errors import TransportError


class StubService(BaseConversionService):
    """Conversion service returning canned answers and recording calls."""

    NAME = "stub"

    def __init__(self, result=515.0, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def convert(self, amount, from_code, to_code):
        self.calls.append((amount, from_code, to_code))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def config_data():
    return {
        'app': {
            'name': 'Test Converter',
            'version': '0.1.0',
            'debug': True,
            'currencies': ['EUR', 'RON', 'GBP', 'AED', 'RUB'],
        },
        'api': {
            'default_service': 'exchangerate_api',
            'exchangerate_api': {
                'base_url': 'https://example.test/v6',
                'timeout': 5,
                'api_key_env': 'TEST_EXCHANGE_RATE_API_KEY',
            },
            'static': {
                'rates': {'EUR': 1.0, 'RON': 5.0, 'GBP': 0.8, 'AED': 4.0, 'RUB': 100.0},
            },
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }


@pytest.fixture
def temp_config_file(config_data):
    """Create a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name
    
    yield config_path
    
    # Cleanup
    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def clear_config():
    """Drop the global config before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def stub_service():
    return StubService()


@pytest.fixture
def failing_service():
    return StubService(error=TransportError("connection refused"))
