"""Configuration objects"""

from .environments import BackendConfig, get_config, ENVIRONMENTS
from .builder import BuilderSettings, DEV_BACKEND_URL, TEST_SERVER_PORT

__all__ = ['BackendConfig', 'get_config', 'ENVIRONMENTS', 'BuilderSettings', 'DEV_BACKEND_URL', 'TEST_SERVER_PORT']
