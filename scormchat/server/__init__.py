"""
SCORM Test Server Package

FastAPI server for exercising an extracted SCORM package locally.
"""

from .app import ScormTestServer, create_server
from .models import HealthResponse, ServerDirectories

__all__ = ['ScormTestServer', 'create_server', 'HealthResponse', 'ServerDirectories']
