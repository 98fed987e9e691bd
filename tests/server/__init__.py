"""
Server Tests Package - scormchat

Test suite for the SCORM test server:
- Health endpoint
- Index/hint pages and static files
"""

__all__ = [
    'test_test_server',
]
