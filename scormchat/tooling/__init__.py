"""Build, extraction and test-run tooling for SCORM packages"""

from .build import forward_build, run_dev_build, dev_build_args
from .extract import TopicExtractor, ExtractionResult
from .pipeline import run_test_topic
from .process import run_command, spawn

__all__ = [
    'forward_build',
    'run_dev_build',
    'dev_build_args',
    'TopicExtractor',
    'ExtractionResult',
    'run_test_topic',
    'run_command',
    'spawn',
]
