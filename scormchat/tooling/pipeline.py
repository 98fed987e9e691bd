"""Test-topic pipeline: dev build, then extraction, then the test server"""

import sys
from typing import List, Optional, Sequence

from .build import run_dev_build
from .process import run_command
from ..config.builder import BuilderSettings
from ..utils.logging import get_logger


def cli_command(settings: BuilderSettings, subcommand: str) -> List[str]:
    """Invoke this package's CLI as a child process against the same root"""
    return [sys.executable, "-m", "scormchat", "--root", str(settings.root_dir), subcommand]


def run_test_topic(settings: BuilderSettings, args: Sequence[str], topic: Optional[str] = None) -> None:
    """Build, extract and serve; the first failing step raises CommandError"""
    logger = get_logger('tooling.pipeline', topic=topic)

    run_dev_build(settings, args, topic=topic)

    logger.info("📦 Extracting latest package")
    run_command(cli_command(settings, "extract"))

    logger.info(f"🌐 Starting test server on port {settings.port}")
    run_command(cli_command(settings, "serve"))
