"""
Build Forwarding - scormchat

Thin wrappers around the external packaging step. Arguments are forwarded
unchanged; test builds append the development flags and backend URL.
"""

from typing import List, Optional, Sequence

from .process import spawn, run_command
from ..config.builder import BuilderSettings
from ..utils.logging import get_logger


def build_command(settings: BuilderSettings, args: Sequence[str]) -> List[str]:
    return [*settings.build_command, *args]


def dev_build_args(args: Sequence[str], backend_url: str) -> List[str]:
    """Arguments for a test build: caller's args, then ``--dev --backend <url>``"""
    return [*args, "--dev", "--backend", backend_url]


def forward_build(settings: BuilderSettings, args: Sequence[str], topic: Optional[str] = None) -> int:
    """Run the packaging step with ``args`` and return its exit code"""
    logger = get_logger('tooling.build', topic=topic)
    command = build_command(settings, args)
    logger.info(f"🚀 Building: {' '.join(command)}")
    return spawn(command)


def run_dev_build(settings: BuilderSettings, args: Sequence[str], topic: Optional[str] = None) -> int:
    """Run a test build; raises CommandError when it fails"""
    logger = get_logger('tooling.build', topic=topic)
    command = build_command(settings, dev_build_args(args, settings.dev_backend_url))
    logger.info(f"🚀 Dev build against {settings.dev_backend_url}")
    return run_command(command)
