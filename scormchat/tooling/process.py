"""Child process helpers; output is inherited from this process"""

import subprocess
from typing import List, Sequence

from ..errors import CommandError
from ..utils.logging import get_logger

logger = get_logger('tooling.process')

# Exit status a shell reports for a command it cannot run
COMMAND_NOT_FOUND = 127


def spawn(command: Sequence[str]) -> int:
    """Run ``command`` to completion and return its exit code

    Raises CommandError when the executable cannot be started.
    """
    logger.debug(f"Running: {' '.join(command)}")
    try:
        completed = subprocess.run(list(command))
    except OSError as e:
        logger.error(f"❌ Could not start {command[0]}: {e}")
        raise CommandError(command, COMMAND_NOT_FOUND) from e
    return completed.returncode


def run_command(command: List[str]) -> int:
    """Run ``command``; raise CommandError on a non-zero exit"""
    code = spawn(command)
    if code != 0:
        raise CommandError(command, code)
    return code
