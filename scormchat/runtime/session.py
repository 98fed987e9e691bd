"""Learner session data and the session clock"""

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass(frozen=True)
class LearnerSession:
    """Learner attributes read from the LMS at page load"""
    learner_id: Optional[str] = None
    learner_name: Optional[str] = None
    completion_status: Optional[str] = None

    @property
    def is_populated(self) -> bool:
        return self.learner_id is not None

    def to_learner_data(self) -> Dict[str, Optional[str]]:
        """Shape shared with other page scripts"""
        return {
            "id": self.learner_id,
            "name": self.learner_name,
            "progress": self.completion_status,
        }


@dataclass
class SessionClock:
    """Whole seconds elapsed since page load; never decreases"""
    time_func: Callable[[], float] = time.time
    start: Optional[float] = None
    elapsed_seconds: int = 0

    def __post_init__(self):
        if self.start is None:
            self.start = self.time_func()

    def tick(self) -> int:
        elapsed = int(self.time_func() - self.start)
        if elapsed > self.elapsed_seconds:
            self.elapsed_seconds = elapsed
        return self.elapsed_seconds

    async def run(self, interval: float = 1.0) -> None:
        """Tick every ``interval`` seconds until cancelled"""
        while True:
            await asyncio.sleep(interval)
            self.tick()
