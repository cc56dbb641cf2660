"""
Transient user notifications.

Each notice lives for a fixed duration and then disappears on its own.
A newer notice replaces the one currently displayed.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

NOTICE_DURATION_SECONDS = 4.0


@dataclass
class Notice:
    message: str
    created_at: float
    expires_at: float

    def is_active(self, now: float) -> bool:
        return now < self.expires_at


class NoticeBoard:
    """Holds the notice history and answers which one is currently shown."""

    def __init__(self, duration: float = NOTICE_DURATION_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self.history: List[Notice] = []

    def notify(self, message: str) -> Notice:
        now = self.clock()
        notice = Notice(message=message, created_at=now, expires_at=now + self.duration)
        self.history.append(notice)
        logger.info(f"Notice: {message}")
        return notice

    @property
    def current(self) -> Optional[Notice]:
        if not self.history:
            return None
        latest = self.history[-1]
        return latest if latest.is_active(self.clock()) else None

    @property
    def messages(self) -> List[str]:
        return [n.message for n in self.history]
