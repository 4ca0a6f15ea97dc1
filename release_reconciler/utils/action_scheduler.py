import logging
import time
from typing import Callable, TypeVar

from release_reconciler.models.settings import DEFAULT_DELAY_MS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActionScheduler:
    """Runs remote actions one at a time with a fixed pause after each one.

    The pause paces the *next* call against GitHub's abuse limits, so it is
    skipped when the action raises: the error goes straight to the caller.
    """

    def __init__(self, delay_ms: int = DEFAULT_DELAY_MS, sleep: Callable[[float], None] = time.sleep):
        self.delay_ms: int = delay_ms
        self.sleep: Callable[[float], None] = sleep
        self.performed: int = 0

    def perform(self, action: Callable[[], T]) -> T:
        result = action()
        self.performed += 1
        logger.debug(f"Action {self.performed} done, waiting {self.delay_ms}ms")
        self.sleep(self.delay_ms / 1000)
        return result
