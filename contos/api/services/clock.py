"""Server-side timestamps."""

import time
from typing import Callable

Clock = Callable[[], int]


def epoch_ms() -> int:
    """Current time in integer epoch milliseconds."""
    return int(time.time() * 1000)
