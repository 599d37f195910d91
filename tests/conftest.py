import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure repository root is on sys.path for module imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class ManualScheduler:
    """Frame scheduler driven by the test instead of a clock."""

    def __init__(self):
        self.callbacks = {}
        self.next_handle = 0
        self.cancelled = []

    def request_frame(self, callback):
        self.next_handle += 1
        self.callbacks[self.next_handle] = callback
        return self.next_handle

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.callbacks.pop(handle, None)

    @property
    def has_pending(self):
        return bool(self.callbacks)

    def advance(self, frames=1):
        for _ in range(frames):
            callbacks, self.callbacks = self.callbacks, {}
            for callback in callbacks.values():
                callback()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scheduler():
    return ManualScheduler()
