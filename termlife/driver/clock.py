"""Frame pacing for the run loop."""

import time
from typing import Callable

DEFAULT_FRAME_RATE = 30.0


class FrameClock:
    """Caps the loop at a fixed frame rate.

    Each frame sleeps for whatever is left of the frame period after the
    time already spent rendering and updating, never for a negative time.
    """

    def __init__(self, frame_rate: float = DEFAULT_FRAME_RATE,
                 clock: Callable[[], float] = time.perf_counter,
                 sleep: Callable[[float], None] = time.sleep):
        if frame_rate <= 0:
            raise ValueError(f"Frame rate must be positive, got {frame_rate}")
        self.frame_rate = frame_rate
        self.clock = clock
        self.sleep = sleep
        self._frame_start = clock()

    @property
    def period(self) -> float:
        """Target seconds between frames."""
        return 1.0 / self.frame_rate

    def start_frame(self) -> None:
        self._frame_start = self.clock()

    def pause_for(self, elapsed: float) -> float:
        """Seconds to sleep after a frame that took `elapsed` seconds."""
        return max(0.0, self.period - elapsed)

    def wait(self) -> float:
        """Sleep out the rest of the current frame.

        Returns:
            Seconds actually requested from sleep
        """
        delay = self.pause_for(self.clock() - self._frame_start)
        if delay > 0:
            self.sleep(delay)
        return delay
