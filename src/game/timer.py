"""
Minesweeper Game Timer
Tenth-of-a-second game clock driven by a background thread or by the host's own tick
"""

import threading
import time
from typing import Callable, Optional

STEP = 0.1


class GameTimer:
    """
    Counts elapsed game time in 0.1 second steps

    The displayed value only moves forward in STEP increments, each one taken
    once real elapsed time is more than STEP ahead of it. stop() takes one final
    catch-up step so the stopped value matches elapsed time within STEP.
    """

    def __init__(self, on_tick: Optional[Callable[[float], None]] = None,
                 clock: Callable[[], float] = time.monotonic,
                 interval: float = 0.01, threaded: bool = True):
        """
        Args:
            on_tick: Called with the new value every time the clock advances
            clock: Source of the current time in seconds
            interval: Seconds between background ticks
            threaded: Drive tick() from a daemon thread; otherwise the host calls it
        """
        self.on_tick = on_tick
        self.clock = clock
        self.interval = interval
        self.threaded = threaded

        self.current_seconds = 0.0
        self.start_time = 0.0
        self.running = False

        self._lock = threading.Lock()
        self._shutdown_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self):
        """Reset to zero and start counting"""
        with self._lock:
            self.current_seconds = 0.0
            self.start_time = self.clock()
            self.running = True
        self._notify(0.0)

        if self.threaded and self._thread is None:
            self._shutdown_event.clear()
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()

    def stop(self) -> float:
        """Stop counting and return the final time"""
        with self._lock:
            advanced = self.running and self._advance()
            self.running = False
            value = self.current_seconds
        if advanced:
            self._notify(value)
        return value

    def reset(self):
        """Stop counting and clear the displayed value"""
        with self._lock:
            self.running = False
            self.current_seconds = 0.0
        self._notify(0.0)

    def tick(self):
        """Advance the clock by one step if enough real time has passed"""
        with self._lock:
            advanced = self.running and self._advance()
            value = self.current_seconds
        if advanced:
            self._notify(value)

    def get_time(self) -> float:
        return self.current_seconds

    def is_running(self) -> bool:
        return self.running

    def shutdown(self):
        """Stop the background thread"""
        self.running = False
        self._shutdown_event.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None

    def _advance(self) -> bool:
        # Caller holds the lock
        if self.clock() - self.start_time > self.current_seconds + STEP:
            self.current_seconds = round(self.current_seconds + STEP, 1)
            return True
        return False

    def _notify(self, value: float):
        if self.on_tick:
            self.on_tick(value)

    def _run(self):
        while not self._shutdown_event.wait(self.interval):
            self.tick()
