"""The frame loop that drives a scene."""

from __future__ import annotations

import time
from collections.abc import Callable

from tankwars.window import InputController, Window


def _default_clock() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class World(InputController):
    """A scene that receives input and is updated once per frame.

    ``clock`` returns the seconds elapsed since the application started;
    by default it measures from the moment the world is created.
    ``event_source`` is called at the start of each frame to gather
    platform events, and ``presenter`` at its end to show the frame.
    """

    def __init__(
        self,
        window: Window | None = None,
        clock: Callable[[], float] | None = None,
        event_source: Callable[[], None] | None = None,
        presenter: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(window)
        self.clock = clock if clock is not None else _default_clock()
        self.event_source = event_source
        self.presenter = presenter
        self.previous_time = 0.0
        self.elapsed_time = 0.0
        self.delta_time = 0.0
        self.paused = False
        self.closing = False
        self.in_frame = False
        self.frames_started = 0
        self.frames_completed = 0

    def init(self) -> None:
        """Prepare the scene before the loop starts."""

    def frame_start(self) -> None:
        """Mark the start of a frame."""
        self.in_frame = True
        self.frames_started += 1

    def update(self, delta_time_seconds: float) -> None:
        """Advance the scene by one frame."""

    def frame_end(self) -> None:
        """Mark the end of a frame."""
        self.in_frame = False
        self.frames_completed += 1

    def _poll_events(self) -> None:
        """Gather pending platform events into the window."""
        if self.event_source is not None:
            self.event_source()

    def _swap_buffers(self) -> None:
        """Present the finished frame."""
        if self.presenter is not None:
            self.presenter()

    def run(self) -> None:
        """Run frames until the window is asked to close."""
        if self.window is None:
            return
        while not self.window.should_close():
            self.loop_update()

    def pause(self) -> None:
        """Toggle the paused flag."""
        self.paused = not self.paused

    def exit(self) -> None:
        """Ask the window to close."""
        self.closing = True
        if self.window is not None:
            self.window.close()

    def last_frame_time(self) -> float:
        """Duration of the last frame in seconds."""
        return self.delta_time

    def _compute_frame_delta_time(self) -> None:
        self.elapsed_time = self.clock()
        self.delta_time = self.elapsed_time - self.previous_time
        self.previous_time = self.elapsed_time

    def loop_update(self) -> None:
        """Run a single frame: events, input dispatch, update and present."""
        self._poll_events()
        self._compute_frame_delta_time()
        if self.window is not None:
            self.window.update_observers(self.elapsed_time)
        self.frame_start()
        self.update(float(self.delta_time))
        self.frame_end()
        self._swap_buffers()