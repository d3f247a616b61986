"""Tests for frame pacing, terminal output and the run loop."""

import io

import pytest
import numpy as np
from termlife.core.boundary import BoundaryPolicy
from termlife.core.grid import Grid
from termlife.core.patterns import block
from termlife.driver.clock import FrameClock
from termlife.driver.loop import LifeRunner, RunSummary
from termlife.driver.terminal import TerminalDisplay, CLEAR_SCREEN


class FakeTime:
    """Manual clock; sleeping advances it."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingDisplay:
    def __init__(self):
        self.frames = []

    def show(self, frame: str) -> None:
        self.frames.append(frame)


def make_runner(grid, **kwargs):
    fake = FakeTime()
    display = RecordingDisplay()
    clock = FrameClock(30.0, clock=fake.clock, sleep=fake.sleep)
    return LifeRunner(grid, display, clock, **kwargs), display, fake


class TestFrameClock:

    def test_period(self):
        assert FrameClock(30.0).period == pytest.approx(1 / 30)
        assert FrameClock(4).period == 0.25

    @pytest.mark.parametrize("frame_rate", [0, -1.0])
    def test_rejects_non_positive_rate(self, frame_rate):
        with pytest.raises(ValueError, match="Frame rate must be positive"):
            FrameClock(frame_rate)

    def test_pause_subtracts_elapsed(self):
        clock = FrameClock(4)
        assert clock.pause_for(0.0) == 0.25
        assert clock.pause_for(0.1) == pytest.approx(0.15)

    def test_pause_never_negative(self):
        clock = FrameClock(4)
        assert clock.pause_for(0.25) == 0.0
        assert clock.pause_for(3.0) == 0.0

    def test_wait_sleeps_remaining_time(self):
        fake = FakeTime()
        clock = FrameClock(4, clock=fake.clock, sleep=fake.sleep)

        clock.start_frame()
        fake.now += 0.05
        delay = clock.wait()

        assert delay == pytest.approx(0.2)
        assert fake.sleeps == [pytest.approx(0.2)]

    def test_wait_skips_sleep_on_slow_frame(self):
        fake = FakeTime()
        clock = FrameClock(4, clock=fake.clock, sleep=fake.sleep)

        clock.start_frame()
        fake.now += 1.0

        assert clock.wait() == 0.0
        assert fake.sleeps == []


class TestTerminalDisplay:

    def test_clears_before_frame(self):
        stream = io.StringIO()
        display = TerminalDisplay(stream=stream)

        display.show("# \n #")

        assert stream.getvalue() == CLEAR_SCREEN + "# \n #\n"
        assert display.frames_shown == 1

    def test_no_clear(self):
        stream = io.StringIO()
        display = TerminalDisplay(stream=stream, clear=False)

        display.show("ab")
        display.show("cd")

        assert stream.getvalue() == "ab\ncd\n"
        assert display.frames_shown == 2

    def test_clear_sequence(self):
        assert CLEAR_SCREEN == "\x1b[2J\x1b[1;1H"


class TestLifeRunner:

    def test_dead_grid_renders_once(self):
        """Nothing alive: no update steps, one final frame."""
        grid = Grid.dead(4, 3)
        runner, display, fake = make_runner(grid)

        summary = runner.run()

        assert summary == RunSummary(generations=0, final_alive=0, hit_limit=False)
        assert display.frames == [grid.render()]
        assert fake.sleeps == []
        assert grid.generation == 0

    def test_render_then_update_until_extinct(self):
        state = np.zeros((3, 3), dtype=bool)
        state[1, 1] = True
        grid = Grid(3, 3, BoundaryPolicy.WRAP, initial_state=state)
        first_frame = grid.render()
        runner, display, fake = make_runner(grid)

        summary = runner.run()

        assert summary.generations == 1
        assert summary.final_alive == 0
        assert not summary.hit_limit
        assert display.frames == [first_frame, "   \n   \n   "]
        assert fake.sleeps == [pytest.approx(1 / 30)]

    def test_generation_limit(self):
        grid = Grid.dead(6, 6)
        grid.load_pattern(block(), 2, 2)
        runner, display, fake = make_runner(grid, max_generations=3)

        summary = runner.run()

        assert summary == RunSummary(generations=3, final_alive=4, hit_limit=True)
        assert len(display.frames) == 4
        assert len(fake.sleeps) == 3

    def test_zero_generation_limit(self):
        grid = Grid.dead(6, 6)
        grid.load_pattern(block(), 2, 2)
        runner, display, _ = make_runner(grid, max_generations=0)

        summary = runner.run()

        assert summary.generations == 0
        assert summary.hit_limit
        assert len(display.frames) == 1

    def test_debug_neighbors_render(self):
        grid = Grid.dead(6, 6, BoundaryPolicy.CLIP)
        grid.load_pattern(block(), 2, 2)
        runner, display, _ = make_runner(grid, max_generations=1, debug_neighbors=True)

        runner.run()

        assert display.frames[0] == grid.render_neighbor_counts()
        assert display.frames[0].split('\n')[2] == "023320"

    def test_runs_with_terminal_display(self):
        stream = io.StringIO()
        grid = Grid.dead(3, 3)
        runner = LifeRunner(grid, TerminalDisplay(stream=stream, clear=False), FrameClock(1000.0))

        runner.run()

        assert stream.getvalue() == "   \n   \n   \n"
