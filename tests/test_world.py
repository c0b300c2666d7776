from tankwars.window import InputController, Window
from tankwars.world import World


def make_clock(values):
    it = iter(values)
    return lambda: next(it)


class Recorder(World):
    def __init__(self, window, clock, stop_after=None):
        super().__init__(window, clock)
        self.calls = []
        self.deltas = []
        self.stop_after = stop_after

    def frame_start(self):
        self.calls.append("start")

    def update(self, delta_time_seconds):
        self.calls.append("update")
        self.deltas.append(delta_time_seconds)
        if self.stop_after is not None and len(self.deltas) >= self.stop_after:
            self.exit()

    def frame_end(self):
        self.calls.append("end")


def test_loop_update_order_and_delta():
    world = Recorder(Window(), make_clock([0.5, 1.25]))
    world.loop_update()
    world.loop_update()
    assert world.calls == ["start", "update", "end"] * 2
    assert world.deltas == [0.5, 0.75]
    assert world.last_frame_time() == 0.75


def test_run_stops_when_exit_called():
    window = Window()
    world = Recorder(window, make_clock([1.0, 2.0, 3.0, 4.0]), stop_after=3)
    world.run()
    assert len(world.deltas) == 3
    assert window.should_close()
    assert world.closing


def test_run_without_window_does_nothing():
    world = World(None, make_clock([]))
    world.run()
    assert world.last_frame_time() == 0
    assert world.closing is False


def test_pause_toggles():
    world = World(Window(), make_clock([]))
    assert world.paused is False
    world.pause()
    assert world.paused is True
    world.pause()
    assert world.paused is False


def test_world_subscribes_and_receives_input():
    window = Window()
    pressed = []
    world = World(window, make_clock([0.1]))
    world.bind("key_press", lambda key, mods: pressed.append((key, mods)))
    assert world.is_active() is True
    window.key_callback(65, 0, 1, 2)
    assert window.key_hold(65) is True
    world.loop_update()
    assert pressed == [(65, 2)]
    assert world.last_frame_time() == 0.1


def test_input_update_gets_window_frame_time():
    window = Window()
    seen = []

    class Probe(InputController):
        def on_input_update(self, delta_time, mods):
            seen.append(delta_time)

    Probe(window)
    world = World(window, make_clock([0.25, 0.5]))
    world.loop_update()
    world.loop_update()
    assert seen == [0.25, 0.25]
    assert world.last_frame_time() == 0.25