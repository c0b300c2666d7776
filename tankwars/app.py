"""Drawing, scene hot-keys and the entry point that runs the game in a pygame window."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame

from tankwars import transform2d
from tankwars.game import DEFAULT_RESOLUTION, TankWars
from tankwars.shapes import DrawMode, Mesh, Vec3
from tankwars.window import InputController, Key, Mod, MouseButton, Window, WindowProperties

FRAME_RATE = 60

_KEY_MAP: dict[int, Key] = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_c: Key.C,
    pygame.K_d: Key.D,
    pygame.K_e: Key.E,
    pygame.K_q: Key.Q,
    pygame.K_s: Key.S,
    pygame.K_w: Key.W,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
    pygame.K_F3: Key.F3,
    pygame.K_F5: Key.F5,
    pygame.K_KP4: Key.KP_4,
    pygame.K_KP5: Key.KP_5,
    pygame.K_KP6: Key.KP_6,
    pygame.K_KP8: Key.KP_8,
    pygame.K_KP_DIVIDE: Key.KP_DIVIDE,
    pygame.K_KP_MULTIPLY: Key.KP_MULTIPLY,
}

_MOUSE_MAP: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


def map_key(pygame_key: int) -> Key | None:
    """The game key for a pygame key code, or None when the game ignores it."""
    return _KEY_MAP.get(pygame_key)


def _map_mods(pygame_mods: int) -> int:
    mods = Mod.NONE
    if pygame_mods & pygame.KMOD_SHIFT:
        mods |= Mod.SHIFT
    if pygame_mods & pygame.KMOD_CTRL:
        mods |= Mod.CONTROL
    if pygame_mods & pygame.KMOD_ALT:
        mods |= Mod.ALT
    if pygame_mods & pygame.KMOD_META:
        mods |= Mod.SUPER
    return int(mods)


def to_screen_matrix(model_matrix: np.ndarray, resolution: Sequence[int]) -> np.ndarray:
    """Compose a viewport-space matrix (y up) with the flip to pixel rows (y down)."""
    height = float(resolution[1])
    flip = np.array(
        [[1.0, 0.0, 0.0],
         [0.0, -1.0, height],
         [0.0, 0.0, 1.0]]
    )
    return flip @ np.asarray(model_matrix, dtype=float)


def _to_rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color[:3])


class Renderer:
    """Rasterises meshes onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, line_width: int = 3) -> None:
        self.surface = surface
        self.line_width = line_width

    def clear(self, color: Vec3 = (0.0, 0.0, 0.0)) -> None:
        """Fill the whole surface with ``color`` (channels in ``[0, 1]``)."""
        self.surface.fill(_to_rgb(color))

    def draw_mesh(self, mesh: Mesh, model_matrix: np.ndarray) -> int:
        """Draw ``mesh`` placed by a viewport-space matrix; return the primitives drawn."""
        if not mesh.vertices or not mesh.indices:
            return 0
        matrix = to_screen_matrix(model_matrix, self.surface.get_size())
        mode = mesh.draw_mode
        drawn = 0
        for primitive in mesh.primitives():
            points = [transform2d.apply(matrix, v.position) for v in primitive]
            color = _to_rgb(primitive[0].color)
            if mode in (DrawMode.TRIANGLES, DrawMode.TRIANGLE_FAN):
                pygame.draw.polygon(self.surface, color, points)
            elif mode is DrawMode.LINES:
                pygame.draw.line(self.surface, color, points[0], points[1], self.line_width)
            else:
                if len(points) < 2:
                    continue
                closed = mode is DrawMode.LINE_LOOP
                pygame.draw.lines(self.surface, color, closed, points, self.line_width)
            drawn += 1
        return drawn


class SceneInput(InputController):
    """Scene-wide hot keys: F3 toggles the ground plane, F5 reloads, Escape quits."""

    def __init__(self, scene) -> None:
        super().__init__(scene.window)
        self.scene = scene

    def on_key_press(self, key: int, mods: int) -> None:
        if key == Key.F3:
            toggle = getattr(self.scene, "toggle_ground_plane", None)
            if toggle is not None:
                toggle()
        if key == Key.F5:
            reload = getattr(self.scene, "reload_shaders", None)
            if reload is not None:
                reload()
        if key == Key.ESCAPE:
            self.scene.exit()


def _dispatch_event(window: Window, event: pygame.event.Event) -> None:
    if event.type == pygame.QUIT:
        window.close()
    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = map_key(event.key)
        if key is not None:
            action = 1 if event.type == pygame.KEYDOWN else 0
            window.key_callback(int(key), getattr(event, "scancode", 0), action, _map_mods(event.mod))
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _MOUSE_MAP.get(event.button)
        if button is not None:
            action = 1 if event.type == pygame.MOUSEBUTTONDOWN else 0
            window.mouse_button_callback(int(button), action, _map_mods(pygame.key.get_mods()))
    elif event.type == pygame.MOUSEMOTION:
        window.mouse_move(int(event.pos[0]), int(event.pos[1]))
    elif event.type == pygame.MOUSEWHEEL:
        window.mouse_scroll(event.x, event.y)
    elif event.type == pygame.VIDEORESIZE:
        window.set_size(event.w, event.h)


class _PygameTankWars(TankWars):
    """The game wired to a pygame display."""

    def __init__(
        self,
        window: Window,
        renderer: Renderer,
        rng: random.Random,
        frame_limit: int | None,
    ) -> None:
        super().__init__(window, rng=rng)
        self.renderer = renderer
        self.frame_limit = frame_limit
        self.frames = 0
        self._frame_clock = pygame.time.Clock()

    def _poll_events(self) -> None:
        for event in pygame.event.get():
            _dispatch_event(self.window, event)

    def frame_start(self) -> None:
        self.renderer.clear(self.clear_color)

    def frame_end(self) -> None:
        for mesh, matrix in self.draw_list():
            self.renderer.draw_mesh(mesh, matrix)
        self.frames += 1
        if self.frame_limit is not None and self.frames >= self.frame_limit:
            self.exit()

    def _swap_buffers(self) -> None:
        pygame.display.flip()
        if self.window.props.v_sync:
            self._frame_clock.tick(FRAME_RATE)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tankwars", description="Two-player artillery game.")
    parser.add_argument("--width", type=int, default=DEFAULT_RESOLUTION[0])
    parser.add_argument("--height", type=int, default=DEFAULT_RESOLUTION[1])
    parser.add_argument("--seed", type=int, default=None, help="seed for the terrain")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--no-vsync", action="store_true", help="do not cap the frame rate")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until it is closed."""
    args = _parse_args(argv)
    program = os.path.abspath(os.sys.argv[0]) if os.sys.argv and os.sys.argv[0] else ""
    self_dir = os.path.dirname(program) or "."

    props = WindowProperties(
        self_dir=self_dir,
        name="Tank Wars",
        resolution=(args.width, args.height),
        v_sync=not args.no_vsync,
    )
    pygame.display.init()
    try:
        surface = pygame.display.set_mode(props.resolution)
        pygame.display.set_caption(props.name)
        window = Window(props)
        window.set_size(*surface.get_size())
        rng = random.Random(args.seed)
        game = _PygameTankWars(window, Renderer(surface), rng, args.frames)
        SceneInput(game)
        game.init()
        game.run()
    finally:
        print("=====================================================")
        print("Engine closed. Exit")
        pygame.quit()
    return 0