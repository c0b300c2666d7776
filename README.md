# tankwars

A two-player artillery game for one keyboard. Two tanks face each other
across a hilly, randomly generated landscape under a sky of drifting
planets and stars. Drive along the terrain, aim the barrel along the
trajectory line that previews each shot, and shell your opponent.

- Shells fly under gravity. A shell that touches the ground carves a
  round crater (radius 15 units) and disappears; one that leaves the
  field sideways is dropped.
- Steep neighbouring slopes slowly slide until they even out.
- A shell that comes within 8.5 units of the other tank costs it one
  hit point. Each tank has ten, shown by the bar above it; at zero the
  tank is destroyed and no longer drawn.

## Installing

```
pip install .
```

This pulls in `numpy` and `pygame`.

## Playing

```
tankwars
```

A 1280×720 window opens. Options:

| Option           | Effect                                        |
|------------------|-----------------------------------------------|
| `--width N`      | window width in pixels (default 1280)         |
| `--height N`     | window height in pixels (default 720)         |
| `--seed N`       | seed for the terrain, to replay the same map  |
| `--frames N`     | stop after this many frames                   |
| `--no-vsync`     | do not cap the frame rate at 60 frames/second |

Controls:

| Action        | Player 1 (yellow) | Player 2 (blue) |
|---------------|-------------------|-----------------|
| Move left     | `A`               | `←`             |
| Move right    | `D`               | `→`             |
| Turn barrel   | `W` / `S`         | `↑` / `↓`       |
| Fire          | `Space`           | `Enter`         |

`Esc` closes the game, as does closing the window.

## What it does not do

There is no computer opponent, no sound, no menu and no score or
end-of-game screen: when a tank is destroyed it simply vanishes and the
window stays open until it is closed.

## Using the pieces

The game logic does not depend on a display, so it can be used on its own:

```python
import random

from tankwars.terrain import Terrain
from tankwars.tank import Tank

terrain = Terrain()
terrain.init(320, random.Random(1))

tank = Tank(0, terrain.height_map)
tank.init()
tank.move_barrel(0.3)

projectiles = [tank.shoot()]
for _ in range(60):
    for shell in projectiles:
        shell.update(1 / 60)
    terrain.update(1 / 60, projectiles)
```

Modules:

- `tankwars.mathutil`: angle conversion, interpolation, bit and path helpers.
- `tankwars.transform2d`: 3×3 homogeneous matrices (`translate`, `scale`,
  `rotate`, `shear`, `apply`).
- `tankwars.shapes`: `Vertex`, `Mesh`, `DrawMode` and the builders
  `create_square`, `create_rectangle`, `create_trapezoid`, `create_disk`.
- `tankwars.health_bar`, `tankwars.projectile`, `tankwars.sky`,
  `tankwars.trajectory`, `tankwars.terrain`, `tankwars.tank`: the game objects.
- `tankwars.visualizer`: maps the logical 320×180 world onto the window.
- `tankwars.window`: `Window` buffers raw input and dispatches it once per
  frame to `InputController` observers.
- `tankwars.world`: `World`, the frame loop.
- `tankwars.game`: `TankWars`, the scene; `draw_list()` gives every mesh
  with its matrix in drawing order.
- `tankwars.app`: the pygame `Renderer`, key mapping and `main`.

## Running the tests

```
pip install ".[test]"
pytest
```