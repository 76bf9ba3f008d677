# orbitsim

A small simulation of the Moon orbiting the Earth under Newtonian gravity.

The Moon starts 3.633e8 m from the Earth, its mean distance at perigee. It
moves at 1076 m/s at right angles to the line between the two bodies. Each
step moves the Moon by one velocity Verlet step. The Earth stays fixed at the
origin. A step covers one hour of simulated time by default. The Earth also
spins on its axis. Its rotation angle goes back to zero once it passes 6.28
radians.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the simulation

```
orbitsim
```

The command runs the simulation for a fixed number of steps and prints the
status of the system as text. The status gives, for the Moon and then for
the Earth, its name, its mass and its speed. The elapsed time in whole days
comes last.

Options:

| Option              | Effect                                                        |
|---------------------|---------------------------------------------------------------|
| `--steps N`         | number of time steps to run (default 720, may be 0)           |
| `--delta-t SECONDS` | seconds per step; the value is kept between 500 and 15000      |
| `--report-every N`  | print the status every N steps (default 24)                   |
| `--guide`           | print the guide to the controls before running                |

The status is always printed once more at the end when the last step did
not fall on a report.

## Controls

`orbitsim.app.Simulation` holds the system and the display state. It reacts
to keys given to it by a front end.

`handle_key` takes a character key:

| Key      | Effect                                                        |
|----------|---------------------------------------------------------------|
| `+`      | time step times 1.1, at most 15000 s                          |
| `-`      | time step times 0.9, at least 500 s                           |
| `n`      | start a new system                                            |
| `s`      | toggle schematic mode and put the camera back to its default  |
| escape   | set `running` to false                                        |

`handle_special_key` takes a `SpecialKey`:

| Key         | Effect                                     |
|-------------|--------------------------------------------|
| F1 / F2     | Moon's velocity times 0.9 / 1.1            |
| F3 / F4     | halve / double the Earth's mass            |
| F5 / F6     | halve / double the Moon's mass             |
| arrows      | turn the camera about the origin by 0.1 rad |

`tick()` spins the Earth and moves the Moon by one step. `status_lines()`
returns the labels that the command prints.

## Library use

```python
from orbitsim.system import EarthMoonSystem

system = EarthMoonSystem()
for _ in range(24 * 27):
    system.spend_time()
print(system.time_label())
```

Modules:

- `orbitsim.vector` holds `Vect`, an immutable 3-D vector with arithmetic, `norm()` and `scaled()`.
- `orbitsim.color` holds `Color`, an RGBA colour with non-negative integer components.
- `orbitsim.camera` holds `Camera`, the view point, with `reset()`, `rotate_horizontal()` and `rotate_vertical()`.
- `orbitsim.planet` holds `Planet`, with `gravitational_force()`, `move()`, `scale_velocity()` and its text labels.
- `orbitsim.system` holds `EarthMoonSystem`, the Earth, the Moon, the elapsed time, the time step and the camera.
- `orbitsim.bitmap.read_bmp` reads an uncompressed 24-bit BMP file into a `Pixmap` of `Pixel`s. It raises `BmpError` for files it cannot use. With `has_alpha`, pure white pixels become transparent.
- `orbitsim.guide.guide_text` returns the guide to the controls.
- `orbitsim.lines` holds `LineScene`, a scene of shapes bouncing in the square from -1 to 1. It is shown as lines or triangles. `viewport()` gives the quarter of the window each shape is drawn in.

## What it does not do

The package draws nothing. It opens no window and renders no textures. It
does not read the keyboard on its own. The camera, the schematic mode, the
pixel maps and the line scene are kept as state for a front end to draw. The
`orbitsim` command only prints text.