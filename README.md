# lessonengine

A small 2D game engine built on pygame. It opens a window and shows a
sequence of full-screen pages: a landing page, a main menu, a help page
and a game page with a player sprite. The game page can be paused.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
lessonengine
```

Options:

- `--fullscreen`: start in fullscreen mode (the default is a resizable
  window).
- `--width N`, `--height N`: window size in pixels. Without both, the
  window takes the size of the current display.
- `--images DIR`: directory holding the page images (default `images`).

The page images are `landingpage.png`, `menu_pg.png`, `helpmenu.png`,
`gameplay.png` and `pausemenu.png`. An image that cannot be loaded is
reported on standard error and that page is drawn plain white. If the
window cannot be created the command prints an error and exits with
status 1.

## Controls

| Page       | Key    | Effect                       |
|------------|--------|------------------------------|
| Landing    | Enter  | go to the main menu          |
| Main menu  | N      | start the game               |
| Main menu  | H      | open the help page           |
| Main menu  | L      | back to the landing page     |
| Main menu  | Esc    | quit                         |
| Help       | Esc    | back to the main menu        |
| Game       | Esc    | pause or resume (on release) |
| Paused     | Enter  | quit                         |
| Any        | F1     | switch fullscreen / window   |

Closing the window also quits.

## Modules

- `lessonengine.common`: `Vec2`, `Vec3`, the constants `PI` and
  `GRAVITY`, and `Viewport`, a 45° perspective camera with `aspect()`,
  `scale_at(z)` and `to_screen(x, y, z)`.
- `lessonengine.timer`: `Timer`, milliseconds since creation or the last
  `reset()`, read with `ticks()`.
- `lessonengine.collision`: `is_radial_col` (circles in the x/y plane
  closer than a threshold) and `is_sphere_col` (gap between spheres
  larger than a threshold).
- `lessonengine.textures`: `Texture`, which loads an image
  (`TextureError` on failure) and cuts out regions with `region()`,
  repeating the image past its edges.
- `lessonengine.menu`: the `Page` enum and `Menu`, which starts on the
  landing page.
- `lessonengine.parallax`: `Parallax`, a full-window background that
  scrolls "up", "down", "left" or "right" at most once every 50 ms.
- `lessonengine.player`: `Player` and `PlayerAction`; standing resets to
  the first frame and walking left steps through the sprite sheet.
- `lessonengine.enemies`: `Enemy` and `EnemyAction`; enemies walk
  between the screen edges or leap across it.
- `lessonengine.bullets`: `Bullet` and `BulletAction`; a shot bullet
  moves along +x and returns to its start past its destination.
- `lessonengine.button`: `Button`, drawn as a solid square from one
  texel of its sheet.
- `lessonengine.model`: `Model`, a shaded teapot-shaped solid.
- `lessonengine.inputs`: `Inputs` and `MouseButton`; arrow/WASD keys set
  the player's action, arrow keys scroll a `Parallax`, dragging with the
  left button rotates a `Model`, the right button moves it, and the
  wheel moves it nearer or further.
- `lessonengine.sounds`: `Sounds`, music and effects through
  `pygame.mixer`; playing raises `SoundError` if the mixer is not
  running or a file cannot be loaded.
- `lessonengine.scene`: `Scene` and `Key`, the page state machine and
  drawing.
- `lessonengine.app`: `Window`, `parse_args` and `main`, the command.

## Using the scene from code

```python
from lessonengine.scene import Key, Scene
from lessonengine.menu import Page

scene = Scene()
scene.key_down(Key.RETURN)
assert scene.menu.page is Page.MAIN_MENU
scene.key_down(Key.ESCAPE)
assert scene.should_exit()
```

## What it does not do

The game page shows only the background and the player; no sprite sheet
is loaded for the player, so it is drawn as a white square. Enemies,
bullets, buttons, the model, mouse input and sounds are available as
building blocks but are not used by the scene or the `lessonengine`
command. There is no scoring, no level data and no saved state.