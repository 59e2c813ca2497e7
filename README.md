# mazecaster

A small first-person maze game drawn with a classic raycaster. Choose one of
three levels, find your way to the goal cell and avoid the pumpkins that wander
the corridors: a touch costs a heart (at most one per second), and once all
five are gone the level is lost.

## Installing

```
pip install .
```

The game uses `pygame` for its window, input, sound, text and image loading.

## Playing

Run the game from a directory that holds the level files and assets:

```
mazecaster
```

The window is 900×600 by default; `--width` and `--height` change it:

```
mazecaster --width 1280 --height 720
```

Expected files in the working directory:

- `maze1.txt`, `maze2.txt`, `maze3.txt`: the levels, one text row per maze row
- `assets/carved_pumpkin.png`, `assets/pumpkinblur.png`: enemy sprites
- `assets/video0.MP3`: background music, looped
- `assets/hit1.ogg`: the sound played when you are hit

A missing file stops the game at start-up with the error from opening it.

### Maze files

Each character is one cell:

| Character | Meaning                                                    |
|-----------|------------------------------------------------------------|
| space     | open floor                                                 |
| `s`       | the player's start cell; open to the player, not to enemies |
| `g`       | the goal, drawn green; standing on it wins                 |
| `+`       | wall, drawn orange-red                                     |
| other     | wall, drawn yellow                                         |

### Screens

- Main menu: pick Level 1–3, then PLAY or QUIT.
- Game: the 3D view, a minimap in the top-right corner (walls, start and goal
  cells, you in sky blue, enemies in orange), hearts for health in the
  bottom-left corner, an FPS counter, and a red flash right after a hit.
- Pause (`Esc`): Resume, Main Menu or Quit; `Esc` again resumes.
- Victory: Next Level (wrapping back to the first), Replay Level or Main Menu.
- Defeat: Retry Level, Main Menu or Quit.

### Controls

| Key                | Action              |
|--------------------|---------------------|
| `W` / Up arrow     | move forward        |
| `S` / Down arrow   | move backward       |
| `A` / `D`          | strafe left / right |
| Left / Right arrow | turn                |
| mouse (horizontal) | turn while playing  |
| `Esc`              | pause and resume    |

## Using the pieces

The game logic and rendering work without a window:

- `mazecaster.maze.parse_maze` turns text into a grid and `load_maze` reads a file.
- `mazecaster.player.Player.process_events` moves a player for one frame of
  `MovementInput`, sliding along walls.
- `mazecaster.caster.cast_ray` casts a single ray and returns an `Intersect`.
- `mazecaster.render.render_world` and `render_minimap` draw into a
  `mazecaster.framebuffer.Framebuffer`, which `Framebuffer.render_to_file`
  saves as an image.
- `mazecaster.game.AppState.handle_input` advances the whole game by one
  `FrameInput`, switching between the screens built in `mazecaster.screens`.

## Tests

```
pip install .[test]
pytest
```