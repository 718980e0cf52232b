# slidetiles

A sliding tile puzzle on a 5×5 board. The 24 tiles each show one piece of a
video that keeps playing. The goal is to put the picture back together.

## Requirements

- Python 3.10 or newer
- `pygame`
- `ffmpeg` and `ffprobe` on your `PATH`. `ffprobe` reads the video's
  resolution and `ffmpeg` decodes its frames at normal playback speed.

## Installation

```
pip install .
```

## Playing

Put a video file named `mouse.mp4` in the directory you start from, then run:

```
slidetiles
```

`slidetiles --help` prints a short summary of the controls.

A 500×500 window titled "game" opens with a shuffled board. The board is
shuffled by making 1000 random legal moves from the solved position, so it can
always be solved. The board is solved when tiles 1 to 24 are in order and the
gap is in the bottom-right corner.

Controls:

- **Left mouse button**: click a tile in the same row or column as the empty
  square. Every tile between the click and the gap slides one step toward the
  gap. Clicks on tiles in other rows and columns do nothing.
- **Tab** (hold): show the tile numbers over the video.
- **H**: switch the hint background between coloured bands and plain light
  grey. The colours group tiles by where they belong: tiles whose home is in
  the first row or first column share one colour, tiles whose home is in the
  rest of the second row or second column share the next, and so on.
- **Escape**, or closing the window: quit.

The piece each tile shows is cut from the centred square of the video frame.
When the video reaches its end it starts again from the beginning.

If `mouse.mp4` is missing or `ffmpeg` can't be started, the board is still
drawn without pictures and the hint numbers still work. The problem is logged
as an error on each frame.

## Using the pieces in code

- `slidetiles.puzzle.Puzzle` holds the board. It has `board`, `empty_index`,
  `shuffle()`, `is_solved()`, `move_tile(mouse_x, mouse_y)`,
  `update(hint_held, toggle_color_pressed)` and `draw(surface)`. It takes an
  optional video and an optional random generator with a `randrange` method.
- `slidetiles.video.PuzzleVideo` plays a video file through `ffmpeg` and draws
  pieces of the current frame. It can be used as a context manager, and
  `close()` stops the decoder.
- `slidetiles.game.Game` drives a puzzle from window input. `main()` is the
  entry point of the `slidetiles` command.

## What it does not do

The game does not tell you when the puzzle is solved, keeps no score or move
count, and has no way to choose another video than `mouse.mp4` or to reshuffle
from the window.

## Running the tests

```
pip install ".[test]"
pytest
```