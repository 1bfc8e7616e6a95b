# cubscene

`cubscene` reads `.cub` scene descriptions for a small grid-based raycasting
game. It checks the map and loads the XPM wall textures the scene names. It
is written in pure Python and uses only the standard library.

## Modules

- `cubscene.config`: reads scene files into a `MapConfig`.
  - The texture lines start with `NO`, `SO`, `WE` or `EA`.
  - The colour lines start with `F ` (floor) or `C ` (ceiling) and give `R,G,B`.
  - These six elements can come in any order. Leading blanks are skipped and
    blank lines are ignored.
  - Once all six are set, the lines that follow are map rows. Each must start
    with a digit, a space or a tab. In map rows, tabs become four spaces and
    the trailing newline is dropped.
  - A repeated element, an unexpected line or a bad colour raises
    `ConfigError`.
  - `parse_color("220,100,0")` returns `0xDC6400`.
  - Other helpers: `parse_line`, `parse_lines`, `load_config`, `check_args`,
    `skip_spaces`, `trim_trailing_whitespace` and `convert_tabs_to_spaces`.
- `cubscene.mapcheck`: checks the map.
  - `player_valid` requires exactly one player start (`N`, `S`, `E` or `W`).
  - `find_player` returns the `(row, column)` of the first player start.
  - `flood_fill` explores every cell reachable from a start cell. It fails if
    it reaches a space or runs off the map, including past the end of a
    shorter row.
  - `map_valid(config)` runs these checks and stores the player position in
    `config.player_position`.
- `cubscene.xpm`: reads XPM pixmaps into an `Image`.
  - `strip_comments` blanks out `/* */` and `//` comments found outside
    quotes.
  - `quoted_strings` yields the quoted rows.
  - `parse_color_spec` reads `#RRGGBB` values and X11 colour names.
  - `parse_xpm`, `parse_xpm_text` and `load_xpm` build the image.
  - An unknown colour name gives 0. The colour `None` becomes the pixel value
    `0xFF000000`.
  - Malformed data or an unreadable file raises `XpmError`.
- `cubscene.colornames`: `color_by_name` looks up X11 colour names, ignoring
  case. It raises `KeyError` for names it does not know.
- `cubscene.image`: basic pixel types.
  - `Color(r, g, b, a)`: `to_bgra()` gives the four bytes of one pixel.
  - `Image(width, height)`: a 32-bit pixel buffer with `pixel_offset`,
    `set_pixel`, `get_pixel` and `fill`.
- `cubscene.textures`: textures loaded from XPM files.
  - `Texture.get_pixel_color(x, y)` returns the pixel value, or 0 outside the
    texture.
  - `load_texture(path)` reads one XPM file.
  - `load_textures(config)` returns a dict keyed `north`, `south`, `west` and
    `east`.
- `cubscene.app`: the command and the `Program` sprite state.
  - `handle_key` moves, recolours or stops the sprite.
  - `animate` makes the sprite bob by one pixel over a 20-frame cycle.

## Library use

```python
from cubscene.config import load_config
from cubscene.mapcheck import map_valid
from cubscene.textures import load_textures

config = load_config("maps/level.cub")
if map_valid(config):
    textures = load_textures(config)
    print(textures["north"].get_pixel_color(0, 0))
```

## Installation

```
pip install .
```

## Command line

```
cubscene path/to/scene.cub
```

The command runs these steps in order:

1. Checks that exactly one argument is given and that it contains `.cub`.
2. Reads the scene and prints its elements and map rows.
3. Checks the map and loads the four wall textures.
4. Prints each texture's size and a few pixel values of the north texture.
5. Loads the sprite `xpm/player.xpm`, relative to the current directory.
6. Reads key codes from standard input, one integer per line, and ignores
   lines that are not integers.

Each key code is passed to `Program.handle_key`, then one animation frame
follows. These key codes are recognised:

| Key codes | Effect |
| --- | --- |
| `2` or `100` | move right |
| `0` or `97` | move left |
| `1` or `115` | move down |
| `13` or `119` | move up |
| `114` or `65470` | fill the sprite red |
| `103` or `65471` | fill the sprite green |
| `98` or `65473` | fill the sprite blue |
| `53` or `65307` | stop |

The command exits with status 0 when input ends or a stop key is read.

The command prints `Error` with a message and exits with status 1 in these
cases:

- the arguments are wrong;
- the scene file cannot be read or is invalid;
- the map is invalid;
- a texture cannot be loaded;
- the sprite cannot be loaded.

## What it does not do

The package opens no window and draws nothing on screen. There is no
raycasting renderer, so loaded textures and the sprite stay in memory. Key
input comes only from standard input as numeric codes, not from a keyboard.

## Running the tests

```
pip install .[test]
pytest
```