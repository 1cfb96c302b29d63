# colorize

Small helpers for wrapping text in ANSI escape codes for terminal output,
and for stripping those codes back out. No dependencies beyond the standard
library.

## Installation

From a checkout of this repository:

```
pip install .
```

## Usage

Every colouring function returns a new string of the form
`ESC[<config>;<background>;<foreground>m<text>ESC[0m`: the three codes,
then the text, then a reset.

### Foreground colours

The `colorize.text` module has one function per colour. Each uses the
default style (`0`) and no background code (`0`).

```python
from colorize.text import red_text, bright_green_text

print(red_text("error"))         # "\x1b[0;0;31merror\x1b[0m"
print(bright_green_text("ok"))   # "\x1b[0;0;92mok\x1b[0m"
```

Available: `black_text`, `red_text`, `green_text`, `yellow_text`,
`blue_text`, `magenta_text`, `cyan_text`, `white_text`, `gray_text`,
`bright_red_text`, `bright_green_text`, `bright_yellow_text`,
`bright_blue_text`, `bright_magenta_text`, `bright_cyan_text`,
`bright_white_text`.

### Background colours

The `colorize.background` module has one function per background colour.
Each uses the default style and white text (`37`).

```python
from colorize.background import blue_background

print(blue_background(" INFO "))  # "\x1b[0;44;37m INFO \x1b[0m"
```

Available: `black_background`, `red_background`, `green_background`,
`yellow_background`, `blue_background`, `magenta_background`,
`cyan_background`, `white_background`, `gray_background`,
`bright_red_background`, `bright_green_background`,
`bright_yellow_background`, `bright_blue_background`,
`bright_magenta_background`, `bright_cyan_background`,
`bright_white_background`.

### Full control

`colorize.ansi.set_color(text, config, background, foreground)` takes a
style, a background and a foreground code:

```python
from colorize.ansi import Background, Config, Foreground, set_color

banner = set_color("Hello", Config.BOLD, Background.BLUE, Foreground.BRIGHT_YELLOW)
# "\x1b[1;44;93mHello\x1b[0m"
```

The three codes are optional and default to `DEFAULT_CONFIG` (`0`),
`DEFAULT_BACKGROUND` (`0`) and `DEFAULT_FOREGROUND` (white, `37`). Plain
integers are accepted as well as the enum members.

- `Config`: `DEFAULT`, `BOLD`, `DIM`, `ITALIC`, `UNDERLINE`, `BLINKING`,
  `REVERSE`, `HIDDEN`.
- `Background` and `Foreground`: `BLACK`, `RED`, `GREEN`, `YELLOW`, `BLUE`,
  `MAGENTA`, `CYAN`, `WHITE`, `GRAY`, `BRIGHT_RED`, `BRIGHT_GREEN`,
  `BRIGHT_YELLOW`, `BRIGHT_BLUE`, `BRIGHT_MAGENTA`, `BRIGHT_CYAN`,
  `BRIGHT_WHITE`.

### Removing colour

```python
from colorize.ansi import remove_color

remove_color(banner)  # "Hello"
```

`remove_color` strips every SGR sequence (`ESC[` followed by digits and
semicolons, ending in `m`) from a string, which is handy for writing
coloured output to log files or measuring its visible width. Other escape
sequences are left untouched.

## What it does not do

The package only builds and strips strings. It does not detect whether the
output is a terminal, does not check the colour support of a terminal, and
does not print anything itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```