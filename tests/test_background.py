import pytest

from colorize.ansi import remove_color
from colorize.background import (
    black_background,
    blue_background,
    bright_blue_background,
    bright_cyan_background,
    bright_green_background,
    bright_magenta_background,
    bright_red_background,
    bright_white_background,
    bright_yellow_background,
    cyan_background,
    gray_background,
    green_background,
    magenta_background,
    red_background,
    white_background,
    yellow_background,
)

MESSAGE = "Hello, Noa!"

EXPECTED = {
    "black": "\x1b[0;40;37mHello, Noa!\x1b[0m",
    "red": "\x1b[0;41;37mHello, Noa!\x1b[0m",
    "green": "\x1b[0;42;37mHello, Noa!\x1b[0m",
    "yellow": "\x1b[0;43;37mHello, Noa!\x1b[0m",
    "blue": "\x1b[0;44;37mHello, Noa!\x1b[0m",
    "magenta": "\x1b[0;45;37mHello, Noa!\x1b[0m",
    "cyan": "\x1b[0;46;37mHello, Noa!\x1b[0m",
    "white": "\x1b[0;47;37mHello, Noa!\x1b[0m",
    "gray": "\x1b[0;100;37mHello, Noa!\x1b[0m",
    "bright_red": "\x1b[0;101;37mHello, Noa!\x1b[0m",
    "bright_green": "\x1b[0;102;37mHello, Noa!\x1b[0m",
    "bright_yellow": "\x1b[0;103;37mHello, Noa!\x1b[0m",
    "bright_blue": "\x1b[0;104;37mHello, Noa!\x1b[0m",
    "bright_magenta": "\x1b[0;105;37mHello, Noa!\x1b[0m",
    "bright_cyan": "\x1b[0;106;37mHello, Noa!\x1b[0m",
    "bright_white": "\x1b[0;107;37mHello, Noa!\x1b[0m",
}

FUNCTIONS = [
    black_background,
    red_background,
    green_background,
    yellow_background,
    blue_background,
    magenta_background,
    cyan_background,
    white_background,
    gray_background,
    bright_red_background,
    bright_green_background,
    bright_yellow_background,
    bright_blue_background,
    bright_magenta_background,
    bright_cyan_background,
    bright_white_background,
]


@pytest.mark.parametrize("name, expected", list(EXPECTED.items()))
def test_background_color(name, expected):
    results = {
        "black": black_background(MESSAGE),
        "red": red_background(MESSAGE),
        "green": green_background(MESSAGE),
        "yellow": yellow_background(MESSAGE),
        "blue": blue_background(MESSAGE),
        "magenta": magenta_background(MESSAGE),
        "cyan": cyan_background(MESSAGE),
        "white": white_background(MESSAGE),
        "gray": gray_background(MESSAGE),
        "bright_red": bright_red_background(MESSAGE),
        "bright_green": bright_green_background(MESSAGE),
        "bright_yellow": bright_yellow_background(MESSAGE),
        "bright_blue": bright_blue_background(MESSAGE),
        "bright_magenta": bright_magenta_background(MESSAGE),
        "bright_cyan": bright_cyan_background(MESSAGE),
        "bright_white": bright_white_background(MESSAGE),
    }
    assert results[name] == expected


@pytest.mark.parametrize("func", FUNCTIONS)
def test_background_color_round_trip(func):
    assert remove_color(func(MESSAGE)) == MESSAGE


def test_empty_text():
    assert blue_background("") == "\x1b[0;44;37m\x1b[0m"