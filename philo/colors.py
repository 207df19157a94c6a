"""ANSI escape sequences used for coloured terminal output."""

ERR = "\033[0;31mError - \033[0m"
ERRM = "\033[0;32mError - \033[0m"
ERR1 = "\033[0;33mError - \033[0m"

CLEAR = "\033[2J\033[H"
CLS = "\033[2J\033[H"
REVERSE = "\033[7m"
BLINK = "\033[5m"
R_BLINK = "\033[25m"

RESET = "\033[0m"
END = "\033[0m\n"

BLACK = "\033[0;30m"
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
BLUE = "\033[0;34m"
PURPLE = "\033[0;35m"
CYAN = "\033[0;36m"
WHITE = "\033[0;37m"

_CUBE_OFFSET = 16
_CUBE_SIDE = 6


def fg256(code: int) -> str:
    """Return the escape sequence selecting foreground colour ``code`` (0-255)."""
    if not 0 <= code <= 255:
        raise ValueError(f"256-colour code out of range: {code}")
    return f"\033[38;5;{code}m"


def cube_color(r: int, g: int, b: int) -> str:
    """Return the foreground sequence for the 6x6x6 colour cube entry (r, g, b)."""
    for name, value in (("r", r), ("g", g), ("b", b)):
        if not 0 <= value < _CUBE_SIDE:
            raise ValueError(f"cube component {name} out of range 0-5: {value}")
    return fg256(_CUBE_OFFSET + _CUBE_SIDE * _CUBE_SIDE * r + _CUBE_SIDE * g + b)


C_025 = cube_color(0, 2, 5)
C_123 = cube_color(1, 2, 3)
C_231 = cube_color(2, 3, 1)
C_321 = cube_color(3, 2, 1)
C_401 = cube_color(4, 0, 1)
C_530 = cube_color(5, 3, 0)