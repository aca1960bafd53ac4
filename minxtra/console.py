"""ANSI colour codes for console output."""

from __future__ import annotations


class _Palette:
    _codes: dict[str, str] = {}

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def _code(self, name: str) -> str:
        return self._codes[name] if self._enabled else ""


class Background(_Palette):
    """ANSI codes for the background colour; empty strings when disabled."""

    _codes = {
        "black": "\033[40m",
        "red": "\033[41m",
        "green": "\033[42m",
        "yellow": "\033[43m",
        "blue": "\033[44m",
        "magenta": "\033[45m",
        "cyan": "\033[46m",
        "white": "\033[47m",
        "bright_black": "\033[100m",
        "bright_red": "\033[101m",
        "bright_green": "\033[102m",
        "bright_yellow": "\033[103m",
        "bright_blue": "\033[104m",
        "bright_magenta": "\033[105m",
        "bright_cyan": "\033[106m",
        "bright_white": "\033[107m",
    }

    def __init__(self, enabled: bool = True) -> None:
        super().__init__(enabled)

    def black(self) -> str:
        return self._code("black")

    def red(self) -> str:
        return self._code("red")

    def green(self) -> str:
        return self._code("green")

    def yellow(self) -> str:
        return self._code("yellow")

    def blue(self) -> str:
        return self._code("blue")

    def magenta(self) -> str:
        return self._code("magenta")

    def cyan(self) -> str:
        return self._code("cyan")

    def white(self) -> str:
        return self._code("white")

    def bright_black(self) -> str:
        return self._code("bright_black")

    def bright_red(self) -> str:
        return self._code("bright_red")

    def bright_green(self) -> str:
        return self._code("bright_green")

    def bright_yellow(self) -> str:
        return self._code("bright_yellow")

    def bright_blue(self) -> str:
        return self._code("bright_blue")

    def bright_magenta(self) -> str:
        return self._code("bright_magenta")

    def bright_cyan(self) -> str:
        return self._code("bright_cyan")

    def bright_white(self) -> str:
        return self._code("bright_white")


class Color(_Palette):
    """ANSI codes for the text colour; empty strings when disabled."""

    _codes = {
        "black": "\033[30m",
        "red": "\033[31m",
        "green": "\033[32m",
        "yellow": "\033[33m",
        "blue": "\033[34m",
        "magenta": "\033[35m",
        "cyan": "\033[36m",
        "white": "\033[37m",
        "reset": "\033[0m",
        "bright_black": "\033[90m",
        "bright_red": "\033[91m",
        "bright_green": "\033[92m",
        "bright_yellow": "\033[93m",
        "bright_blue": "\033[94m",
        "bright_magenta": "\033[95m",
        "bright_cyan": "\033[96m",
        "bright_white": "\033[97m",
    }

    def __init__(self, enabled: bool) -> None:
        super().__init__(enabled)

    def black(self) -> str:
        return self._code("black")

    def red(self) -> str:
        return self._code("red")

    def green(self) -> str:
        return self._code("green")

    def yellow(self) -> str:
        return self._code("yellow")

    def blue(self) -> str:
        return self._code("blue")

    def magenta(self) -> str:
        return self._code("magenta")

    def cyan(self) -> str:
        return self._code("cyan")

    def white(self) -> str:
        return self._code("white")

    def reset(self) -> str:
        return self._code("reset")

    def bright_black(self) -> str:
        return self._code("bright_black")

    def bright_red(self) -> str:
        return self._code("bright_red")

    def bright_green(self) -> str:
        return self._code("bright_green")

    def bright_yellow(self) -> str:
        return self._code("bright_yellow")

    def bright_blue(self) -> str:
        return self._code("bright_blue")

    def bright_magenta(self) -> str:
        return self._code("bright_magenta")

    def bright_cyan(self) -> str:
        return self._code("bright_cyan")

    def bright_white(self) -> str:
        return self._code("bright_white")