"""Human readable output for results and errors."""
import math

from rich.console import Console
from rich.text import Text


def round_to(value, places):
    """Round `value` to `places` decimals, halves away from zero.

    >>> round_to(1.2345, 2), round_to(2.5, 0), round_to(-0.125, 2)
    (1.23, 3.0, -0.13)
    """
    scale = 10.0**places
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def format_error(err):
    """
    >>> from infixcalc.errors import DivisionByZero
    >>> from infixcalc.tokens import Position
    >>> print(format_error(DivisionByZero(position=Position(1, 3))))
    error: division by zero
      -> 1:3
    """
    message = f"error: {err}"
    if getattr(err, "position", None) is not None:
        message += f"\n  -> {err.position}"
    return message


def print_error(err, console=None):
    console = console or Console(stderr=True)
    text = Text.assemble(("error: ", "bold red"), (str(err), "bold bright_white"))
    if getattr(err, "position", None) is not None:
        text.append("\n  -> ", style="bright_blue")
        text.append(str(err.position), style="bright_black")
    console.print(text)
