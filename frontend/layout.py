"""
Presentation tables for the calculator keypad.

Kept free of any tkinter import so the tables and the base rendering
can be used (and tested) without a display.
"""
import math

import numpy as np

from backend.config import MAX_DIGITS
from backend.models import Button, DisplayMode

GRID_ROWS = 6
GRID_COLUMNS = 5

# Label shown on each key, indexed by Button value (row-major)
BUTTON_LABELS = [
    "7",    "8",   "9",   "/",   "C",
    "4",    "5",   "6",   "*",   "Sq",
    "1",    "2",   "3",   "-",   "1/x",
    "0",    "+/-", ".",   "+",   "=",
    "MC",   "MR",  "MS",  "M+",  "Bksp",
    "Sqrt", "!x",  "x^3", "Bin", "Hex",
]

# Tk event sequences that press a key from the keyboard
BUTTON_SHORTCUTS = {
    "<KeyPress-0>": Button.ZERO,
    "<KeyPress-1>": Button.ONE,
    "<KeyPress-2>": Button.TWO,
    "<KeyPress-3>": Button.THREE,
    "<KeyPress-4>": Button.FOUR,
    "<KeyPress-5>": Button.FIVE,
    "<KeyPress-6>": Button.SIX,
    "<KeyPress-7>": Button.SEVEN,
    "<KeyPress-8>": Button.EIGHT,
    "<KeyPress-9>": Button.NINE,
    "<KeyPress-slash>": Button.DIVIDE,
    "<KeyPress-asterisk>": Button.MULTIPLY,
    "<KeyPress-minus>": Button.SUBTRACT,
    "<KeyPress-plus>": Button.ADD,
    "<KeyPress-period>": Button.DECIMAL,
    "<KeyPress-equal>": Button.EQUALS,
    "<Return>": Button.EQUALS,
    "<Escape>": Button.CLEAR,
    "<BackSpace>": Button.BACKSPACE,
}

_BASES = {
    DisplayMode.BINARY: 2,
    DisplayMode.HEXADECIMAL: 16,
}


def grid_position(button: Button):
    """(row, column) of a key in the keypad grid."""
    return divmod(int(button), GRID_COLUMNS)


def render_display(text: str, mode: DisplayMode, max_length: int = MAX_DIGITS) -> str:
    """
    Text the display should show for `text` in the given base.

    Only whole numbers are converted; fractions, the error marker and
    anything that would overflow the display are shown as they are.
    """
    base = _BASES.get(mode)
    if base is None:
        return text
    try:
        value = float(text)
    except ValueError:
        return text
    if not math.isfinite(value) or not value.is_integer():
        return text

    rendered = np.base_repr(int(value), base)
    if len(rendered) > max_length:
        return text
    return rendered
