from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List


class Button(IntEnum):
    """Keypad positions, row-major over the 6x5 button grid."""

    SEVEN = 0
    EIGHT = 1
    NINE = 2
    DIVIDE = 3
    CLEAR = 4
    FOUR = 5
    FIVE = 6
    SIX = 7
    MULTIPLY = 8
    SQUARE = 9
    ONE = 10
    TWO = 11
    THREE = 12
    SUBTRACT = 13
    RECIPROCAL = 14
    ZERO = 15
    SIGN = 16
    DECIMAL = 17
    ADD = 18
    EQUALS = 19
    MEMORY_CLEAR = 20
    MEMORY_RECALL = 21
    MEMORY_STORE = 22
    MEMORY_ADD = 23
    BACKSPACE = 24
    SQUARE_ROOT = 25
    FACTORIAL = 26
    CUBE = 27
    BINARY = 28
    HEXADECIMAL = 29


DIGITS = {
    Button.ZERO: "0",
    Button.ONE: "1",
    Button.TWO: "2",
    Button.THREE: "3",
    Button.FOUR: "4",
    Button.FIVE: "5",
    Button.SIX: "6",
    Button.SEVEN: "7",
    Button.EIGHT: "8",
    Button.NINE: "9",
}


class Operator(Enum):
    NONE = "none"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    SQUARE_ROOT = "sqrt"
    FACTORIAL = "!"


BINARY_OPERATORS = {
    Button.ADD: Operator.ADD,
    Button.SUBTRACT: Operator.SUBTRACT,
    Button.MULTIPLY: Operator.MULTIPLY,
    Button.DIVIDE: Operator.DIVIDE,
}


class LastAction(Enum):
    INIT = "init"
    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    DECIMAL = "decimal"
    OTHER = "other"


class DisplayMode(Enum):
    DECIMAL = "Dec"
    BINARY = "Bin"
    HEXADECIMAL = "Hex"


# Each base toggle button cycles between Decimal and its own target base.
TOGGLE_TARGETS = {
    Button.BINARY: DisplayMode.BINARY,
    Button.HEXADECIMAL: DisplayMode.HEXADECIMAL,
}


@dataclass(frozen=True)
class UiHint:
    """
    Instruction for the presentation layer: relabel `button` to `label`.

    `previous_mode` is the status the toggle held before this change, which
    is also the base the display should now be rendered in.
    """

    button: Button
    label: str
    previous_mode: DisplayMode


@dataclass(frozen=True)
class ButtonResult:
    display_text: str
    hints: List[UiHint] = field(default_factory=list)
