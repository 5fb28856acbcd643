import logging
from typing import List, Optional

from backend.config import CalculatorConfig
from backend.engine import EvalError, evaluate, is_zero
from backend.models import (
    BINARY_OPERATORS,
    DIGITS,
    TOGGLE_TARGETS,
    Button,
    ButtonResult,
    DisplayMode,
    LastAction,
    Operator,
    UiHint,
)

logger = logging.getLogger(__name__)


def _is_scientific(text: str) -> bool:
    return "e" in text.lower()


class InputController:
    """
    Desk-calculator state machine.

    Consumes one button press at a time through `handle_button` and returns
    the text to show plus any UI hints. All state lives here: the display
    text, the pending operand and operator, the memory register and the
    display mode. Errors never escape `handle_button`; they put the
    controller in the error state instead.

    Not thread-safe; feed it from a single event loop.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self._memory = "0"
        self._display_mode = DisplayMode.DECIMAL
        self._hints: List[UiHint] = []
        self._reset()
        self._refresh()

    # -------------------------
    # Read-only state
    # -------------------------
    @property
    def display_text(self) -> str:
        return self._text

    @property
    def operand(self) -> str:
        return self._operand

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def last_action(self) -> LastAction:
        return self._last_action

    @property
    def memory(self) -> str:
        return self._memory

    @property
    def decimal_present(self) -> bool:
        return self._decimal_present

    @property
    def negative_present(self) -> bool:
        return self._negative_present

    @property
    def num_digits(self) -> int:
        return self._num_digits

    @property
    def display_mode(self) -> DisplayMode:
        return self._display_mode

    # -------------------------
    # Entry point
    # -------------------------
    def handle_button(self, button) -> ButtonResult:
        """
        Process a single button press and return the new display text with
        the UI hints it produced. Unknown buttons change nothing.
        """
        try:
            if isinstance(button, bool):
                raise TypeError(button)
            button = Button(button)
        except (TypeError, ValueError):
            logger.debug("Ignoring unknown button %r", button)
            return ButtonResult(self._text, [])

        self._hints = []
        logger.debug("Button %s (text=%r, last=%s)", button.name, self._text, self._last_action.name)
        try:
            self._dispatch(button)
        except EvalError as e:
            logger.warning("Arithmetic error on %s: %s", button.name, e)
            self._show_error()
            return ButtonResult(self.config.error_marker, [])

        return ButtonResult(self._text, self._hints)

    def toggle_hints(self) -> List[UiHint]:
        """Hints describing both base toggles as they currently stand."""
        return [self._toggle_hint(button, self._display_mode) for button in TOGGLE_TARGETS]

    def _dispatch(self, button: Button):
        if button in DIGITS:
            self._press_digit(DIGITS[button])
        elif button in BINARY_OPERATORS:
            self._press_operator(BINARY_OPERATORS[button])
        elif button in TOGGLE_TARGETS:
            self._toggle_mode(TOGGLE_TARGETS[button])
        else:
            self._handlers[button](self)

    # -------------------------
    # Internal helpers
    # -------------------------
    def _reset(self):
        self._text = "0"
        self._operand = "0"
        self._operator = Operator.NONE
        self._last_action = LastAction.INIT
        self._decimal_present = False
        self._negative_present = False

    def _set_text(self, text: str):
        self._text = text
        self._refresh()

    def _refresh(self):
        # Cached flags follow the text after every change
        self._decimal_present = "." in self._text
        self._negative_present = self._text.startswith("-")
        self._num_digits = len(self._text)

    def _show_error(self):
        # Memory and display mode survive an error
        self._reset()
        self._refresh()

    def _evaluate(self, a: str, b: str, op: Operator) -> str:
        return evaluate(a, b, op, self.config.max_digits)

    # -------------------------
    # Digits and editing
    # -------------------------
    def _press_digit(self, digit: str):
        text = self._text
        last = self._last_action
        if is_zero(text):
            if last is LastAction.DECIMAL:
                self._set_text("0." + digit)
            else:
                self._set_text(digit)
        elif last in (LastAction.OPERATOR, LastAction.EQUALS) or _is_scientific(text):
            self._set_text(digit)
        elif len(text) < self.config.max_digits:
            self._set_text(text + digit)
        self._last_action = LastAction.DIGIT

    def _press_decimal(self):
        if self._decimal_present:
            return
        text = self._text
        if is_zero(text) or self._last_action is LastAction.OPERATOR or _is_scientific(text):
            text = "0."
        elif "." in text or len(text) >= self.config.max_digits:
            # flag was cleared by an operator but the point is still on screen
            return
        else:
            text += "."
        self._set_text(text)
        self._decimal_present = True
        self._last_action = LastAction.DECIMAL

    def _press_sign(self):
        text = self._text
        if not self._negative_present:
            if len(text) < self.config.max_digits:
                text = "-" + text
        else:
            text = text[1:]
        self._set_text(text)

    def _press_backspace(self):
        text = self._text
        if _is_scientific(text):
            # an exponent cannot be edited digit by digit
            text = "0"
        elif len(text) > 1:
            text = text[:-1]
            if text == "-":
                text = "0"
        else:
            text = "0"
        self._set_text(text)
        self._last_action = LastAction.OTHER

    def _press_clear(self):
        self._reset()
        self._refresh()

    # -------------------------
    # Operators
    # -------------------------
    def _press_operator(self, op: Operator):
        last = self._last_action
        if is_zero(self._text) or last is LastAction.OPERATOR:
            # Operator override: '+' then '*' means '*'
            self._operator = op
            self._last_action = LastAction.OPERATOR
            return

        if is_zero(self._operand) or last is LastAction.EQUALS or self._operator is Operator.NONE:
            self._operand = self._text
        else:
            result = self._evaluate(self._operand, self._text, self._operator)
            self._operand = result
            self._set_text(result)

        self._operator = op
        self._last_action = LastAction.OPERATOR
        self._decimal_present = False

    def _press_equals(self):
        last = self._last_action
        if is_zero(self._text) or last in (LastAction.OPERATOR, LastAction.EQUALS):
            self._last_action = LastAction.EQUALS
            return

        if not is_zero(self._operand) and self._operator is not Operator.NONE:
            result = self._evaluate(self._operand, self._text, self._operator)
            if not (self.config.suppress_zero_result and is_zero(result)):
                self._operator = Operator.NONE
                self._set_text(result)

        self._last_action = LastAction.EQUALS
        self._decimal_present = False

    def _apply_unary(self, result: str):
        self._set_text(result)
        self._last_action = LastAction.OPERATOR

    def _press_square(self):
        if not is_zero(self._text):
            self._apply_unary(self._evaluate(self._text, self._text, Operator.MULTIPLY))

    def _press_cube(self):
        if not is_zero(self._text):
            squared = self._evaluate(self._text, self._text, Operator.MULTIPLY)
            self._apply_unary(self._evaluate(squared, self._text, Operator.MULTIPLY))

    def _press_square_root(self):
        if not is_zero(self._text):
            self._apply_unary(self._evaluate(self._text, self._text, Operator.SQUARE_ROOT))

    def _press_factorial(self):
        self._apply_unary(self._evaluate(self._text, self._text, Operator.FACTORIAL))

    def _press_reciprocal(self):
        if is_zero(self._text):
            raise EvalError("Reciprocal of zero")
        self._apply_unary(self._evaluate("1", self._text, Operator.DIVIDE))

    # -------------------------
    # Memory register
    # -------------------------
    def _memory_clear(self):
        self._memory = "0"

    def _memory_recall(self):
        self._set_text("0" if is_zero(self._memory) else self._memory)

    def _memory_store(self):
        self._memory = "0" if is_zero(self._text) else self._text
        # next digit starts a fresh number
        self._set_text("0")
        self._last_action = LastAction.INIT

    def _memory_add(self):
        if is_zero(self._text):
            return
        if is_zero(self._memory):
            self._memory = self._text
        else:
            self._memory = self._evaluate(self._text, self._memory, Operator.ADD)

    # -------------------------
    # Display base toggles
    # -------------------------
    def _toggle_mode(self, target: DisplayMode):
        if self._display_mode is target:
            self._set_display_mode(DisplayMode.DECIMAL)
        else:
            self._set_display_mode(target)

    def _set_display_mode(self, mode: DisplayMode):
        """Switch the display base; only one base toggle can be active at a time."""
        previous = self._display_mode
        if mode is previous:
            return
        self._display_mode = mode
        for button, target in TOGGLE_TARGETS.items():
            old_label = self._toggle_label(target, previous)
            new_label = self._toggle_label(target, mode)
            if old_label != new_label:
                self._hints.append(self._toggle_hint(button, mode))
        logger.info("Display mode %s -> %s", previous.name, mode.name)

    @staticmethod
    def _toggle_label(target: DisplayMode, mode: DisplayMode) -> str:
        # An active toggle offers the way back to decimal
        return DisplayMode.DECIMAL.value if mode is target else target.value

    def _toggle_hint(self, button: Button, mode: DisplayMode) -> UiHint:
        return UiHint(button, self._toggle_label(TOGGLE_TARGETS[button], mode), mode)

    _handlers = {
        Button.DECIMAL: _press_decimal,
        Button.SIGN: _press_sign,
        Button.BACKSPACE: _press_backspace,
        Button.CLEAR: _press_clear,
        Button.EQUALS: _press_equals,
        Button.SQUARE: _press_square,
        Button.CUBE: _press_cube,
        Button.SQUARE_ROOT: _press_square_root,
        Button.FACTORIAL: _press_factorial,
        Button.RECIPROCAL: _press_reciprocal,
        Button.MEMORY_CLEAR: _memory_clear,
        Button.MEMORY_RECALL: _memory_recall,
        Button.MEMORY_STORE: _memory_store,
        Button.MEMORY_ADD: _memory_add,
    }
