"""Calculator core: button-event controller and the arithmetic it delegates to."""

from .config import CalculatorConfig
from .controller import InputController
from .engine import EvalError, evaluate
from .models import Button, ButtonResult, DisplayMode, LastAction, Operator, UiHint

__all__ = [
    'Button',
    'ButtonResult',
    'CalculatorConfig',
    'DisplayMode',
    'EvalError',
    'InputController',
    'LastAction',
    'Operator',
    'UiHint',
    'evaluate',
]
