"""Tools package."""

from .calculator import add, subtract, multiply, divide
from .greeting import greeting, GREETINGS
from .time_utils import get_current_time

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "greeting",
    "GREETINGS",
    "get_current_time",
]
