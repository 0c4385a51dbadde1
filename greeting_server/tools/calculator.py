"""Calculator tools for MCP server."""

DIVISION_BY_ZERO = "Error: Division by zero is not allowed"


def format_number(value: float) -> str:
    """Render a number the way it reads in JSON (no trailing .0 on whole floats)."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _render(a: float, symbol: str, b: float, result: float) -> str:
    return f"{format_number(a)} {symbol} {format_number(b)} = {format_number(result)}"


def add(a: float, b: float) -> str:
    """Add two numbers."""
    return _render(a, "+", b, a + b)


def subtract(a: float, b: float) -> str:
    """Subtract the second number (subtrahend) from the first (minuend)."""
    return _render(a, "-", b, a - b)


def multiply(a: float, b: float) -> str:
    """Multiply two numbers."""
    return _render(a, "×", b, a * b)


def divide(a: float, b: float) -> str:
    """
    Divide the first number (dividend) by the second (divisor).

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Result text, or a fixed error message when the divisor is zero
    """
    if b == 0:
        return DIVISION_BY_ZERO
    return _render(a, "÷", b, a / b)
