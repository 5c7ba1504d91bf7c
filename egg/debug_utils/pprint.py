"""Display forms for Egg values and expressions.

`format_value` is what `print` writes and what the REPL echoes. The REPL can
additionally colorize the output with ANSI codes via `colorize`.
"""

import math

from egg import EggValue
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.function import Builtin, Function

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[94m"
COLOR_TEXT = "\033[92m"
COLOR_BOOLEAN = "\033[95m"
COLOR_FUNCTION = "\033[96m"
COLOR_BUILTIN = "\033[90m"
COLOR_ERROR = "\033[91m"


def format_number(n: float) -> str:
    if isinstance(n, float) and math.isfinite(n) and n.is_integer():
        return str(int(n))
    return repr(n)


def format_value(value: EggValue, nested: bool = False) -> str:
    """Render `value` the way Egg shows it to users.

    Text is shown raw at the top level and quoted inside arrays.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v, nested=True) for v in value) + "]"
    # Function and Builtin reprs are already Egg-shaped
    return repr(value)


def format_expression(expr: Expression) -> str:
    """Pretty-print an expression tree one application per line."""
    lines: list[str] = []

    def walk(e: Expression, depth: int) -> None:
        pad = "  " * depth
        match e:
            case Value() | Word():
                lines.append(f"{pad}{e}")
            case Apply(operator=op, args=args) if not args:
                lines.append(f"{pad}{op}()")
            case Apply(operator=op, args=args):
                lines.append(f"{pad}{op}(")
                for a in args:
                    walk(a, depth + 1)
                lines.append(f"{pad})")

    walk(expr, 0)
    return "\n".join(lines)


# ----------------- Colorize utility -----------------
def colorize(value: EggValue) -> str:
    text = format_value(value)
    if isinstance(value, bool):
        return f"{COLOR_BOOLEAN}{text}{RESET}"
    if isinstance(value, (int, float)):
        return f"{COLOR_NUMBER}{text}{RESET}"
    if isinstance(value, str):
        return f"{COLOR_TEXT}{text}{RESET}"
    if isinstance(value, Function):
        return f"{COLOR_FUNCTION}{text}{RESET}"
    if isinstance(value, Builtin):
        return f"{COLOR_BUILTIN}{text}{RESET}"
    return text
