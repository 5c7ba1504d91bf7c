"""Built-in functions for the Egg runtime environment.

This module defines arithmetic, comparison, printing and array primitives and
the `register` helper that installs them, with the boolean constants, into a
root Environment. Every primitive takes the caller's env and the list of
evaluated arguments; argument counts are checked by the Builtin wrapper before
the primitive runs, kinds are checked here.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from egg import EggValue
from egg.debug_utils.pprint import format_value
from egg.errors import EggIndexError, EggTypeError
from egg.types.environment import Environment
from egg.types.function import Builtin


def is_number(value: EggValue) -> bool:
    # bool is an int subclass in Python but never a number in Egg
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _kind(value: EggValue) -> str:
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, list):
        return "array"
    return "function"


def _require_numbers(name: str, args: list[EggValue]) -> None:
    for a in args:
        if not is_number(a):
            raise EggTypeError(f"{name} expects numbers, got {_kind(a)} {format_value(a, nested=True)}")


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: EggValue, b: EggValue) -> bool:
    """Value equality: same kind and same value, arrays compared element-wise."""
    # NaN is never equal to itself, even when both sides are the same object
    if a is b and not is_number(a):
        return True
    if _kind(a) != _kind(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if _kind(a) == "function":
        return False
    return a == b


def equals(env: Environment, args: list[EggValue]) -> bool:
    return is_equal(args[0], args[1])


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(name: str, op: Callable[[float, float], float]):
    def builtin(env: Environment, args: list[EggValue]) -> float:
        _require_numbers(name, args)
        return float(op(args[0], args[1]))
    builtin.__name__ = f"builtin_{op.__name__}"
    return builtin


def div(env: Environment, args: list[EggValue]) -> float:
    """Divide as IEEE doubles: x/0 is +-inf and 0/0 is nan, never an error."""
    _require_numbers("/", args)
    a, b = float(args[0]), float(args[1])
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[EggValue, EggValue], bool]):
    def builtin(env: Environment, args: list[EggValue]) -> bool:
        a, b = args
        if is_number(a) and is_number(b):
            return op(a, b)
        if isinstance(a, str) and isinstance(b, str):
            return op(a, b)
        raise EggTypeError(
            f"{name} expects two numbers or two texts, got {_kind(a)} and {_kind(b)}"
        )
    builtin.__name__ = f"builtin_{op.__name__}"
    return builtin


# -------------------------------
# Output
# -------------------------------
def print_builtin(env: Environment, args: list[EggValue]) -> EggValue:
    """Write the display form of the single argument and return it unchanged."""
    value = args[0]
    print(format_value(value))
    return value


# -------------------------------
# Arrays
# -------------------------------
def array_builtin(env: Environment, args: list[EggValue]) -> list[EggValue]:
    return list(args)


def _require_array(name: str, value: EggValue) -> list[EggValue]:
    if not isinstance(value, list):
        raise EggTypeError(f"{name} expects an array, got {_kind(value)}")
    return value


def length_builtin(env: Environment, args: list[EggValue]) -> float:
    return float(len(_require_array("length", args[0])))


def element_builtin(env: Environment, args: list[EggValue]) -> EggValue:
    """element(arr, i): zero-based; out-of-range indices are EggIndexError."""
    arr = _require_array("element", args[0])
    index = args[1]
    if not is_number(index) or not float(index).is_integer():
        raise EggTypeError(f"element index must be a whole number, got {format_value(index, nested=True)}")
    i = int(index)
    if i < 0 or i >= len(arr):
        raise EggIndexError(f"element index {i} out of range for array of length {len(arr)}")
    return arr[i]


BUILTINS: tuple[Builtin, ...] = (
    Builtin("+", _arithmetic("+", operator.add), 2),
    Builtin("-", _arithmetic("-", operator.sub), 2),
    Builtin("*", _arithmetic("*", operator.mul), 2),
    Builtin("/", div, 2),
    Builtin("==", equals, 2),
    Builtin("<", _comparison("<", operator.lt), 2),
    Builtin(">", _comparison(">", operator.gt), 2),
    Builtin("print", print_builtin, 1),
    Builtin("array", array_builtin),
    Builtin("length", length_builtin, 1),
    Builtin("element", element_builtin, 2),
)


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({b.name: b for b in BUILTINS})
    env.define("true", True)
    env.define("false", False)
