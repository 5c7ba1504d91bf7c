"""Syntax tree nodes for Egg.

Every program is one Expression, and an Expression is exactly one of:

    - Value: a number or string literal
    - Word:  an identifier reference
    - Apply: an operator expression applied to argument expressions

Nodes are frozen; the evaluator only ever reads them. `str()` renders a node
back to Egg source that parses to an equal tree.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Value:
    payload: float | str

    def __str__(self) -> str:
        if isinstance(self.payload, str):
            return f'"{self.payload}"'
        if self.payload == math.inf:
            # Digit runs past the double range parse to inf; 1 followed by 309 zeros does too
            return "1" + "0" * 309
        if float(self.payload).is_integer():
            return str(int(self.payload))
        return repr(self.payload)


@dataclass(frozen=True)
class Word:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Apply:
    operator: Expression
    args: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(a) for a in self.args)})"


Expression = Union[Value, Word, Apply]
