"""Callable values for Egg: user closures and host-provided builtins."""

from __future__ import annotations

from io import StringIO
from typing import Callable, Optional

from egg import EggValue
from egg.errors import EggArityError
from egg.types.environment import Environment
from egg.types.expression import Expression


class Function:
    """A first-class closure with parameter names, body, and defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: Expression, env: Environment):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("fun(")
            for p in self.params:
                buffer.write(p)
                buffer.write(", ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Egg source representation of the closure."""
        return str(self)

    def extend_env(self, args: list[EggValue]) -> Environment:
        """
        Bind the given argument values to this function's parameters in a
        fresh frame whose parent is the captured defining environment.
        """
        if len(args) != len(self.params):
            raise EggArityError(
                f"Wrong number of arguments to {self}: "
                f"expected {len(self.params)}, got {len(args)}"
            )
        new_env = self.env.child()
        for name, value in zip(self.params, args):
            new_env.define(name, value)
        return new_env


BuiltinFn = Callable[[Environment, list[EggValue]], EggValue]


class Builtin:
    """A named host procedure. `arity` of None means any number of arguments."""

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: BuiltinFn, arity: Optional[int] = None):
        self.name = name
        self.fn = fn
        self.arity = arity

    def check_arity(self, args: list[EggValue]) -> None:
        if self.arity is not None and len(args) != self.arity:
            raise EggArityError(
                f"{self.name} expects {self.arity} argument"
                f"{'' if self.arity == 1 else 's'}, got {len(args)}"
            )

    def __call__(self, env: Environment, args: list[EggValue]) -> EggValue:
        self.check_arity(args)
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
