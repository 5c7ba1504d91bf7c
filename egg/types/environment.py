"""Runtime environment for Egg.

The Environment stores bindings of names to evaluated Egg values and supports
nested scopes via an `outer` link. Each frame owns only its own `vars`; a
closure keeps its defining frame (and so the whole chain above it) alive by
holding a reference to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from egg import EggValue
from egg.errors import EggReferenceError, EggSyntaxError


class Environment:
    """Hierarchical mapping from names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new, empty frame whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: str, value: EggValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises EggSyntaxError if `name` is not a string.
        """
        if not isinstance(name, str):
            raise EggSyntaxError(f"Cannot define {name!r} as a variable name")
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that owns `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: EggValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises EggReferenceError if no frame owns the name.
        """
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Setting an undefined variable: {name}")
        env.vars[name] = value

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises EggReferenceError if not found.
        """
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Undefined variable: {name}")
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def update(self, mapping: Mapping[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
