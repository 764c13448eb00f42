"""Scope chain for Lingo.

An :class:`Environment` is one scope frame: the bindings declared in it and a
reference to the enclosing frame, if any. Frames only ever look outward, so a
parent knows nothing of the frames nested inside it.

- ``define`` always binds in the current frame, shadowing outer bindings.
- ``assign`` rebinds the nearest existing binding and never creates one.
- ``lookup`` returns the nearest binding.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from lingolang.exceptions import UndefinedVariableError


class Environment:
    """A scope frame mapping names to runtime values."""

    def __init__(self, parent: Optional["Environment"] = None):
        self.vars = {}
        self.parent = parent

    def child(self) -> "Environment":
        """Return a new frame nested inside this one."""
        return Environment(self)

    def define(self, name: str, value):
        """Bind ``name`` in this frame, replacing any binding already here."""
        self.vars[name] = value
        return value

    def _resolve(self, name: str) -> Optional["Environment"]:
        env = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def assign(self, name: str, value, line=None):
        """
        Rebind the nearest existing ``name`` on the scope chain.

        Raises:
            UndefinedVariableError: If no frame on the chain defines ``name``.
        """
        env = self._resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line)
        env.vars[name] = value
        return value

    def lookup(self, name: str, line=None):
        """
        Return the value of the nearest ``name`` on the scope chain.

        Raises:
            UndefinedVariableError: If no frame on the chain defines ``name``.
        """
        env = self._resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line)
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self._resolve(name) is not None

    def bindings(self) -> dict:
        """Return a copy of the bindings declared in this frame only."""
        return dict(self.vars)

    def __repr__(self) -> str:
        return f"Environment({self.vars!r}, depth={self.depth})"

    @property
    def depth(self) -> int:
        depth, env = 0, self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return depth
