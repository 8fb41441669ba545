"""Runtime environment for the interpreter.

The Environment is a stack of frames, innermost last. Each frame is an ordered
list of (Symbol, value) bindings; insertion order is preserved so a name may be
rebound inside one frame and the newest binding wins.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from scheme import LispValue
from scheme.errors import SchemeEnvironmentError, SchemeUnboundName
from scheme.types.symbol import Symbol

Frame = list[tuple[Symbol, LispValue]]


class Environment:
    """Stack of binding frames with innermost-first, newest-first lookup."""

    __slots__ = ("frames",)

    def __init__(self):
        # Root frame always present
        self.frames: list[Frame] = [[]]

    @property
    def depth(self) -> int:
        return len(self.frames)

    def push_frame(self) -> None:
        self.frames.append([])

    def pop_frame(self) -> None:
        """Drop the innermost frame.

        Raises SchemeEnvironmentError if only the root frame is left.
        """
        if len(self.frames) <= 1:
            raise SchemeEnvironmentError("Cannot pop the root frame")
        self.frames.pop()

    @contextmanager
    def frame(self) -> Iterator[Environment]:
        """Push a fresh frame for the duration of the block."""
        self.push_frame()
        try:
            yield self
        finally:
            self.pop_frame()

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in the innermost frame."""
        if not isinstance(name, Symbol):
            raise SchemeEnvironmentError(f"Cannot bind {name!r}: not a symbol")
        self.frames[-1].append((name, value))

    def lookup(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None when it is unbound.

        Values are never None, so None is an unambiguous no-match indicator.
        """
        for frame in reversed(self.frames):
            for key, value in reversed(frame):
                if key == name:
                    return value
        return None

    def resolve(self, name: Symbol) -> LispValue:
        """Like lookup, but raises SchemeUnboundName for an unbound name."""
        value = self.lookup(name)
        if value is None:
            raise SchemeUnboundName(f"Cannot lookup unbound symbol {name}")
        return value

    def __contains__(self, name: Symbol) -> bool:
        return self.lookup(name) is not None

    def _write_frame(self, frame: Frame, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in frame))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for outer frames."""
        with StringIO() as buffer:
            self._write_frame(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment frames: ")
            for i, frame in enumerate(reversed(self.frames)):
                if i:
                    buffer.write(" -> ")
                self._write_frame(frame, buffer)
            buffer.write(">")
            return buffer.getvalue()
