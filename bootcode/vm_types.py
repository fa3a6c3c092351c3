"""VM: data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ExecStatus(str, Enum):
    HALTED = "HALTED"
    JUMP_OUT_OF_BOUNDS = "JUMP_OUT_OF_BOUNDS"
    INFINITE_LOOP = "INFINITE_LOOP"


@dataclass
class VMState:
    """Mutable state of one run. Owned by that run and discarded with it."""

    pc: int = 0
    accumulator: int = 0
    visited: list[bool] = field(default_factory=list)

    @classmethod
    def initial(cls, program_length: int, init_accumulator: int = 0) -> VMState:
        return cls(
            pc=0,
            accumulator=init_accumulator,
            visited=[False] * program_length,
        )


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one run: a halt, or one of the two classified failures.

    ``accumulator`` is set for HALTED and INFINITE_LOOP, ``pc`` for
    JUMP_OUT_OF_BOUNDS.
    """

    status: ExecStatus
    accumulator: int | None = None
    pc: int | None = None

    @classmethod
    def halted(cls, accumulator: int) -> ExecutionResult:
        return cls(status=ExecStatus.HALTED, accumulator=accumulator)

    @classmethod
    def jump_out_of_bounds(cls, pc: int) -> ExecutionResult:
        return cls(status=ExecStatus.JUMP_OUT_OF_BOUNDS, pc=pc)

    @classmethod
    def infinite_loop(cls, accumulator: int) -> ExecutionResult:
        return cls(status=ExecStatus.INFINITE_LOOP, accumulator=accumulator)

    @property
    def ok(self) -> bool:
        return self.status == ExecStatus.HALTED

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"status": self.status.value}
        if self.accumulator is not None:
            d["accumulator"] = self.accumulator
        if self.pc is not None:
            d["pc"] = self.pc
        return d

    def __str__(self) -> str:
        if self.status == ExecStatus.JUMP_OUT_OF_BOUNDS:
            return f"JumpOutOfBounds({self.pc})"
        if self.status == ExecStatus.INFINITE_LOOP:
            return f"InfiniteLoop({self.accumulator})"
        return f"Halted({self.accumulator})"
