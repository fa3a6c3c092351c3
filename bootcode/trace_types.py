"""Trace data types for step-by-step execution replay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .isa import Instruction
from .run_types import ExecutionStats


@dataclass(frozen=True)
class TraceStep:
    """A single executed instruction and the accumulator/pc it produced."""

    step_index: int
    pc: int
    instruction: Instruction
    accumulator_before: int
    accumulator_after: int
    next_pc: int

    def __str__(self) -> str:
        return (
            f"[step {self.step_index}] {self.pc:>4}: {self.instruction}"
            f"  acc {self.accumulator_before} -> {self.accumulator_after}"
            f"  next {self.next_pc}"
        )


@dataclass(frozen=True)
class ExecutionTrace:
    """Complete trace of an execution run.

    Holds one TraceStep per instruction that actually executed, in order.
    The step that would have repeated an instruction is not recorded.
    """

    steps: list[TraceStep] = field(default_factory=list)
    stats: ExecutionStats = field(default_factory=ExecutionStats)
    init_accumulator: int = 0

    @property
    def visited_pcs(self) -> list[int]:
        return [s.pc for s in self.steps]
