"""Repair search data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .isa import Instruction
from .vm_types import ExecutionResult


@dataclass(frozen=True)
class MutationAttempt:
    """One toggled program and how it ran."""

    index: int
    original: Instruction
    replacement: Instruction
    result: ExecutionResult

    @property
    def succeeded(self) -> bool:
        return self.result.ok

    def __str__(self) -> str:
        return f"{self.index:>4}: {self.original} -> {self.replacement}  {self.result}"


@dataclass(frozen=True)
class RepairResult:
    """Either the lowest repairing index with its final accumulator, or not found."""

    found: bool
    index: int | None = None
    accumulator: int | None = None
    attempts: int = 0

    @classmethod
    def repaired(cls, index: int, accumulator: int, attempts: int = 0) -> RepairResult:
        return cls(found=True, index=index, accumulator=accumulator, attempts=attempts)

    @classmethod
    def no_repair_found(cls, attempts: int = 0) -> RepairResult:
        return cls(found=False, attempts=attempts)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"found": self.found, "attempts": self.attempts}
        if self.found:
            d["index"] = self.index
            d["accumulator"] = self.accumulator
        return d

    def __str__(self) -> str:
        if not self.found:
            return "NoRepairFound"
        return f"Repaired(index={self.index}, accumulator={self.accumulator})"
