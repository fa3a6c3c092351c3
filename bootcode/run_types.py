"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import constants
from .isa import Program
from .repair_types import RepairResult
from .vm_types import ExecutionResult


@dataclass(frozen=True)
class VMConfig:
    """Groups VM execution configuration."""

    init_accumulator: int = constants.DEFAULT_INIT_ACCUMULATOR
    verbose: bool = False
    max_workers: int = constants.SEQUENTIAL_WORKERS


@dataclass
class ExecutionStats:
    """Returned execution metrics from execute_traced."""

    steps: int = 0
    program_length: int = 0


@dataclass
class PipelineStats:
    """Timing and size statistics for each pipeline stage."""

    source_bytes: int = 0
    source_lines: int = 0

    # Stage timings (seconds)
    parse_time: float = 0.0
    execution_time: float = 0.0
    repair_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    instruction_count: int = 0
    execution_steps: int = 0
    repair_attempts: int = 0

    def report(self) -> str:
        lines = [
            "═══ Pipeline Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.source_bytes} bytes",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            ("Parse", self.parse_time, f"{self.instruction_count} instructions"),
            ("Execute (VM)", self.execution_time, f"{self.execution_steps} steps"),
            ("Repair search", self.repair_time, f"{self.repair_attempts} attempts"),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        return "\n".join(lines)


@dataclass
class RunReport:
    """Everything run() learned about one listing."""

    program: Program
    result: ExecutionResult
    repair: RepairResult | None = None
    stats: PipelineStats = field(default_factory=PipelineStats)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "instructions": len(self.program),
            "result": self.result.to_dict(),
        }
        if self.repair is not None:
            d["repair"] = self.repair.to_dict()
        return d
