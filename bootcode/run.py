"""Orchestrator: run() entry point."""

from __future__ import annotations

import logging
import time

from .executor import execute_traced
from .parser import parse_program
from .repair import repair_program
from .run_types import PipelineStats, RunReport, VMConfig

logger = logging.getLogger(__name__)


def run(source: str, config: VMConfig = VMConfig(), repair: bool = True) -> RunReport:
    """End-to-end: parse → execute → repair when the program does not halt.

    Args:
        source: Raw listing, one ``<op> <signed-int>`` per line.
        config: Execution configuration.
        repair: Search for a single-toggle repair if execution fails.

    Returns:
        A RunReport with the parsed program, its execution result, the
        repair result (None when no repair was attempted) and stage stats.

    Raises:
        ProgramParseError: If any line of *source* is malformed.
    """
    pipeline_start = time.perf_counter()
    stats = PipelineStats(
        source_bytes=len(source.encode("utf-8")),
        source_lines=source.count("\n")
        + (1 if source and not source.endswith("\n") else 0),
    )

    # 1. Parse
    t0 = time.perf_counter()
    program = parse_program(source)
    stats.parse_time = time.perf_counter() - t0
    stats.instruction_count = len(program)

    if config.verbose:
        print("═══ Program ═══")
        print(program)
        print()
        print("═══ Execution ═══")

    # 2. Execute
    t0 = time.perf_counter()
    result, trace = execute_traced(program, config)
    stats.execution_time = time.perf_counter() - t0
    stats.execution_steps = trace.stats.steps
    logger.info("Execution finished after %d steps: %s", trace.stats.steps, result)

    # 3. Repair
    repair_result = None
    if repair and not result.ok:
        if config.verbose:
            print()
            print("═══ Repair ═══")
        t0 = time.perf_counter()
        repair_result = repair_program(program, config)
        stats.repair_time = time.perf_counter() - t0
        stats.repair_attempts = repair_result.attempts

    stats.total_time = time.perf_counter() - pipeline_start

    if config.verbose:
        print()
        print(stats.report())

    return RunReport(program=program, result=result, repair=repair_result, stats=stats)
