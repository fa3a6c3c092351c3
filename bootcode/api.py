"""Composable API functions for the bootcode pipelines.

Each function corresponds to a CLI workflow (--dump-only, --stats-only,
--no-repair, --survey) but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging

from . import constants
from .executor import execute
from .isa import Program
from .parser import parse_program
from .program_stats import count_opcodes
from .repair import repair_program, survey_mutations
from .repair_types import MutationAttempt, RepairResult
from .run_types import VMConfig
from .vm_types import ExecutionResult

logger = logging.getLogger(__name__)


def load_program(source: str) -> Program:
    """Parse a listing into a Program.

    Raises:
        ProgramParseError: If any line of *source* is malformed.
    """
    return parse_program(source)


def dump_program(source: str) -> str:
    """Parse a listing and return it in canonical ``op +n`` form."""
    return load_program(source).to_listing()


def program_stats(source: str) -> dict[str, int]:
    """Parse a listing and return opcode frequency counts."""
    return count_opcodes(load_program(source))


def execute_source(
    source: str, init_accumulator: int = constants.DEFAULT_INIT_ACCUMULATOR
) -> ExecutionResult:
    """Parse and execute a listing without attempting any repair."""
    program = load_program(source)
    return execute(program, VMConfig(init_accumulator=init_accumulator))


def repair_source(
    source: str, max_workers: int = constants.SEQUENTIAL_WORKERS
) -> RepairResult:
    """Parse a listing and search for its single-toggle repair."""
    program = load_program(source)
    logger.info("Searching repairs over %d instructions", len(program))
    return repair_program(program, VMConfig(max_workers=max_workers))


def survey_source(
    source: str, max_workers: int = constants.SEQUENTIAL_WORKERS
) -> list[MutationAttempt]:
    """Parse a listing and run every applicable toggle."""
    program = load_program(source)
    return survey_mutations(program, VMConfig(max_workers=max_workers))
