"""Accumulator bytecode interpreter with loop detection and single-fault repair."""

from .run import run  # noqa: F401
from .isa import Instruction, Opcode, Program, acc, jmp, nop  # noqa: F401
from .executor import execute, execute_traced  # noqa: F401
from .repair import repair_program, survey_mutations  # noqa: F401
from .parser import ProgramParseError, parse_program  # noqa: F401
from .api import (  # noqa: F401
    load_program,
    dump_program,
    program_stats,
    execute_source,
    repair_source,
    survey_source,
)
