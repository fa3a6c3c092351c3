"""Tests for the composable API functions in bootcode.api."""

import pytest

from bootcode import constants
from bootcode.api import (
    dump_program,
    execute_source,
    load_program,
    repair_source,
    survey_source,
)
from bootcode.isa import Program, acc, jmp
from bootcode.parser import ProgramParseError
from bootcode.vm_types import ExecutionResult


class TestLoadProgram:
    def test_returns_program(self):
        program = load_program("acc +1\njmp -1\n")
        assert isinstance(program, Program)
        assert list(program) == [acc(1), jmp(-1)]

    def test_bad_listing_raises(self):
        with pytest.raises(ProgramParseError):
            load_program("acc")


class TestDumpProgram:
    def test_canonical_form(self):
        assert dump_program("ACC 1\nJMP -2\n") == "acc +1\njmp -2\n"


class TestExecuteSource:
    def test_demo_loops(self):
        assert execute_source(constants.DEMO_LISTING) == ExecutionResult.infinite_loop(5)

    def test_initial_accumulator(self):
        assert execute_source("", init_accumulator=3) == ExecutionResult.halted(3)


class TestRepairSource:
    def test_demo_repair(self):
        result = repair_source(constants.DEMO_LISTING)
        assert (result.index, result.accumulator) == (7, 8)

    def test_with_workers(self):
        result = repair_source(constants.DEMO_LISTING, max_workers=2)
        assert (result.index, result.accumulator) == (7, 8)


class TestSurveySource:
    def test_lists_every_candidate(self):
        attempts = survey_source(constants.DEMO_LISTING)
        assert [a.index for a in attempts] == [0, 2, 4, 7]
        assert [a.succeeded for a in attempts] == [False, False, False, True]
