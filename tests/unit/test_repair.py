"""Tests for the single-toggle repair search."""

from bootcode.isa import Program, acc, jmp, nop
from bootcode.repair import (
    attempt_mutation,
    candidate_indices,
    repair_program,
    survey_mutations,
)
from bootcode.repair_types import RepairResult
from bootcode.run_types import VMConfig
from bootcode.vm_types import ExecStatus, ExecutionResult


def _example_program() -> Program:
    return Program(
        [nop(0), acc(1), jmp(4), acc(3), jmp(-3), acc(-99), acc(1), jmp(-4), acc(6)]
    )


def _out_of_bounds_then_repair_program() -> Program:
    # Toggling index 0 jumps out of bounds, toggling index 2 halts with 1.
    return Program([nop(5), acc(1), jmp(-2)])


def _two_repairs_program() -> Program:
    # Toggling index 0 halts with 0, toggling index 2 halts with 3.
    return Program([nop(2), acc(3), nop(1)])


class TestCandidateIndices:
    def test_skips_acc(self):
        assert candidate_indices(_example_program()) == [0, 2, 4, 7]

    def test_empty_program(self):
        assert candidate_indices(Program()) == []


class TestAttemptMutation:
    def test_records_original_and_replacement(self):
        attempt = attempt_mutation(_example_program(), 7)
        assert attempt.original == jmp(-4)
        assert attempt.replacement == nop(-4)
        assert attempt.succeeded
        assert attempt.result == ExecutionResult.halted(8)

    def test_leaves_program_untouched(self):
        program = _example_program()
        attempt_mutation(program, 7)
        assert program[7] == jmp(-4)

    def test_starts_from_zero_accumulator(self):
        attempt = attempt_mutation(
            _example_program(), 7, VMConfig(init_accumulator=100)
        )
        assert attempt.result.accumulator == 8


class TestRepairProgram:
    def test_example_repairs_at_index_seven(self):
        result = repair_program(_example_program())
        assert result.found
        assert result.index == 7
        assert result.accumulator == 8
        assert result.attempts == 4

    def test_search_does_not_modify_program(self):
        program = _example_program()
        listing = program.to_listing()
        repair_program(program)
        assert program.to_listing() == listing

    def test_idempotent(self):
        program = _example_program()
        assert repair_program(program) == repair_program(program)

    def test_lowest_index_wins(self):
        result = repair_program(_two_repairs_program())
        assert result == RepairResult.repaired(0, 0, attempts=1)

    def test_out_of_bounds_attempt_is_skipped(self):
        result = repair_program(_out_of_bounds_then_repair_program())
        assert (result.index, result.accumulator, result.attempts) == (2, 1, 2)

    def test_verbose_prints_each_attempt(self, capsys):
        repair_program(_example_program(), VMConfig(verbose=True))
        out = capsys.readouterr().out
        assert "jmp -4 -> nop -4" in out
        assert "InfiniteLoop(0)" in out

    def test_no_repair_found(self):
        result = repair_program(Program([jmp(0), jmp(0)]))
        assert not result.found
        assert result.index is None
        assert result.attempts == 2

    def test_only_acc_has_no_candidates(self):
        result = repair_program(Program([acc(1), acc(2)]))
        assert result == RepairResult.no_repair_found(attempts=0)

    def test_empty_program_has_no_repair(self):
        assert not repair_program(Program()).found

    def test_ignores_initial_accumulator(self):
        result = repair_program(_example_program(), VMConfig(init_accumulator=-50))
        assert result.accumulator == 8


class TestConcurrentRepair:
    def test_matches_sequential_result(self):
        program = _example_program()
        threaded = repair_program(program, VMConfig(max_workers=4))
        sequential = repair_program(program)
        assert (threaded.index, threaded.accumulator) == (
            sequential.index,
            sequential.accumulator,
        )

    def test_runs_every_candidate(self):
        result = repair_program(_example_program(), VMConfig(max_workers=2))
        assert result.attempts == 4

    def test_lowest_index_wins_with_workers(self):
        result = repair_program(_two_repairs_program(), VMConfig(max_workers=3))
        assert result.index == 0
        assert result.accumulator == 0

    def test_out_of_bounds_attempt_is_skipped_with_workers(self):
        result = repair_program(
            _out_of_bounds_then_repair_program(), VMConfig(max_workers=2)
        )
        assert (result.index, result.accumulator, result.attempts) == (2, 1, 2)

    def test_no_repair_found_with_workers(self):
        result = repair_program(Program([jmp(0), jmp(0)]), VMConfig(max_workers=2))
        assert not result.found


class TestSurveyMutations:
    def test_one_attempt_per_candidate_in_order(self):
        attempts = survey_mutations(_example_program())
        assert [a.index for a in attempts] == [0, 2, 4, 7]

    def test_outcomes_of_example(self):
        attempts = {a.index: a for a in survey_mutations(_example_program())}
        assert attempts[0].result == ExecutionResult.infinite_loop(0)
        assert attempts[2].result == ExecutionResult.infinite_loop(4)
        assert attempts[4].result.status == ExecStatus.INFINITE_LOOP
        assert attempts[7].result == ExecutionResult.halted(8)

    def test_continues_past_first_success(self):
        attempts = survey_mutations(_two_repairs_program())
        assert [a.succeeded for a in attempts] == [True, True]
        assert attempts[1].result == ExecutionResult.halted(3)

    def test_out_of_bounds_attempt_is_reported(self):
        attempts = survey_mutations(_out_of_bounds_then_repair_program())
        first = attempts[0]
        assert first.index == 0
        assert first.result.status == ExecStatus.JUMP_OUT_OF_BOUNDS
        assert first.result.pc == 5
        assert attempts[1].result == ExecutionResult.halted(1)

    def test_threaded_survey_preserves_order(self):
        attempts = survey_mutations(_example_program(), VMConfig(max_workers=4))
        assert [a.index for a in attempts] == [0, 2, 4, 7]


class TestRepairResult:
    def test_to_dict_found(self):
        assert RepairResult.repaired(7, 8, attempts=4).to_dict() == {
            "found": True,
            "attempts": 4,
            "index": 7,
            "accumulator": 8,
        }

    def test_str(self):
        assert str(RepairResult.no_repair_found()) == "NoRepairFound"
        assert str(RepairResult.repaired(7, 8)) == "Repaired(index=7, accumulator=8)"
