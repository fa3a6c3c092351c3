"""Repair search: find the single JMP/NOP toggle that lets a program halt."""

from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import ThreadPoolExecutor

from . import constants
from .executor import execute
from .isa import Program
from .repair_types import MutationAttempt, RepairResult
from .run_types import VMConfig

logger = logging.getLogger(__name__)


def candidate_indices(program: Program) -> list[int]:
    """Indices holding a JMP or NOP, ascending. ACC is never corrupted."""
    return [i for i, inst in enumerate(program) if inst.is_toggleable]


def _attempt_config(config: VMConfig) -> VMConfig:
    """Every attempt starts from a zero accumulator and runs quietly."""
    return dataclasses.replace(
        config,
        init_accumulator=constants.REPAIR_INIT_ACCUMULATOR,
        verbose=False,
    )


def attempt_mutation(
    program: Program, index: int, config: VMConfig = VMConfig()
) -> MutationAttempt:
    """Toggle instruction *index* on a copy of *program* and execute it.

    *program* itself is left untouched.
    """
    mutated = program.with_toggled(index)
    result = execute(mutated, _attempt_config(config))
    logger.debug("Mutation at %d: %s", index, result)
    return MutationAttempt(
        index=index,
        original=program[index],
        replacement=mutated[index],
        result=result,
    )


def survey_mutations(
    program: Program, config: VMConfig = VMConfig()
) -> list[MutationAttempt]:
    """Run every applicable toggle and return all attempts, ascending by index."""
    indices = candidate_indices(program)
    if config.max_workers > 0:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            attempts = list(
                pool.map(lambda i: attempt_mutation(program, i, config), indices)
            )
    else:
        attempts = [attempt_mutation(program, i, config) for i in indices]

    if config.verbose:
        for attempt in attempts:
            print(f"  {attempt}")
    return attempts


def _lowest_success(attempts: list[MutationAttempt]) -> RepairResult:
    successes = [a for a in attempts if a.succeeded]
    if not successes:
        return RepairResult.no_repair_found(attempts=len(attempts))
    best = min(successes, key=lambda a: a.index)
    return RepairResult.repaired(
        best.index, best.result.accumulator, attempts=len(attempts)
    )


def repair_program(program: Program, config: VMConfig = VMConfig()) -> RepairResult:
    """Find the lowest index whose JMP<->NOP toggle makes *program* halt.

    Sequentially (``config.max_workers == 0``) the scan stops at the first
    success. With workers, every attempt runs and the lowest successful
    index is chosen, so both modes give the same answer.

    Returns:
        RepairResult.repaired(index, accumulator), or
        RepairResult.no_repair_found() when no toggle halts.
    """
    if config.max_workers > 0:
        result = _lowest_success(survey_mutations(program, config))
    else:
        result = None
        attempts = 0
        for index in candidate_indices(program):
            attempts += 1
            attempt = attempt_mutation(program, index, config)
            if config.verbose:
                print(f"  {attempt}")
            if attempt.succeeded:
                result = RepairResult.repaired(
                    index, attempt.result.accumulator, attempts=attempts
                )
                break
        if result is None:
            result = RepairResult.no_repair_found(attempts=attempts)

    if result.found:
        logger.info(
            "Repair found at index %d after %d attempts: accumulator %d",
            result.index,
            result.attempts,
            result.accumulator,
        )
    else:
        logger.info("No repair found after %d attempts", result.attempts)
    return result
