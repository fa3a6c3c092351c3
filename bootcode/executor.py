"""Executor: run a Program to a halt or a classified failure."""

from __future__ import annotations

import logging

from .isa import Program
from .run_types import ExecutionStats, VMConfig
from .trace_types import ExecutionTrace, TraceStep
from .vm import apply_instruction, check_state
from .vm_types import ExecutionResult, VMState

logger = logging.getLogger(__name__)


def _log_step(step: TraceStep):
    """Print verbose step-by-step execution info."""
    print(f"  {step}")


def _run_loop(
    program: Program,
    config: VMConfig,
    trace_steps: list[TraceStep] | None = None,
) -> tuple[ExecutionResult, int]:
    """Drive the VM until check_state reports a terminal result.

    Every pc is visited at most once, so the loop runs at most
    len(program) steps.
    """
    vm = VMState.initial(len(program), config.init_accumulator)
    record = trace_steps is not None or config.verbose
    step = 0

    while (result := check_state(program, vm)) is None:
        pc = vm.pc
        acc_before = vm.accumulator
        instruction = program[pc]
        apply_instruction(vm, instruction)

        if record:
            trace_step = TraceStep(
                step_index=step,
                pc=pc,
                instruction=instruction,
                accumulator_before=acc_before,
                accumulator_after=vm.accumulator,
                next_pc=vm.pc,
            )
            if trace_steps is not None:
                trace_steps.append(trace_step)
            if config.verbose:
                _log_step(trace_step)
        step += 1

    if config.verbose:
        print(f"  => {result} ({step} steps)")
    logger.debug("Executed %d steps: %s", step, result)
    return result, step


def execute(program: Program, config: VMConfig = VMConfig()) -> ExecutionResult:
    """Execute *program* from pc 0 and ``config.init_accumulator``.

    Args:
        program: The instructions to run.
        config: Execution configuration (initial accumulator, verbose).

    Returns:
        HALTED with the final accumulator when pc reaches len(program),
        JUMP_OUT_OF_BOUNDS with the offending pc, or INFINITE_LOOP with the
        accumulator held just before an instruction would run a second time.
    """
    result, _ = _run_loop(program, config)
    return result


def execute_traced(
    program: Program, config: VMConfig = VMConfig()
) -> tuple[ExecutionResult, ExecutionTrace]:
    """Execute *program* and record a trace of every step.

    Identical to execute() but keeps one TraceStep per executed instruction
    so callers can replay the run.

    Returns:
        Tuple of (ExecutionResult, ExecutionTrace).
    """
    trace_steps: list[TraceStep] = []
    result, steps = _run_loop(program, config, trace_steps)
    trace = ExecutionTrace(
        steps=trace_steps,
        stats=ExecutionStats(steps=steps, program_length=len(program)),
        init_accumulator=config.init_accumulator,
    )
    return result, trace
