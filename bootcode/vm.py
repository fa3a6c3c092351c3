"""VM: the transition function over a single accumulator and pc."""

from __future__ import annotations

from .isa import Instruction, Opcode, Program
from .vm_types import ExecutionResult, VMState


def check_state(program: Program, vm: VMState) -> ExecutionResult | None:
    """Return a terminal result if *vm* cannot take another step.

    pc == len(program) is the only halting address. A pc already marked
    visited means the run would repeat itself forever; the accumulator
    reported is the one held before the repeated instruction.
    """
    length = len(program)
    if vm.pc == length:
        return ExecutionResult.halted(vm.accumulator)
    if vm.pc < 0 or vm.pc > length:
        return ExecutionResult.jump_out_of_bounds(vm.pc)
    if vm.visited[vm.pc]:
        return ExecutionResult.infinite_loop(vm.accumulator)
    return None


def apply_instruction(vm: VMState, instruction: Instruction):
    """Mark the current pc visited and apply *instruction* to the VM."""
    vm.visited[vm.pc] = True

    if instruction.opcode == Opcode.ACC:
        vm.accumulator += instruction.argument
        vm.pc += 1
    elif instruction.opcode == Opcode.JMP:
        vm.pc += instruction.argument
    else:
        vm.pc += 1
