"""Instruction set and program: three opcodes over a single accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict


class Opcode(str, Enum):
    ACC = "ACC"
    JMP = "JMP"
    NOP = "NOP"


# Opcodes a single-fault repair may swap between.
TOGGLE_PAIRS: dict[Opcode, Opcode] = {
    Opcode.JMP: Opcode.NOP,
    Opcode.NOP: Opcode.JMP,
}


class Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    opcode: Opcode
    argument: int = 0

    @property
    def is_toggleable(self) -> bool:
        return self.opcode in TOGGLE_PAIRS

    def toggled(self) -> Instruction:
        """Swap JMP <-> NOP keeping the argument; ACC comes back unchanged."""
        if not self.is_toggleable:
            return self
        return Instruction(opcode=TOGGLE_PAIRS[self.opcode], argument=self.argument)

    def __str__(self) -> str:
        return f"{self.opcode.value.lower()} {self.argument:+d}"


def acc(delta: int) -> Instruction:
    return Instruction(opcode=Opcode.ACC, argument=delta)


def jmp(offset: int) -> Instruction:
    return Instruction(opcode=Opcode.JMP, argument=offset)


def nop(value: int = 0) -> Instruction:
    return Instruction(opcode=Opcode.NOP, argument=value)


@dataclass(frozen=True)
class Program:
    """An ordered, fixed-length instruction sequence.

    Programs are never modified in place. ``with_toggled`` hands back a new
    Program that shares every instruction but the swapped one.
    """

    instructions: tuple[Instruction, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.instructions, tuple):
            object.__setattr__(self, "instructions", tuple(self.instructions))

    @classmethod
    def of(cls, instructions: Iterable[Instruction]) -> Program:
        return cls(tuple(instructions))

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def with_toggled(self, index: int) -> Program:
        """Return a copy with instruction *index* swapped JMP <-> NOP.

        An ACC at *index* is not a repair candidate, so ``self`` is returned.
        """
        inst = self.instructions[index]
        if not inst.is_toggleable:
            return self
        return Program(
            self.instructions[:index]
            + (inst.toggled(),)
            + self.instructions[index + 1 :]
        )

    def to_listing(self) -> str:
        return "".join(f"{inst}\n" for inst in self.instructions)

    def __str__(self) -> str:
        return "\n".join(
            f"  {i:>4}: {inst}" for i, inst in enumerate(self.instructions)
        )
