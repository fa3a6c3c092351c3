"""Pure functions for computing statistics over programs."""

from __future__ import annotations

from collections import Counter

from bootcode.isa import Program


def count_opcodes(program: Program) -> dict[str, int]:
    """Return a frequency map of opcode names in the given program.

    Args:
        program: The program to summarise.

    Returns:
        A dict mapping opcode name strings to their occurrence counts.
        Empty dict for an empty program.
    """
    return dict(Counter(inst.opcode.value for inst in program))
