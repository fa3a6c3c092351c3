"""Named constants shared across the package."""

from __future__ import annotations

MNEMONIC_ACC = "acc"
MNEMONIC_JMP = "jmp"
MNEMONIC_NOP = "nop"

DEFAULT_INIT_ACCUMULATOR = 0

# The accumulator every repair attempt starts from.
REPAIR_INIT_ACCUMULATOR = 0

# 0 means scan sequentially on the calling thread.
SEQUENTIAL_WORKERS = 0

DEMO_LISTING = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""
