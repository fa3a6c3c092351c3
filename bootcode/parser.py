"""Listing parser: turn ``<op> <signed-int>`` lines into a Program."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from . import constants
from .isa import Instruction, Opcode, Program

logger = logging.getLogger(__name__)

_MNEMONICS: dict[str, Opcode] = {
    constants.MNEMONIC_ACC: Opcode.ACC,
    constants.MNEMONIC_JMP: Opcode.JMP,
    constants.MNEMONIC_NOP: Opcode.NOP,
}

_ARGUMENT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ProgramParseError(ValueError):
    """A listing line that is not a well-formed instruction."""

    def __init__(self, message: str, line_no: int = 0, text: str = ""):
        self.line_no = line_no
        self.text = text
        where = f"line {line_no}: " if line_no else ""
        super().__init__(f"{where}{message}")


def parse_instruction(line: str, line_no: int = 0) -> Instruction:
    """Parse one ``<op> <signed-int>`` line. Mnemonics are case-insensitive."""
    columns = line.split()
    if len(columns) != 2:
        raise ProgramParseError(
            f"did not find two columns: {line.strip()!r}", line_no, line
        )
    mnemonic, raw_arg = columns
    if not _ARGUMENT_PATTERN.fullmatch(raw_arg):
        raise ProgramParseError(
            f"couldn't parse argument: {raw_arg!r}", line_no, line
        )
    opcode = _MNEMONICS.get(mnemonic.lower())
    if opcode is None:
        raise ProgramParseError(
            f"unknown instruction: {mnemonic.lower()!r}", line_no, line
        )
    return Instruction(opcode=opcode, argument=int(raw_arg))


def parse_program(source: str) -> Program:
    """Parse a whole listing, one instruction per non-blank line."""
    instructions = [
        parse_instruction(line, line_no)
        for line_no, line in enumerate(source.splitlines(), start=1)
        if line.strip()
    ]
    logger.info("Parsed %d instructions", len(instructions))
    return Program.of(instructions)


def read_source(path: str | Path) -> str:
    """Read a listing from a UTF-8 text file."""
    path = Path(path)
    logger.info("Reading listing: %s", path)
    return path.read_text(encoding="utf-8")
