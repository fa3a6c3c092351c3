"""Command-line interface: bootcode [file] [options]."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import constants
from .parser import ProgramParseError, parse_program, read_source
from .program_stats import count_opcodes
from .repair import survey_mutations
from .run import run
from .run_types import VMConfig


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootcode",
        description="Run an acc/jmp/nop listing and repair it if it loops",
    )
    parser.add_argument("file", nargs="?", help="Listing file to run")
    parser.add_argument(
        "--acc",
        "-a",
        type=int,
        default=constants.DEFAULT_INIT_ACCUMULATOR,
        help="Initial accumulator (default: 0)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=constants.SEQUENTIAL_WORKERS,
        help="Threads for the repair search (default: 0, sequential)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print the program, each step and pipeline statistics",
    )
    parser.add_argument(
        "--dump-only", action="store_true", help="Only print the canonical listing"
    )
    parser.add_argument(
        "--stats-only", action="store_true", help="Only print opcode counts"
    )
    parser.add_argument(
        "--no-repair", action="store_true", help="Execute without repair search"
    )
    parser.add_argument(
        "--survey", action="store_true", help="Print the outcome of every mutation"
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if args.workers < 0:
        print("error: --workers must be >= 0", file=sys.stderr)
        return 2

    try:
        if not args.file:
            source = constants.DEMO_LISTING
            if not args.json:
                print("No file provided. Using built-in demo:\n")
                print(source)
        else:
            source = read_source(args.file)

        if args.dump_only:
            program = parse_program(source)
            if args.json:
                print(
                    json.dumps(
                        [inst.model_dump(mode="json") for inst in program], indent=2
                    )
                )
            else:
                print(program.to_listing(), end="")
            return 0

        if args.stats_only:
            counts = count_opcodes(parse_program(source))
            if args.json:
                print(json.dumps(counts, indent=2))
            else:
                for name, count in counts.items():
                    print(f"  {name:<4} {count}")
            return 0

        config = VMConfig(
            init_accumulator=args.acc,
            verbose=args.verbose and not args.json,
            max_workers=args.workers,
        )

        if args.survey:
            attempts = survey_mutations(parse_program(source), config)
            if args.json:
                print(
                    json.dumps(
                        [
                            {"index": a.index, **a.result.to_dict()}
                            for a in attempts
                        ],
                        indent=2,
                    )
                )
            elif not config.verbose:
                for attempt in attempts:
                    print(f"  {attempt}")
            return 0 if any(a.succeeded for a in attempts) else 1

        report = run(source, config, repair=not args.no_repair)
    except (ProgramParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(f"program exec: {report.result}")
        if report.repair is not None:
            print(f"repair: {report.repair}")

    if report.result.ok:
        return 0
    return 0 if report.repair is not None and report.repair.found else 1


if __name__ == "__main__":
    sys.exit(main())
