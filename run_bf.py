#!/usr/bin/env python3
"""Command line wrapper: run a program (Hello World by default) and print what it outputs."""

import argparse
import sys

from bfcore.bf_runner import DEFAULT_STEP_LIMIT, run_with_limit
from bfcore.errors import BrainfuckError
from bfcore.program import HELLO_WORLD, parse_program
from brainfuck import BrainfuckInterpreter
from brainfuck_debugger import BrainfuckDebugger


def load_code(args) -> str:
    if args.code is not None:
        return args.code
    if args.file:
        with open(args.file, 'r') as f:
            return f.read()
    return HELLO_WORLD


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run a Brainfuck program on an unbounded tape")
    ap.add_argument("file", nargs="?", help="Program file; runs the built-in Hello World if omitted")
    ap.add_argument("--code", default=None,
                    help="Program text given inline; write --code=PROG when it starts with '-'")
    ap.add_argument("--step-limit", type=int, default=None,
                    help=f"Stop after this many steps (default: unbounded, BF_STEP_LIMIT={DEFAULT_STEP_LIMIT} with --bounded)")
    ap.add_argument("--bounded", action="store_true", help="Apply BF_STEP_LIMIT when --step-limit is not given")
    ap.add_argument("--debug", action="store_true", help="Trace every step")
    ap.add_argument("--repr", action="store_true", help="Print the output as a list of characters")
    args = ap.parse_args(argv)

    program = parse_program(load_code(args))
    try:
        if args.debug:
            max_steps = DEFAULT_STEP_LIMIT if args.step_limit is None else args.step_limit
            debugger = BrainfuckDebugger(program, max_steps=max_steps)
            debugger.debug_run()
            output = debugger.output
        elif args.step_limit is not None or args.bounded:
            result = run_with_limit(program, args.step_limit)
            if result.hit_step_limit:
                print(f"⚠️ Stopped after {result.steps} steps (possible infinite loop)", file=sys.stderr)
            output = result.output
        else:
            output = BrainfuckInterpreter(program).run()
    except BrainfuckError as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if args.repr:
        print(output)
    else:
        sys.stdout.write(''.join(output))
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
