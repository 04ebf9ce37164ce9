"""Stak entrypoint module exposing the public API and CLI."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from stak_lang import (
    STAK_GRAMMAR,
    CompileOptions,
    Compiler,
    ConfigError,
    ConsoleInput,
    DEFAULT_REGISTRY,
    DivisionByZero,
    Literal,
    MalformedInput,
    Pipeline,
    Primitive,
    StackUnderflow,
    StakError,
    Statement,
    UnknownToken,
    compile_program,
    disassemble,
    find_config,
    load_config,
    standard_registry,
)

__all__ = [
    "STAK_GRAMMAR",
    "StakError",
    "StackUnderflow",
    "DivisionByZero",
    "MalformedInput",
    "UnknownToken",
    "ConfigError",
    "CompileOptions",
    "Statement",
    "Literal",
    "Primitive",
    "Pipeline",
    "Compiler",
    "DEFAULT_REGISTRY",
    "compile_program",
    "disassemble",
    "standard_registry",
    "run_repl",
    "main",
]

logger = logging.getLogger("stak")


def _format_stack(stack: List[int]) -> str:
    return " ".join(str(v) for v in stack)


def run_repl(compiler: Compiler, stack: Optional[List[int]] = None) -> List[int]:
    """Compile and apply one line at a time against a persistent stack."""
    stack = list(stack or [])
    print("Stak interactive session. Type 'exit' to leave.")
    while True:
        try:
            text = input(">> ").strip()
        except EOFError:
            break
        if not text:
            continue
        if text in ("exit", "quit"):
            break
        try:
            stack = compiler.compile(text).apply(stack)
        except StakError as e:
            print(f"Error: {e}")
            continue
        print(f"[{_format_stack(stack)}]")
    return stack


def _resolve_options(args: argparse.Namespace) -> CompileOptions:
    options = CompileOptions.from_env()
    config_path = args.config or find_config(os.getcwd())
    if config_path:
        options = load_config(config_path, base=options)
    if args.strict:
        options.strict = True
    if args.verbose:
        options.log_level = "DEBUG"
    return options


def main():
    parser = argparse.ArgumentParser(description="Stak postfix stack compiler")
    parser.add_argument("program", nargs="?", help="Program text, e.g. '1 2 +'")
    parser.add_argument("-f", "--file", help="Read the program from a file")
    parser.add_argument(
        "--stack", type=int, nargs="*", default=[], help="Initial stack, bottom first"
    )
    parser.add_argument(
        "--strict", action="store_true", help="Reject unknown tokens instead of dropping them"
    )
    parser.add_argument("--config", help="Path to a stak.toml")
    parser.add_argument(
        "--disassemble", action="store_true", help="Print the compiled steps instead of running"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    try:
        options = _resolve_options(args)
    except ConfigError as e:
        print(f"FATAL ERROR\n{e}")
        sys.exit(1)

    logging.basicConfig(
        stream=sys.stderr,
        level=options.log_level_value,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    compiler = Compiler(registry=standard_registry(ConsoleInput()), options=options)

    if args.program is None and not args.file:
        run_repl(compiler, args.stack)
        return

    try:
        if args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                source = f.read()
        else:
            source = args.program
        program = compiler.compile(source)
        if args.disassemble:
            for line in disassemble(program):
                print(line)
            return
        logger.info("Running %r on %d value(s)", str(program), len(args.stack))
        print(_format_stack(program.apply(args.stack)))
    except (StakError, OSError) as e:
        print(f"FATAL ERROR\n{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
