from __future__ import annotations

import argparse
import sys
import time

from run_collapse.processor import Strategy
from run_collapse.shell import run_shell

__version__ = "0.1.0"


def _status(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    print(f"[run-collapse] {message}", file=sys.stderr, flush=True)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-collapse",
        description="Collapse runs of 3+ identical lowercase letters until none remain.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="String to process; '-' reads one string per line from stdin. "
        "Omit to start the interactive shell.",
    )
    parser.add_argument(
        "-s",
        "--strategy",
        choices=[member.label for member in Strategy],
        help=f"Collapse policy (default: {Strategy.REMOVE.label}; not used by the interactive shell)",
    )
    parser.add_argument(
        "--max-passes",
        type=_positive_int,
        help="Upper bound on replacement passes (replace strategy only)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress/status messages (not used by the interactive shell)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_inputs(text: str) -> list[str]:
    if text != "-":
        return [text]
    return [line.rstrip("\r\n") for line in sys.stdin]


def run(args: argparse.Namespace) -> int:
    if args.text is None:
        return run_shell()

    strategy = Strategy.from_choice(args.strategy or Strategy.REMOVE.label)
    engine = strategy.build(max_passes=args.max_passes)
    progress_callback = None if args.quiet else (lambda msg: _status(msg, quiet=False))
    _status(f"Strategy: {engine.name}", quiet=args.quiet)

    for text in _read_inputs(args.text):
        start = time.monotonic()
        result = engine.process(text, progress_callback)
        elapsed = time.monotonic() - start
        _status(f"Processed {len(text)} characters ({elapsed:.3f}s).", quiet=args.quiet)
        print(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.text is None and (args.strategy or args.max_passes is not None or args.quiet):
        parser.error("--strategy, --max-passes and --quiet need a text argument or '-'")
    try:
        return run(args)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
