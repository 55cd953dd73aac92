"""Interactive loop: read a string, pick a strategy, show the result, repeat."""

from __future__ import annotations

from collections.abc import Callable

from run_collapse.processor import Strategy
from run_collapse.validation import InvalidCharacterError

ReadLine = Callable[[str], str]


def _print_welcome() -> None:
    print("==============================================")
    print("   Consecutive Character Collapse Processor   ")
    print("==============================================")
    print("Runs of 3 or more identical characters are collapsed")
    print("until none remain. Only lowercase letters (a-z) are supported.")
    print()


def _choose_strategy(read_line: ReadLine) -> Strategy:
    print("\nChoose processing strategy:")
    for member in Strategy:
        print(f"{member.choice} - {member.description}")
    prompt = "Enter your choice (1 or 2): "
    while True:
        choice = read_line(prompt).strip()
        try:
            return Strategy.from_choice(choice)
        except ValueError:
            prompt = "Invalid choice. Please enter 1 or 2: "


def _display_result(text: str, result: str, strategy: Strategy) -> None:
    print("\nProcessing Results:")
    print("-------------------")
    print(f"Original string:  {text}")
    print(f"Strategy used:    {strategy.display_name}")
    print(f"Processed string: {result}")
    print("-------------------")


def run_shell(read_line: ReadLine = input) -> int:
    _print_welcome()
    while True:
        try:
            text = read_line("Enter the string to process: ")
            strategy = _choose_strategy(read_line)
            try:
                result = strategy.process(text)
            except InvalidCharacterError as exc:
                print(f"\nError: {exc}")
            else:
                _display_result(text, result, strategy)
            answer = read_line("\nProcess another string? (y/n): ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not answer.strip().lower().startswith("y"):
            break

    print("\nThank you for using the Consecutive Character Processor!")
    return 0
