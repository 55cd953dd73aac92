from collections.abc import Iterator

from run_collapse.shell import run_shell


def _scripted(lines: list[str]):
    answers: Iterator[str] = iter(lines)
    prompts: list[str] = []

    def read_line(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    return read_line, prompts


def test_single_round(capsys) -> None:
    read_line, _ = _scripted(["abcccbad", "2", "n"])
    assert run_shell(read_line) == 0
    out = capsys.readouterr().out
    assert "Original string:  abcccbad" in out
    assert "Strategy used:    ConsecutiveCharReplacer" in out
    assert "Processed string: d" in out
    assert "Thank you" in out


def test_reprompts_on_bad_menu_choice(capsys) -> None:
    read_line, prompts = _scripted(["aabbbba", "9", "1", "n"])
    run_shell(read_line)
    assert "Invalid choice. Please enter 1 or 2: " in prompts
    assert "Processed string: aaba" in capsys.readouterr().out


def test_invalid_input_reports_and_continues(capsys) -> None:
    read_line, _ = _scripted(["   ", "1", "y", "xccc", "2", "no"])
    run_shell(read_line)
    out = capsys.readouterr().out
    assert "Error: Invalid character ' ' at position 0" in out
    assert "Processed string: xx" in out


def test_eof_ends_session(capsys) -> None:
    read_line, _ = _scripted(["abc"])
    assert run_shell(read_line) == 0
    assert "Thank you" in capsys.readouterr().out
