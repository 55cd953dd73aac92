from __future__ import annotations

from run_collapse.models import Run
from run_collapse.strategies.base import ProgressCallback
from run_collapse.validation import normalize_input, validate_or_raise


class RemoveStrategy:
    """
    Delete every run of three or more identical characters, including runs
    that only form after an earlier run was deleted.

    A single left-to-right scan keeps a stack of runs. Evicting a full run
    exposes a run of a different character, so no rescan is needed.
    """

    name = "ConsecutiveCharRemover"

    def _push(self, stack: list[Run], ch: str) -> None:
        if stack and stack[-1].character == ch:
            stack[-1] = stack[-1].incremented()
        else:
            stack.append(Run(ch, 1))
        if stack[-1].meets_threshold():
            stack.pop()

    def process(
        self,
        text: str | None,
        progress_callback: ProgressCallback | None = None,
    ) -> str:
        text = normalize_input(text)
        validate_or_raise(text)
        if not text:
            return ""

        stack: list[Run] = []
        for ch in text:
            self._push(stack, ch)

        result = "".join(run.expand() for run in stack)
        if progress_callback:
            progress_callback(
                f"Removed {len(text) - len(result)} of {len(text)} characters "
                f"(runs left: {len(stack)})."
            )
        return result
