from __future__ import annotations

from run_collapse.models import RUN_THRESHOLD
from run_collapse.strategies.base import ProgressCallback
from run_collapse.validation import normalize_input, validate_or_raise


def single_pass(text: str) -> str:
    """
    Replace each maximal run of three or more characters with the character
    written just before it in this pass's output. A run at the very start has
    nothing before it and is dropped.
    """
    out: list[str] = []
    i = 0
    total = len(text)
    while i < total:
        current = text[i]
        j = i + 1
        while j < total and text[j] == current:
            j += 1

        if j - i >= RUN_THRESHOLD:
            if out:
                out.append(out[-1][-1])
        else:
            out.append(text[i:j])
        i = j
    return "".join(out)


class ReplaceStrategy:
    name = "ConsecutiveCharReplacer"

    def __init__(self, *, max_passes: int | None = None) -> None:
        if max_passes is not None and max_passes < 1:
            raise ValueError(f"max_passes must be positive: {max_passes}")
        self.max_passes = max_passes

    def _pass_ceiling(self, text: str) -> int:
        if self.max_passes is not None:
            return self.max_passes
        # a changing pass shortens the string by at least two characters
        return len(text) // 2 + 1

    def collapse(
        self,
        text: str,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[str, int]:
        ceiling = self._pass_ceiling(text)
        current = text
        passes = 0
        while True:
            if passes >= ceiling:
                raise RuntimeError(
                    f"Replacement did not converge within {ceiling} passes "
                    f"(current length {len(current)})."
                )
            passes += 1
            collapsed = single_pass(current)
            if progress_callback:
                progress_callback(f"Pass {passes}: {len(current)} -> {len(collapsed)} characters.")
            if collapsed == current:
                return collapsed, passes
            current = collapsed

    def process(
        self,
        text: str | None,
        progress_callback: ProgressCallback | None = None,
    ) -> str:
        text = normalize_input(text)
        validate_or_raise(text)
        if not text:
            return ""

        result, passes = self.collapse(text, progress_callback)
        if progress_callback:
            progress_callback(f"Reached a fixed point after {passes} passes.")
        return result
