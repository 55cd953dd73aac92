from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

ProgressCallback = Callable[[str], None]


class CollapseStrategy(Protocol):
    name: str

    def process(
        self,
        text: str | None,
        progress_callback: ProgressCallback | None = None,
    ) -> str:
        """Collapse runs of three or more identical characters until none remain."""
