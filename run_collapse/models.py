from __future__ import annotations

from dataclasses import dataclass

RUN_THRESHOLD = 3


@dataclass(frozen=True, slots=True)
class Run:
    character: str
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Run count must be positive: {self.count}")

    def incremented(self) -> Run:
        return Run(self.character, self.count + 1)

    def meets_threshold(self) -> bool:
        return self.count >= RUN_THRESHOLD

    def with_count(self, count: int) -> Run:
        return Run(self.character, count)

    def expand(self) -> str:
        return self.character * self.count

    def __str__(self) -> str:
        return f"{self.character}:{self.count}"
