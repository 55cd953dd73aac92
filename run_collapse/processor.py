from __future__ import annotations

from enum import Enum

from run_collapse.strategies.base import CollapseStrategy, ProgressCallback
from run_collapse.strategies.remover import RemoveStrategy
from run_collapse.strategies.replacer import ReplaceStrategy


class Strategy(Enum):
    REMOVE = ("1", "remove", "Remove sequences of 3+ consecutive characters")
    REPLACE = ("2", "replace", "Replace sequences of 3+ consecutive characters with previous letter")

    def __init__(self, choice: str, label: str, description: str) -> None:
        self.choice = choice
        self.label = label
        self.description = description

    @classmethod
    def from_choice(cls, value: str) -> Strategy:
        if not isinstance(value, str):
            raise TypeError(f"Strategy choice must be a string, got {type(value).__name__}")
        key = value.strip().lower()
        for member in cls:
            if key in {member.choice, member.label}:
                return member
        raise ValueError(f"Unknown strategy {value!r}. Choose 1/remove or 2/replace.")

    def build(self, *, max_passes: int | None = None) -> CollapseStrategy:
        if self is Strategy.REMOVE:
            return RemoveStrategy()
        return ReplaceStrategy(max_passes=max_passes)

    @property
    def display_name(self) -> str:
        return self.build().name

    def process(
        self,
        text: str | None,
        progress_callback: ProgressCallback | None = None,
    ) -> str:
        return self.build().process(text, progress_callback)


def remove_consecutive(text: str | None) -> str:
    return Strategy.REMOVE.process(text)


def replace_consecutive(text: str | None) -> str:
    return Strategy.REPLACE.process(text)


def process(text: str | None, strategy: Strategy | str) -> str:
    if strategy is None:
        raise TypeError("A processing strategy is required")
    if not isinstance(strategy, Strategy):
        strategy = Strategy.from_choice(strategy)
    return strategy.process(text)
