# backend/flashdeck/domain/study/summary.py

import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class Verdict(str, Enum):
    correct = "correct"
    incorrect = "incorrect"


def round_half_up(value: float) -> int:
    # same as JavaScript Math.round, Python's round() is banker's rounding
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class SessionSummary:
    total: int
    answered_count: int
    correct_count: int
    incorrect_count: int
    accuracy: int

    @classmethod
    def from_results(cls, total: int, results: Mapping[int, Verdict]) -> "SessionSummary":
        answered = len(results)
        correct = sum(1 for v in results.values() if v is Verdict.correct)
        incorrect = answered - correct
        accuracy = round_half_up(correct / answered * 100) if answered > 0 else 0
        return cls(
            total=total,
            answered_count=answered,
            correct_count=correct,
            incorrect_count=incorrect,
            accuracy=accuracy,
        )
