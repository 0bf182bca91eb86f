"""Match results and their CSV storage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Sequence

from pongfire.config import assets_path

RESULTS_FILE = "resultados.csv"


class MatchOutcome(IntEnum):
    DRAW = 0
    PLAYER_1 = 1
    PLAYER_2 = 2
    QUIT = 3
    CPU = 4


@dataclass
class Result:
    """Outcome of a finished match; ``time`` is in seconds."""

    outcome: MatchOutcome = MatchOutcome.DRAW
    time: float = 0.0
    player1: int = 0
    player2: int = 0

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Result:
        """Build a result from the four CSV columns: outcome, player1, player2, time."""
        if len(row) != 4:
            raise ValueError("A result needs exactly 4 fields.")
        return cls(
            outcome=MatchOutcome(int(row[0])),
            player1=int(row[1]),
            player2=int(row[2]),
            time=float(row[3]),
        )

    def to_row(self) -> list[str]:
        return [
            str(int(self.outcome)),
            str(self.player1),
            str(self.player2),
            f"{self.time:g}",
        ]


def _default_path(path: str | Path | None) -> Path:
    return Path(path) if path is not None else Path(assets_path(RESULTS_FILE))


def write_result(result: Result, path: str | Path | None = None) -> None:
    """Append one result as a CSV line, creating the file if needed."""
    with _default_path(path).open("a", encoding="utf-8") as stream:
        stream.write(",".join(result.to_row()) + "\n")


def read_results(path: str | Path | None = None) -> list[Result]:
    """Read every stored result; a missing file holds none."""
    target = _default_path(path)
    if not target.exists():
        return []
    results = []
    for token in target.read_text(encoding="utf-8").split():
        fields = token.split(",")
        if fields and fields[-1] == "":
            fields.pop()
        results.append(Result.from_row(fields))
    return results