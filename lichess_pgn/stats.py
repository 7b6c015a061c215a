"""Counts of the elements found while reading a PGN file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Stats:
    """Counters for games, headers, moves, NAGs, comments, variations and outcomes."""

    games: int = 0
    headers: int = 0
    sans: int = 0
    nags: int = 0
    comments: int = 0
    variations: int = 0
    outcomes: int = 0

    def header(self, key: object, value: object) -> None:
        self.headers += 1

    def san(self, san: object) -> None:
        self.sans += 1

    def nag(self, nag: object) -> None:
        self.nags += 1

    def comment(self, comment: object) -> None:
        self.comments += 1

    def end_variation(self) -> None:
        self.variations += 1

    def outcome(self, outcome: object) -> None:
        self.outcomes += 1

    def end_game(self) -> None:
        self.games += 1

    def __str__(self) -> str:
        return (
            "File stats:\n\n"
            f"Games: {self.games}\n"
            f"Headers: {self.headers}\n"
            f"SANs: {self.sans}\n"
            f"NAGs: {self.nags}\n"
            f"Comments: {self.comments}\n"
            f"Variations: {self.variations}\n"
            f"Outcomes: {self.outcomes}\n"
        )