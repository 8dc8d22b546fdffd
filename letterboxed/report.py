from __future__ import annotations

import logging
from dataclasses import dataclass, field

from letterboxed.metrics import StageTimer
from letterboxed.puzzle import Puzzle
from letterboxed.solver import (
    best_coverage_words,
    collect_valid_words,
    construct_path,
    search_states,
)

logger = logging.getLogger("letterboxed")


@dataclass
class SolveReport:
    puzzle: str
    valid_word_count: int
    path: list[str] | None
    best_words: list[str] | None = None
    states_explored: int = 0
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        return {
            "puzzle": self.puzzle,
            "valid_word_count": self.valid_word_count,
            "solved": self.solved,
            "path": self.path,
            "steps": len(self.path) if self.path is not None else None,
            "best_words": self.best_words,
            "states_explored": self.states_explored,
            "timings": self.timings,
        }


def solve_puzzle(
    puzzle_spec: str,
    wordlist: list[str],
    *,
    min_length: int = 3,
    show_best_words: bool = False,
    max_states: int = 0,
) -> SolveReport:
    """Run one full solve: parse, filter the word list, search, and map the chain back to words.

    MalformedPuzzle and SearchLimitExceeded propagate to the caller; an
    unsolvable puzzle is reported with ``path=None``.
    """
    timer = StageTimer()

    with timer.stage("parse"):
        puzzle = Puzzle.parse(puzzle_spec)

    with timer.stage("validate"):
        valid_words = collect_valid_words(puzzle, wordlist, min_length)
    timer.record("valid_words", len(valid_words))

    best_words = None
    if show_best_words:
        with timer.stage("best_words"):
            best_words = [wordlist[idx] for idx in best_coverage_words(valid_words)]

    with timer.stage("search"):
        result = search_states(puzzle, valid_words, max_states)
    timer.record("states_explored", result.states_explored)

    path = None
    if result.solved:
        path = [wordlist[valid_words[idx].source_index] for idx in construct_path(result)]
        logger.info("Puzzle %s solved in %d words: %s", puzzle_spec, len(path), path)
    else:
        logger.info("Puzzle %s has no solution with %d valid words", puzzle_spec, len(valid_words))

    return SolveReport(
        puzzle=puzzle_spec,
        valid_word_count=timer.counters["valid_words"],
        path=path,
        best_words=best_words,
        states_explored=timer.counters["states_explored"],
        timings=timer.summary(),
    )


def format_report(report: SolveReport, separator: str = " -> ") -> str:
    lines = [f"Valid word count: {report.valid_word_count}"]
    if report.best_words is not None:
        lines.append("Best Words:")
        lines.extend(report.best_words)
    if report.path is not None:
        lines.append(f"Found a solution with {len(report.path)} steps:")
        lines.append(separator.join(report.path))
    else:
        lines.append("No solution found")
    return "\n".join(lines)
