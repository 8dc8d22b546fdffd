from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import NamedTuple

from letterboxed.puzzle import TOO_SHORT, Puzzle, ValidWord

logger = logging.getLogger("letterboxed")


class SearchLimitExceeded(RuntimeError):
    """The search discovered more states than the configured cap allows."""


@dataclass(frozen=True)
class ValidWordRef:
    source_index: int  # position in the caller's word list
    signature: ValidWord


class SearchState(NamedTuple):
    mask: int
    letter: str


class Traversal(NamedTuple):
    word_index: int
    prev_state: SearchState


@dataclass
class SearchResult:
    goal: SearchState | None  # None when the full mask was never reached
    traversals: dict[SearchState, Traversal]

    @property
    def solved(self) -> bool:
        return self.goal is not None

    @property
    def states_explored(self) -> int:
        return len(self.traversals)


def load_wordlist(path: str) -> list[str]:
    """Read one word per line, keeping file order so list positions match lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f]


def collect_valid_words(puzzle: Puzzle, words: list[str], min_length: int = 3) -> list[ValidWordRef]:
    valid: list[ValidWordRef] = []
    for idx, word in enumerate(words):
        if len(word) < min_length:
            if word:
                logger.debug("rejected word=%r reason=%s", word, TOO_SHORT)
            continue
        check = puzzle.check_word(word)
        if not check:
            logger.debug("rejected word=%r reason=%s detail=%r", word, check.reason, check.detail)
            continue
        valid.append(ValidWordRef(idx, check.signature))
    logger.info("Found %d valid words out of %d candidates", len(valid), len(words))
    return valid


def search_states(puzzle: Puzzle, words: list[ValidWordRef], max_states: int = 0) -> SearchResult:
    """Breadth-first search over (letters used, end letter) states.

    Each layer of the frontier corresponds to one more word in the chain, and
    every state is recorded only the first time it is reached, so the first
    state whose mask covers the whole puzzle ends a minimum-length chain.

    When the frontier runs dry without covering every letter the result has
    no goal but still carries every state that was discovered.
    Raises SearchLimitExceeded if ``max_states`` is positive and exceeded.
    """
    word_idx_by_start: dict[str, list[int]] = defaultdict(list)
    for idx, ref in enumerate(words):
        word_idx_by_start[ref.signature.start_char].append(idx)

    known_from: dict[SearchState, Traversal] = {}
    # Synthetic start states: mask 0 on every letter, never recorded in known_from
    current = [SearchState(0, letter) for letter in puzzle.letters]
    depth = 0

    while current:
        depth += 1
        next_states: list[SearchState] = []
        for state in current:
            for word_idx in word_idx_by_start.get(state.letter, ()):
                sig = words[word_idx].signature
                new_state = SearchState(state.mask | sig.mask, sig.end_char)
                if new_state in known_from:
                    continue
                known_from[new_state] = Traversal(word_idx, state)
                if new_state.mask == puzzle.full_mask:
                    logger.info("Solution found at depth %d after %d states", depth, len(known_from))
                    return SearchResult(new_state, known_from)
                next_states.append(new_state)

            if max_states > 0 and len(known_from) > max_states:
                raise SearchLimitExceeded(f"Search exceeded {max_states} states at depth {depth}")

        logger.debug("depth=%d new_states=%d total_states=%d", depth, len(next_states), len(known_from))
        current = next_states

    logger.info("No solution after exploring %d states", len(known_from))
    return SearchResult(None, known_from)


def construct_path(result: SearchResult) -> list[int]:
    """Walk traversals back from the goal to a start state; returns word indices in chain order."""
    if result.goal is None:
        raise ValueError("Cannot construct a path from an unsolved search")
    reversed_path: list[int] = []
    state = result.goal
    while state.mask != 0:
        traversal = result.traversals[state]
        reversed_path.append(traversal.word_index)
        state = traversal.prev_state
    reversed_path.reverse()
    return reversed_path


def find_shortest_chain(puzzle: Puzzle, words: list[ValidWordRef], max_states: int = 0) -> list[int] | None:
    result = search_states(puzzle, words, max_states)
    if not result.solved:
        return None
    return construct_path(result)


def count_bits(mask: int) -> int:
    return bin(mask).count("1")


def best_coverage_words(words: list[ValidWordRef]) -> list[int]:
    """Source indices of every valid word using the largest number of distinct letters."""
    max_count = 0
    best: list[int] = []
    for ref in words:
        used = count_bits(ref.signature.mask)
        if used > max_count:
            best = [ref.source_index]
            max_count = used
        elif used == max_count:
            best.append(ref.source_index)
    return best
