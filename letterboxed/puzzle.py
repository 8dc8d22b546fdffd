from __future__ import annotations

from dataclasses import dataclass

NUM_SIDES = 4

# Rejection reasons carried by WordCheck
EMPTY = "empty"
UNKNOWN_LETTER = "unknown-letter"
SAME_SIDE = "same-side"
TOO_SHORT = "too-short"


class MalformedPuzzle(ValueError):
    """The puzzle specification does not describe four disjoint, non-empty sides."""


@dataclass(frozen=True)
class ValidWord:
    start_char: str
    end_char: str
    mask: int


@dataclass(frozen=True)
class WordCheck:
    """Outcome of validating one word: either a signature or the reason it was rejected."""

    word: str
    signature: ValidWord | None = None
    reason: str | None = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.signature is not None


class Puzzle:
    __slots__ = ("sides", "letters", "full_mask", "_side_of", "_bit_of")

    def __init__(self, sides: list[str]):
        if len(sides) != NUM_SIDES:
            raise MalformedPuzzle(f"Invalid number of sides: expected {NUM_SIDES}, got {len(sides)}")

        side_of: dict[str, int] = {}
        letters: list[str] = []
        for i, side in enumerate(sides):
            if not side:
                raise MalformedPuzzle(f"Missing characters for side {i}")
            for ch in side:
                if ch in side_of:
                    raise MalformedPuzzle(f"Duplicate character '{ch}' in puzzle")
                side_of[ch] = i
                letters.append(ch)

        # Bits follow the order letters first appear, scanning sides left to right
        self.sides: tuple[str, ...] = tuple(sides)
        self.letters: tuple[str, ...] = tuple(letters)
        self._side_of = side_of
        self._bit_of = {ch: 1 << i for i, ch in enumerate(letters)}
        self.full_mask: int = (1 << len(letters)) - 1

    @classmethod
    def parse(cls, spec: str) -> Puzzle:
        """Build a puzzle from comma-separated sides, e.g. ``"abc,def,ghi,jkl"``.

        Surrounding whitespace of each side is ignored. Raises MalformedPuzzle
        for a wrong side count, an empty side, or any repeated letter.
        """
        groups = [g.strip() for g in spec.split(",")]
        if len(groups) != NUM_SIDES:
            raise MalformedPuzzle(f"Invalid number of sides in puzzle \"{spec}\"")
        return cls(groups)

    def __contains__(self, letter: str) -> bool:
        return letter in self._side_of

    def __repr__(self) -> str:
        return f"Puzzle({','.join(self.sides)!r})"

    def side_of(self, letter: str) -> int:
        return self._side_of[letter]

    def bit_of(self, letter: str) -> int:
        return self._bit_of[letter]

    def check_word(self, word: str) -> WordCheck:
        """Validate a word against membership and side-adjacency rules.

        Consecutive letters must come from different sides; a side may be
        revisited later in the word. No minimum length is applied here.
        """
        if not word:
            return WordCheck(word, reason=EMPTY)

        mask = 0
        current_side = -1
        for ch in word:
            side = self._side_of.get(ch)
            if side is None:
                return WordCheck(word, reason=UNKNOWN_LETTER, detail=ch)
            if side == current_side:
                return WordCheck(word, reason=SAME_SIDE, detail=ch)
            mask |= self._bit_of[ch]
            current_side = side

        return WordCheck(word, signature=ValidWord(word[0], word[-1], mask))

    def validate_word(self, word: str) -> ValidWord | None:
        return self.check_word(word).signature
