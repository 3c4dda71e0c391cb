"""In-memory learner progress: seen words, favorites and streak."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass(slots=True)
class LearnerProgress:
    """Tracks which curated words a learner has seen during a session.

    Attributes
    ----------
    used:
        Indices of words already shown, in display order.
    favorites:
        Indices the learner marked as favorite.
    words_learned:
        High-water mark of distinct words seen.
    streak:
        Consecutive words viewed, capped at the number of distinct words.
    """

    used: list[int] = field(default_factory=list)
    favorites: set[int] = field(default_factory=set)
    words_learned: int = 0
    streak: int = 0

    def next_index(self, total: int, rng: random.Random | None = None) -> int:
        """Pick an index in ``range(total)`` that has not been shown yet.

        Once every word has been shown the history is cleared and the whole
        list becomes available again.
        """
        if total <= 0:
            raise ValueError("cannot pick from an empty word list")
        rng = rng or random.Random()

        available = [i for i in range(total) if i not in self.used]
        if not available:
            self.used.clear()
            available = list(range(total))

        index = rng.choice(available)
        self.used.append(index)
        return index

    def record_view(self) -> None:
        self.words_learned = max(self.words_learned, len(self.used))
        self.streak = min(self.streak + 1, len(self.used))

    def toggle_favorite(self, index: int) -> bool:
        """Flip the favorite flag of ``index`` and return the new state."""
        if index in self.favorites:
            self.favorites.discard(index)
            return False
        self.favorites.add(index)
        return True

    def is_favorite(self, index: int) -> bool:
        return index in self.favorites

    def stats(self) -> dict[str, int]:
        return {
            "words_learned": self.words_learned,
            "favorites": len(self.favorites),
            "streak": self.streak,
        }


__all__ = ["LearnerProgress"]
