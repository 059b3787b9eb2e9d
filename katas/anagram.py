"""Find anagrams of a word among candidates."""

from collections.abc import Iterable


def anagrams_for(word: str, candidates: Iterable[str]) -> set[str]:
    """Candidates that are anagrams of ``word``, ignoring case but not identity."""
    lowered = word.lower()
    key = sorted(lowered)
    return {
        candidate
        for candidate in candidates
        if candidate.lower() != lowered and sorted(candidate.lower()) == key
    }