from typing import Any


class NameUtils:
    """Utilities to shorten personal names."""

    @staticmethod
    def shorten(full_name: Any, use_second_name: bool = False) -> str:
        """Reduce a name to two words: first + last, or first + second."""
        if not full_name or not isinstance(full_name, str):
            return ""
        names = full_name.split()
        if not names:
            return ""
        if len(names) == 1:
            return names[0]
        if use_second_name:
            return f"{names[0]} {names[1]}"
        return f"{names[0]} {names[-1]}"

    @staticmethod
    def initials(name: Any) -> str:
        """Two letters: first letters of the first and last words, or the first two letters of a single word."""
        names = name.split() if isinstance(name, str) else []
        if not names:
            return ""
        if len(names) == 1:
            return names[0][:2]
        return names[0][:1] + names[-1][:1]

    @staticmethod
    def reduce(name: Any, limit: int = 2, suffix: str = "") -> str:
        """Keep at most `limit` words; `suffix` is appended only when words were dropped."""
        if not isinstance(name, str) or not name.strip():
            return ""
        name = name.strip()
        words = name.split()
        limit = max(limit, 0)
        if len(words) <= limit:
            return name
        return " ".join(words[:limit]) + suffix
