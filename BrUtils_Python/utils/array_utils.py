from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Hashable, List


class ArrayUtils:
    """Utilities for sorting and deduplicating lists of values or objects."""

    @staticmethod
    def _property(item: Any, prop: str) -> Any:
        """Read a property from a mapping or from an object attribute."""
        if isinstance(item, Mapping):
            return item.get(prop)
        return getattr(item, prop, None)

    @staticmethod
    def sort_by_property(items: List[Any], prop: str, descending: bool = False) -> List[Any]:
        """
        Sort the list in place by one property of its items and return it.

        Values that cannot be compared (missing property, mixed types) count as
        equal, so those items keep their relative order.
        """
        def compare(a: Any, b: Any) -> int:
            left, right = ArrayUtils._property(a, prop), ArrayUtils._property(b, prop)
            try:
                if left < right:
                    return 1 if descending else -1
                if left > right:
                    return -1 if descending else 1
            except TypeError:
                pass
            return 0

        items.sort(key=cmp_to_key(compare))
        return items

    @staticmethod
    def has_duplicates(items: List[Hashable]) -> bool:
        return len(items) != len(set(items))

    @staticmethod
    def has_duplicate_objects(items: List[Any], prop: str) -> bool:
        """Check if two items share the same value for `prop`."""
        seen = set()
        for item in items:
            value = ArrayUtils._property(item, prop)
            if value in seen:
                return True
            seen.add(value)
        return False

    @staticmethod
    def remove_duplicates(items: List[Hashable]) -> List[Hashable]:
        """Return a new list keeping the first occurrence of each value."""
        return list(dict.fromkeys(items))

    @staticmethod
    def remove_duplicate_objects(items: List[Any], prop: str) -> List[Any]:
        """Return a new list keeping the first item for each value of `prop`."""
        seen = set()
        unique = []
        for item in items:
            value = ArrayUtils._property(item, prop)
            if value not in seen:
                seen.add(value)
                unique.append(item)
        return unique
