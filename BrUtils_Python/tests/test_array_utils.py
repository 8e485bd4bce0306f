"""Tests for ArrayUtils module."""
from types import SimpleNamespace

from BrUtils_Python.utils.array_utils import ArrayUtils


def test_sort_by_property():
    """Test in-place sort of dicts."""
    items = [{"nome": "Carla"}, {"nome": "Ana"}, {"nome": "Bruno"}]
    result = ArrayUtils.sort_by_property(items, "nome")
    assert result is items
    assert [i["nome"] for i in items] == ["Ana", "Bruno", "Carla"]

    ArrayUtils.sort_by_property(items, "nome", descending=True)
    assert [i["nome"] for i in items] == ["Carla", "Bruno", "Ana"]


def test_sort_by_property_objects_is_stable():
    """Test sort of objects keeps equal items in order."""
    items = [
        SimpleNamespace(id=1, idade=30),
        SimpleNamespace(id=2, idade=20),
        SimpleNamespace(id=3, idade=30),
    ]
    ArrayUtils.sort_by_property(items, "idade")
    assert [i.id for i in items] == [2, 1, 3]


def test_has_duplicates():
    """Test duplicate detection of primitives."""
    assert ArrayUtils.has_duplicates([1, 2, 1])
    assert not ArrayUtils.has_duplicates([1, 2, 3])
    assert not ArrayUtils.has_duplicates([])


def test_has_duplicate_objects():
    """Test duplicate detection by property."""
    items = [{"cpf": "1"}, {"cpf": "2"}, {"cpf": "1"}]
    assert ArrayUtils.has_duplicate_objects(items, "cpf")
    assert not ArrayUtils.has_duplicate_objects(items[:2], "cpf")


def test_remove_duplicates():
    """Test first occurrence is kept."""
    items = [3, 1, 3, 2, 1]
    assert ArrayUtils.remove_duplicates(items) == [3, 1, 2]
    assert items == [3, 1, 3, 2, 1]


def test_remove_duplicate_objects():
    """Test first object per property value is kept."""
    items = [
        {"cpf": "1", "nome": "Ana"},
        {"cpf": "2", "nome": "Bruno"},
        {"cpf": "1", "nome": "Outra Ana"},
    ]
    result = ArrayUtils.remove_duplicate_objects(items, "cpf")
    assert [i["nome"] for i in result] == ["Ana", "Bruno"]
    assert len(items) == 3


def test_sort_by_property_missing_or_mixed_values():
    """Test items without the property or with mixed types do not break the sort."""
    items = [{"n": 2}, {}, {"n": 1}]
    assert ArrayUtils.sort_by_property(items, "n") is items
    assert len(items) == 3

    items = [{"n": "b"}, {"n": 1}, {"n": "a"}]
    ArrayUtils.sort_by_property(items, "n")
    assert len(items) == 3

    # Comparable values still sort around an unknown one
    items = [{"n": 3}, {"n": 1}, {"n": 2}, {"x": 0}]
    ArrayUtils.sort_by_property(items, "n")
    assert [i.get("n") for i in items[:3]] == [1, 2, 3]
