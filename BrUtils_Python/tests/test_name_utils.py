"""Tests for NameUtils module."""
from BrUtils_Python.utils.name_utils import NameUtils


def test_shorten():
    """Test name shortening to two words."""
    assert NameUtils.shorten("Maria da Silva Souza") == "Maria Souza"
    assert NameUtils.shorten("Maria da Silva Souza", use_second_name=True) == "Maria da"
    assert NameUtils.shorten("  Maria  ") == "Maria"
    assert NameUtils.shorten("") == ""
    assert NameUtils.shorten("   ") == ""
    assert NameUtils.shorten(None) == ""
    assert NameUtils.shorten(123) == ""


def test_initials():
    """Test two-letter initials."""
    assert NameUtils.initials("Maria da Silva Souza") == "MS"
    assert NameUtils.initials("Maria") == "Ma"
    assert NameUtils.initials("  ") == ""
    assert NameUtils.initials(None) == ""


def test_reduce():
    """Test name reduction with suffix."""
    assert NameUtils.reduce("Maria da Silva Souza", 2, "...") == "Maria da..."
    assert NameUtils.reduce("Maria da Silva Souza", 3) == "Maria da Silva"
    assert NameUtils.reduce(" Maria Souza ", 2, "...") == "Maria Souza"
    assert NameUtils.reduce("") == ""
    assert NameUtils.reduce(None) == ""


def test_reduce_negative_limit():
    """Test a negative limit keeps no words."""
    assert NameUtils.reduce("Ana Maria Silva", -1) == ""
    assert NameUtils.reduce("Ana Maria Silva", -1, "...") == "..."
    assert NameUtils.reduce("Ana Maria Silva", 0, "...") == "..."
