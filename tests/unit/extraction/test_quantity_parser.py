import pytest
from item_parser.parsing.extraction import QuantityParser


@pytest.fixture
def parser():
    return QuantityParser()


@pytest.mark.parametrize("text,name,quantity,notation", [
    ("3x Potions", "Potions", 3, "prefix"),
    ("3 x Potions", "Potions", 3, "prefix"),
    ("12X Arrows", "Arrows", 12, "prefix"),
    ("Potions (3)", "Potions", 3, "suffix"),
    ("Potions (x3)", "Potions", 3, "suffix"),
    ("Potions(X3)", "Potions", 3, "suffix"),
    ("3 Potions", "Potions", 3, "bare"),
    ("  5 Iron Nails  ", "Iron Nails", 5, "bare"),
])
def test_quantity_notations(parser, text, name, quantity, notation):
    result = parser.parse(text)
    assert result.name == name
    assert result.quantity == quantity
    assert result.notation == notation


def test_no_quantity(parser):
    result = parser.parse("Sword")
    assert (result.name, result.quantity, result.notation) == ("Sword", 1, None)


def test_purely_numeric_name_kept(parser):
    result = parser.parse("2024")
    assert (result.name, result.quantity) == ("2024", 1)


def test_prefix_requires_space_after_x(parser):
    # "3 xylophones" - это количество 3, а не "3x ylophones"
    result = parser.parse("3 xylophones")
    assert (result.name, result.quantity, result.notation) == ("xylophones", 3, "bare")


def test_zero_is_not_a_quantity(parser):
    result = parser.parse("0x Potions")
    assert (result.name, result.quantity) == ("0x Potions", 1)


@pytest.mark.parametrize("text", [None, "", "   ", 7])
def test_empty_input(parser, text):
    result = parser.parse(text)
    assert result.to_dict() == {"name": "", "quantity": 1}
