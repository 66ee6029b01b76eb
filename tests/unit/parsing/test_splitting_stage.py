import pytest
from item_parser.parsing.s2_splitting import SplittingStage


@pytest.fixture
def stage():
    return SplittingStage()


def test_comma_inside_parentheses_does_not_split(stage):
    result = stage.process("Leather Jacket (worn, vintage), Boots")
    assert result.candidates == ["Leather Jacket (worn, vintage)", " Boots"]
    assert result.max_depth == 1


def test_decimal_comma_preserved(stage):
    result = stage.process("Bag of 1,000 Gold Coins, Rope")
    assert result.candidates == ["Bag of 1,000 Gold Coins", " Rope"]
    assert result.decimal_commas == 1


def test_comma_followed_by_space_splits_numbers(stage):
    assert stage.process("3, 4").candidates == ["3", " 4"]


def test_plus_and_pipe_separators(stage):
    assert stage.process("Sword+Shield|Axe").candidates == ["Sword", "Shield", "Axe"]


def test_ampersand_with_spaces_splits(stage):
    assert stage.process("Tom & Jerry").candidates == ["Tom ", " Jerry"]


@pytest.mark.parametrize("text", ["Mom&Dad", "Salt &Pepper", "Salt& Pepper"])
def test_ampersand_without_both_spaces_kept(stage, text):
    assert stage.process(text).candidates == [text]


def test_separators_inside_parentheses_ignored(stage):
    assert stage.process("Kit (a, b & c | d) + Rope").candidates == ["Kit (a, b & c | d) ", " Rope"]


def test_unbalanced_closing_paren_clamped(stage):
    # Лишняя ")" не уводит глубину в минус
    result = stage.process("Sword), Shield")
    assert result.candidates == ["Sword)", " Shield"]
    assert not result.unbalanced


def test_unclosed_paren_swallows_rest(stage):
    result = stage.process("Cloak (torn, Boots")
    assert result.candidates == ["Cloak (torn, Boots"]
    assert result.unbalanced


def test_empty_text(stage):
    assert stage.process("").candidates == []


def test_trailing_separator_leaves_empty_candidate(stage):
    assert stage.process("Sword,").candidates == ["Sword", ""]
