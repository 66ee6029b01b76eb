import pytest
from item_parser.parsing.s1_normalization import NormalizationStage


@pytest.fixture
def stage():
    return NormalizationStage()


@pytest.mark.parametrize("raw", [None, 42, ["Sword"], "", "   ", "None", "none", "  NONE  "])
def test_empty_inputs(stage, raw):
    result = stage.process(raw)
    assert result.is_empty
    assert result.text == ""


def test_strips_nested_brackets(stage):
    result = stage.process("[[Sword, Shield]]")
    assert result.text == "Sword, Shield"
    assert result.unwrap_layers == 2


def test_sentinel_inside_brackets(stage):
    # [None] и { } - тоже пустой список
    assert stage.process("[None]").is_empty
    assert stage.process("{ }").is_empty
    assert stage.process("[ 'none' ]").is_empty


def test_strips_single_quote_layer(stage):
    assert stage.process('"Sword, Shield"').text == "Sword, Shield"
    assert stage.process("['Sword']").text == "Sword"


def test_lone_quote_is_empty(stage):
    assert stage.process('"').is_empty


def test_newlines_become_commas_at_depth_zero(stage):
    result = stage.process("Sword\nShield")
    assert result.text == "Sword,Shield"
    assert result.newlines_converted == 1


def test_newline_after_comma_not_doubled(stage):
    assert stage.process("Sword,\nShield").text == "Sword,Shield"
    assert stage.process("Sword\r\nShield").text == "Sword,Shield"


def test_newline_inside_parentheses_becomes_space(stage):
    result = stage.process("Cloak (torn,\nmuddy)\nBoots")
    assert result.text == "Cloak (torn, muddy),Boots"
    assert result.newlines_converted == 2


def test_strips_markdown(stage):
    result = stage.process("**Sword** and `Shield` ~~Axe~~, *Bow*")
    assert result.text == "Sword and Shield Axe, Bow"


def test_collapses_whitespace(stage):
    assert stage.process("Sword,   Shield\t\tAxe").text == "Sword, Shield Axe"
