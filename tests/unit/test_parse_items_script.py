import importlib.util
from pathlib import Path

import pytest
from item_parser.config import ParserConfig
from item_parser.parsing import ItemListParser

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "parse_items.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("parse_items_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def parser():
    return ItemListParser(config=ParserConfig())


def test_default_output(script, parser):
    output = script.build_output(parser, "sword, 3x potions")
    assert output == {"items": ["Sword", "3x potions"], "serialized": "Sword, 3x potions"}


def test_records_only(script, parser):
    output = script.build_output(parser, "3x potions", records=True)
    assert list(output) == ["records"]
    assert output["records"]["items"][0]["quantity"] == 3


def test_records_and_trace_together(script, parser):
    output = script.build_output(parser, "Sword (cursed), Shield", records=True, trace=True)

    assert set(output) == {"records", "trace"}
    assert output["records"]["items"][0]["tags"] == ["cursed"]
    assert output["trace"]["items"] == ["Sword (cursed)", "Shield"]
    assert output["trace"]["stages_completed"] == 3
