import pytest
from item_parser.parsing import ItemSerializer


@pytest.fixture
def serializer():
    return ItemSerializer()


def test_empty_list_is_none_sentinel(serializer):
    assert serializer.serialize([]) == "None"


def test_trims_and_joins(serializer):
    assert serializer.serialize(["Sword", " Shield "]) == "Sword, Shield"


def test_filters_blank_and_non_strings(serializer):
    assert serializer.serialize(["", "  ", 5, None, "Axe"]) == "Axe"
    assert serializer.serialize(["", "  "]) == "None"


@pytest.mark.parametrize("names", [None, "Sword", 42, {"a": 1}])
def test_non_sequence_is_none_sentinel(serializer, names):
    assert serializer.serialize(names) == "None"


def test_custom_separator(serializer):
    assert serializer.serialize(["Sword", "Shield"], separator=" | ") == "Sword | Shield"
    assert ItemSerializer(separator="\n").serialize(("Sword", "Shield")) == "Sword\nShield"


def test_accepts_generators(serializer):
    assert serializer.serialize(name for name in ["Rope", "Torch"]) == "Rope, Torch"
