import pytest
from pydantic import ValidationError

from item_parser.contracts import ItemListDTO, ItemRecord


def test_record_normalizes_fields():
    record = ItemRecord(name=" Potions ", quantity=3, tags=["Fresh", " ", "SEALED "])
    assert record.name == "Potions"
    assert record.quantity == 3
    assert record.tags == ["fresh", "sealed"]


def test_record_defaults():
    record = ItemRecord(name="Sword")
    assert record.quantity == 1
    assert record.tags == []


@pytest.mark.parametrize("kwargs", [
    {"name": "Sword", "quantity": 0},
    {"name": "Sword", "quantity": -2},
    {"name": ""},
    {"name": "  "},
    {"name": "None"},
])
def test_record_rejects_invalid(kwargs):
    with pytest.raises(ValidationError):
        ItemRecord(**kwargs)


def test_list_dto_names():
    dto = ItemListDTO(items=[ItemRecord(name="Sword"), ItemRecord(name="Shield", tags=["dented"])])
    assert dto.names == ["Sword", "Shield"]
    assert dto.model_dump()["items"][1]["tags"] == ["dented"]
