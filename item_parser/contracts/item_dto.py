"""
DTO контракт: Parser -> потребители (инвентарь, UI, diff состояния).

Структурированная запись предмета: имя, количество, статусы.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemRecord(BaseModel):
    """
    Один предмет после извлечения количества и статусов.
    """

    name: str = Field(..., description="Имя предмета (без количества и статусов)")
    quantity: int = Field(1, description="Количество, >= 1")
    tags: List[str] = Field(
        default_factory=list, description="Статусы в нижнем регистре, порядок как в тексте"
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v or v.lower() == "none":
            raise ValueError("Name must be non-empty and not 'none'")
        return v

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be >= 1")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        return [tag.strip().lower() for tag in v if tag and tag.strip()]


class ItemListDTO(BaseModel):
    """
    DTO для результата разбора списка предметов.
    """

    items: List[ItemRecord] = Field(default_factory=list, description="Записи предметов")
    source_text: Optional[str] = Field(None, description="Исходный текст от LLM для отладки")
    metrics: dict[str, float] = Field(
        default_factory=dict, description="Метрики разбора (тайминги, количество)"
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def names(self) -> List[str]:
        return [item.name for item in self.items]
