"""Tipos e schema base compartilhados"""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Campo obrigatório: rejeita string vazia ou só com espaços
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Colunas Integer são int32 no Postgres
INT32_MAX = 2_147_483_647
Count = Annotated[int, Field(ge=0, le=INT32_MAX)]


class CamelModel(BaseModel):
    """Atributos em snake_case no Python, camelCase no JSON"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


def to_naive_utc(value: datetime) -> datetime:
    """Datas com fuso são convertidas para UTC e gravadas sem tzinfo"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
