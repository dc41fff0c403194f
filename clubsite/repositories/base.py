"""Repository base (Async) com o contrato CRUD comum aos recursos de conteúdo"""
from typing import Any, ClassVar, Dict, List, Optional, Type
import logging

from pydantic import BaseModel as PydanticModel, ValidationError as PydanticValidationError
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from clubsite.core.exceptions import NotFoundError, ValidationError
from clubsite.models.base import BaseModel

logger = logging.getLogger(__name__)


class CrudRepository:
    """
    create / list / get_by_id / update / delete sobre um modelo.

    Subclasses definem `model`, `create_schema` (regras de validação usadas
    tanto na criação quanto no documento mesclado do update), `label`
    (usado nas mensagens de erro) e, se preciso, `list_query()`.
    """

    model: ClassVar[Type[BaseModel]]
    create_schema: ClassVar[Type[PydanticModel]]
    label: ClassVar[str] = "Record"

    def __init__(self, db: AsyncSession):
        self.db = db

    def base_query(self) -> Select:
        return select(self.model)

    def list_query(self) -> Select:
        return self.base_query()

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Valida com o schema de criação e devolve o dict normalizado"""
        try:
            validated = self.create_schema.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e
        return validated.model_dump()

    def snapshot(self, record: BaseModel) -> Dict[str, Any]:
        """Campos atuais do registro que o schema de criação conhece"""
        return {
            name: getattr(record, name)
            for name in self.create_schema.model_fields
        }

    async def list(self) -> List[BaseModel]:
        result = await self.db.execute(self.list_query())
        return list(result.scalars().all())

    async def find_by_id(self, record_id: str) -> Optional[BaseModel]:
        result = await self.db.execute(
            self.base_query().filter(self.model.id == record_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, record_id: str) -> BaseModel:
        record = await self.find_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    async def create(self, payload: Dict[str, Any], **server_fields) -> BaseModel:
        """Cria registro; `server_fields` sobrescrevem o que vier no payload"""
        values = self.validate(payload)
        values.update(server_fields)
        record = self.model(**values)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(f"{self.label} criado: {record.id}")
        return record

    async def update(self, record_id: str, payload: Dict[str, Any]) -> BaseModel:
        """Mescla só os campos enviados e revalida o documento resultante"""
        record = await self.get_by_id(record_id)
        merged = {**self.snapshot(record), **payload}
        values = self.validate(merged)
        for key in payload:
            if key in values:
                setattr(record, key, values[key])
        await self.db.commit()
        logger.info(f"{self.label} atualizado: {record.id} ({', '.join(payload) or 'sem campos'})")
        return record

    async def delete(self, record_id: str) -> None:
        record = await self.get_by_id(record_id)
        await self.db.delete(record)
        await self.db.commit()
        logger.info(f"{self.label} removido: {record_id}")
