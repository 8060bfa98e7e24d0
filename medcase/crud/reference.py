"""
Admin-managed reference data: case types and certification types.

Both tables share the same shape, so the helpers take the model class.
"""
from typing import List, Optional, Type, Union
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging
from medcase.db.models import CaseType, CertificationType
from medcase.schemas.reference import ReferenceTypeCreate

logger = logging.getLogger(__name__)

ReferenceModel = Union[CaseType, CertificationType]

async def get_by_id(db: AsyncSession, model: Type[ReferenceModel], item_id: str) -> Optional[ReferenceModel]:
    result = await db.execute(select(model).where(model.id == item_id))
    return result.scalar_one_or_none()

async def get_by_name(db: AsyncSession, model: Type[ReferenceModel], name: str) -> Optional[ReferenceModel]:
    result = await db.execute(select(model).where(model.name == name))
    return result.scalar_one_or_none()

async def get_active(db: AsyncSession, model: Type[ReferenceModel]) -> List[ReferenceModel]:
    result = await db.execute(
        select(model).where(model.is_active.is_(True)).order_by(model.name.asc())
    )
    return list(result.scalars().all())

async def create(db: AsyncSession, model: Type[ReferenceModel], item_in: ReferenceTypeCreate) -> Optional[ReferenceModel]:
    try:
        db_item = model(**item_in.model_dump())
        db.add(db_item)
        await db.commit()
        await db.refresh(db_item)
        logger.info(f"{model.__name__} created: {db_item.name}")
        return db_item
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error creating {model.__name__}: {e}")
        return None
