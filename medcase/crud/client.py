from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from medcase.db.models import ClientProfile, User

async def get_client(db: AsyncSession, client_id: str) -> Optional[ClientProfile]:
    result = await db.execute(select(ClientProfile).where(ClientProfile.id == client_id))
    return result.scalar_one_or_none()

async def get_active_clients(db: AsyncSession) -> List[ClientProfile]:
    """
    Client profiles whose user account is active, by company name.
    """
    result = await db.execute(
        select(ClientProfile)
        .join(User, ClientProfile.user_id == User.id)
        .where(User.is_active.is_(True))
        .order_by(ClientProfile.company_name.asc())
    )
    return list(result.scalars().all())
