from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from medcase.db.models import CaseHistory, CaseAction

async def add_entry(
    db: AsyncSession,
    *,
    case_id: str,
    user_id: str,
    action: CaseAction,
    description: Optional[str] = None,
) -> CaseHistory:
    """
    Stage a history entry in the caller's transaction. Does not commit.
    """
    entry = CaseHistory(
        case_id=case_id,
        user_id=user_id,
        action=action.value,
        description=description,
    )
    db.add(entry)
    await db.flush()
    return entry
