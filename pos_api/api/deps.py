# pos_api/api/deps.py
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from pos_api.database import AsyncSessionLocal


# Dependência para obter uma sessão de banco de dados (uma por requisição)
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
