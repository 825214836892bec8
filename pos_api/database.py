# pos_api/database.py
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from pos_api.core.config import settings
from pos_api.core.logging import logger
from pos_api.db.base_class import Base

# Define o motor de banco de dados assíncrono
engine = create_async_engine(settings.DATABASE_URL, echo=True if settings.ENVIRONMENT == "development" else False)

# Cria uma fábrica de sessões assíncronas
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    autoflush=False,
    expire_on_commit=False,
)


async def init_db(bind: AsyncEngine = engine) -> bool:
    """
    Cria as tabelas que ainda não existem.

    Uma falha de conexão é registrada e não derruba o processo: as rotas
    passam a responder com erro até o banco voltar.
    """
    # Registra os modelos no metadata antes do create_all
    from pos_api import models  # noqa: F401

    try:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error(f"Could not connect to database: {e}")
        return False
    logger.info("Connected to database")
    return True
