import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .settings import get_settings

logger = logging.getLogger(__name__)

# Engine global, criado apenas no primeiro uso
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Retorna o engine assíncrono compartilhado pela aplicação.

    O engine é criado a partir das configurações na primeira chamada;
    as chamadas seguintes devolvem a mesma instância. Cada requisição
    obtém sua própria conexão do pool através de uma sessão.
    """
    global _engine
    if _engine is None:
        settings = get_settings()
        opcoes = {
            # Ativa logs SQL em modo DEBUG
            'echo': settings.DEBUG,
        }
        if not settings.usa_sqlite:
            opcoes.update(
                pool_size=settings.DB_POOL_SIZE,
                # Conexões adicionais permitidas quando o pool está cheio
                max_overflow=settings.DB_MAX_OVERFLOW,
                # Tempo máximo de espera para obter uma conexão do pool
                pool_timeout=settings.DB_POOL_TIMEOUT,
                # Recicla conexões após o intervalo (evita conexões quebradas)
                pool_recycle=settings.DB_POOL_RECYCLE,
            )
        _engine = create_async_engine(settings.DATABASE_URL, **opcoes)
        logger.info('Engine do banco de dados criado')
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Retorna a fábrica de sessões associada ao engine compartilhado."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            expire_on_commit=False,
            class_=AsyncSession,
        )
    return _session_factory


async def close_engine() -> None:
    """Fecha o pool de conexões e descarta o engine compartilhado."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info('Pool de conexões fechado')
    _engine = None
    _session_factory = None


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency para FastAPI: retorna uma sessão assíncrona."""
    session = get_session_factory()()
    try:
        yield session
    finally:
        await session.close()
