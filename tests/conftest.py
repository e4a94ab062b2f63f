import os

os.environ.setdefault('DATABASE_URL', 'sqlite+aiosqlite:///:memory:')

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient  # noqa: E402
from sqlalchemy import StaticPool  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cadastro.app import app as fastapi_app  # noqa: E402
from cadastro.database import get_async_session  # noqa: E402
from cadastro.models import table_registry  # noqa: E402

# Configuração do banco de dados de testes
TEST_DATABASE_URL = 'sqlite+aiosqlite:///:memory:'


@pytest_asyncio.fixture
async def async_engine():
    """Cria um engine assíncrono para o banco de dados de teste"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine):
    """Cria uma fábrica de sessão assíncrona para o banco de dados de teste"""
    return async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def async_session(async_session_factory):
    """Cria uma sessão assíncrona para o banco de dados de teste"""
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def app(async_session):
    """Aplicativo FastAPI usando a sessão de teste"""
    original_overrides = fastapi_app.dependency_overrides.copy()
    fastapi_app.dependency_overrides[get_async_session] = (
        lambda: async_session
    )

    yield fastapi_app

    # Restaura as dependências originais ao finalizar
    fastapi_app.dependency_overrides = original_overrides


@pytest_asyncio.fixture
async def async_client(app):
    """Cria um cliente assíncrono para o aplicativo FastAPI"""
    async with AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url='http://test'
    ) as client:
        yield client
