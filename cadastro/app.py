import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from .database import close_engine, get_engine
from .exceptions import ErroBancoDados
from .models import table_registry
from .routers import bairro_router, municipio_router, pessoa_router, uf_router
from .schemas import MensagemErro, Message
from .settings import get_settings
from .utils.respostas import (
    STATUS_ERRO,
    mensagem_corpo_invalido,
    resposta_erro,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia o ciclo de vida da aplicação"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    # Startup: validar a conexão com o banco de dados
    try:
        async with get_engine().begin() as conn:
            await conn.execute(text('SELECT 1'))
            if settings.CRIAR_TABELAS:
                await conn.run_sync(table_registry.metadata.create_all)
        logger.info('Conexão com o banco de dados estabelecida')
    except Exception:
        logger.exception('Erro ao inicializar a aplicação')
        raise

    yield  # A aplicação executa aqui

    # Shutdown: fechar o pool de conexões
    await close_engine()
    logger.info('Aplicação encerrada')


app = FastAPI(title='Cadastro de Endereços', lifespan=lifespan)

# Configuração CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(uf_router)
app.include_router(municipio_router)
app.include_router(bairro_router)
app.include_router(pessoa_router)


@app.exception_handler(RequestValidationError)
async def corpo_invalido_handler(
    request: Request, exc: RequestValidationError
):
    """Corpo malformado ou com tipo inválido: 404 com mensagem do recurso."""
    logger.info(f'Corpo inválido em {request.method} {request.url.path}')
    return resposta_erro(
        MensagemErro(
            mensagem=mensagem_corpo_invalido(
                request.method, request.url.path
            ),
            status=STATUS_ERRO,
        )
    )


@app.exception_handler(ErroBancoDados)
async def erro_banco_dados_handler(request: Request, exc: ErroBancoDados):
    logger.error(
        f'Erro de banco de dados em {request.url.path}', exc_info=exc
    )
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=MensagemErro(
            mensagem=exc.mensagem,
            status=HTTPStatus.INTERNAL_SERVER_ERROR.value,
        ).model_dump(),
    )


@app.get('/', status_code=HTTPStatus.OK, response_model=Message)
async def read_root():
    return {'message': 'Bem-vindo à API de Cadastro de Endereços'}
