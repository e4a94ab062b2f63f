import logging
from typing import List, Optional

from fastapi import APIRouter, Query

from ..schemas import BairroDTO, MensagemErro
from ..services.bairro_service import BairroService
from ..utils.dependencies import AsyncSessionDep
from ..utils.respostas import converter_numero, resposta_erro

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/bairro', tags=['Bairro'])

PREFIXO_GET = 'Não foi possível consultar Bairro no banco de dados.'


@router.get('', responses={404: {'model': MensagemErro}})
async def consultar_bairros(
    session: AsyncSessionDep,
    codigo_bairro: Optional[str] = Query(None, alias='codigoBairro'),
    codigo_municipio: Optional[str] = Query(None, alias='codigoMunicipio'),
    nome: Optional[str] = None,
    status: Optional[str] = None,
):
    """
    Consulta bairros pelos filtros informados

    Com `codigoBairro` e exatamente um resultado, retorna o objeto;
    nos demais casos retorna a lista.
    """
    codigo, erro = converter_numero(codigo_bairro, 'codigoBairro', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)
    codigo_municipio_int, erro = converter_numero(
        codigo_municipio, 'codigoMunicipio', PREFIXO_GET
    )
    if erro:
        return resposta_erro(erro)
    status_int, erro = converter_numero(status, 'status', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)

    bairros = await BairroService(session).find_by_filters(
        codigo, codigo_municipio_int, nome, status_int
    )
    if codigo is not None and len(bairros) == 1:
        return bairros[0]
    return bairros


@router.post(
    '',
    response_model=List[BairroDTO],
    responses={404: {'model': MensagemErro}},
)
async def incluir_bairro(bairro: BairroDTO, session: AsyncSessionDep):
    """Inclui um bairro e retorna a lista atualizada"""
    service = BairroService(session)
    erro = await service.validate_insert(bairro)
    if erro:
        logger.info(f'Bairro rejeitado: {erro.mensagem}')
        return resposta_erro(erro)
    await service.insert(bairro)
    return await service.find_all()


@router.put(
    '',
    response_model=List[BairroDTO],
    responses={404: {'model': MensagemErro}},
)
async def alterar_bairro(bairro: BairroDTO, session: AsyncSessionDep):
    """Altera um bairro existente e retorna a lista atualizada"""
    service = BairroService(session)
    erro = await service.validate_update(bairro)
    if erro:
        logger.info(f'Bairro rejeitado: {erro.mensagem}')
        return resposta_erro(erro)
    await service.update(bairro)
    return await service.find_all()
