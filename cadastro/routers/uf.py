import logging
from typing import List, Optional

from fastapi import APIRouter, Query

from ..schemas import MensagemErro, UfDTO
from ..services.uf_service import UfService
from ..utils.dependencies import AsyncSessionDep
from ..utils.respostas import converter_numero, resposta_erro

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/uf', tags=['UF'])

PREFIXO_GET = 'Não foi possível consultar UF no banco de dados.'
ERRO_CODIGO_UF = 'o campo codigoUF deve receber apenas números.'
ERRO_STATUS = 'O campo status deve receber apenas números.'


@router.get('', responses={404: {'model': MensagemErro}})
async def consultar_ufs(
    session: AsyncSessionDep,
    codigo_uf: Optional[str] = Query(None, alias='codigoUF'),
    sigla: Optional[str] = None,
    nome: Optional[str] = None,
    status: Optional[str] = None,
):
    """
    Consulta UFs

    * Apenas `codigoUF`: retorna a UF ou lista vazia
    * Apenas `status`: retorna a lista de UFs com o status
    * Outra combinação de filtros: retorna a UF se houver exatamente uma,
      senão a lista (possivelmente vazia)
    * Sem filtros: retorna todas as UFs
    """
    codigo, erro = converter_numero(
        codigo_uf, 'codigoUF', PREFIXO_GET, ERRO_CODIGO_UF
    )
    if erro:
        return resposta_erro(erro)
    status_int, erro = converter_numero(
        status, 'status', PREFIXO_GET, ERRO_STATUS
    )
    if erro:
        return resposta_erro(erro)

    service = UfService(session)

    if codigo is not None and sigla is None and nome is None and status_int is None:
        uf = await service.find_by_id(codigo)
        return uf if uf else []

    if status_int is not None and codigo is None and sigla is None and nome is None:
        return await service.find_by_status(status_int)

    if any(f is not None for f in (codigo, sigla, nome, status_int)):
        ufs = await service.find_by_filters(codigo, sigla, nome, status_int)
        return ufs[0] if len(ufs) == 1 else ufs

    return await service.find_all()


@router.post(
    '',
    response_model=List[UfDTO],
    responses={404: {'model': MensagemErro}},
)
async def incluir_uf(uf: UfDTO, session: AsyncSessionDep):
    """Inclui uma UF e retorna a lista atualizada"""
    service = UfService(session)
    erro = await service.validate_insert(uf)
    if erro:
        logger.info(f'UF rejeitada: {erro.mensagem}')
        return resposta_erro(erro)
    await service.insert(uf)
    return await service.find_all()


@router.put(
    '',
    response_model=List[UfDTO],
    responses={404: {'model': MensagemErro}},
)
async def alterar_uf(uf: UfDTO, session: AsyncSessionDep):
    """Altera uma UF existente e retorna a lista atualizada"""
    service = UfService(session)
    erro = await service.validate_update(uf)
    if erro:
        logger.info(f'UF rejeitada: {erro.mensagem}')
        return resposta_erro(erro)
    await service.update(uf)
    return await service.find_all()
