import logging
from typing import List, Optional

from fastapi import APIRouter, Query

from ..exceptions import ErroBancoDados
from ..schemas import MensagemErro, PessoaDTO
from ..services.pessoa_service import PREFIXO_PUT, PessoaService
from ..utils.dependencies import AsyncSessionDep
from ..utils.respostas import converter_numero, mensagem_erro, resposta_erro

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/pessoa', tags=['Pessoa'])

PREFIXO_GET = 'Não foi possível consultar Pessoa no banco de dados.'


@router.get('', responses={404: {'model': MensagemErro}})
async def consultar_pessoas(
    session: AsyncSessionDep,
    codigo_pessoa: Optional[str] = Query(None, alias='codigoPessoa'),
    login: Optional[str] = None,
    status: Optional[str] = None,
):
    """
    Consulta pessoas

    * Com `codigoPessoa`: retorna a pessoa com os endereços completos
      (bairro, município e UF), ou lista vazia
    * Sem `codigoPessoa`: retorna a lista filtrada, sem endereços
    """
    codigo, erro = converter_numero(codigo_pessoa, 'codigoPessoa', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)
    status_int, erro = converter_numero(status, 'status', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)

    service = PessoaService(session)
    if codigo is not None:
        pessoa = await service.find_by_codigo_pessoa(codigo)
        return pessoa if pessoa else []
    return await service.find_by_filters(None, login, status_int)


@router.post(
    '',
    response_model=List[PessoaDTO],
    responses={404: {'model': MensagemErro}},
)
async def incluir_pessoa(pessoa: PessoaDTO, session: AsyncSessionDep):
    """Inclui uma pessoa com seus endereços e retorna a lista atualizada"""
    service = PessoaService(session)
    erro = await service.validate_insert(pessoa)
    if erro:
        logger.info(f'Pessoa rejeitada: {erro.mensagem}')
        return resposta_erro(erro)
    await service.insert(pessoa)
    return await service.find_all()


@router.put(
    '',
    response_model=List[PessoaDTO],
    responses={404: {'model': MensagemErro}},
)
async def alterar_pessoa(pessoa: PessoaDTO, session: AsyncSessionDep):
    """
    Altera uma pessoa e reconcilia seus endereços

    Endereços com código são alterados, sem código são incluídos e os
    que não foram enviados são removidos.
    """
    service = PessoaService(session)
    erro = await service.validate_update(pessoa)
    if erro:
        logger.info(f'Pessoa rejeitada: {erro.mensagem}')
        return resposta_erro(erro)
    try:
        await service.update(pessoa)
        return await service.find_all()
    except ErroBancoDados as e:
        logger.error(f'Falha ao alterar pessoa: {e.mensagem}')
        return resposta_erro(mensagem_erro(PREFIXO_PUT))
