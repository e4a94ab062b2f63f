import logging
from typing import List, Optional

from fastapi import APIRouter, Query

from ..exceptions import ErroBancoDados
from ..schemas import MensagemErro, MunicipioDTO
from ..services.municipio_service import PREFIXO_POST, MunicipioService
from ..utils.dependencies import AsyncSessionDep
from ..utils.respostas import converter_numero, mensagem_erro, resposta_erro

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/municipio', tags=['Município'])

PREFIXO_GET = 'Não foi possível consultar Município no banco de dados.'


@router.get('', responses={404: {'model': MensagemErro}})
async def consultar_municipios(
    session: AsyncSessionDep,
    codigo_municipio: Optional[str] = Query(None, alias='codigoMunicipio'),
    codigo_uf: Optional[str] = Query(None, alias='codigoUF'),
    nome: Optional[str] = None,
    status: Optional[str] = None,
):
    """
    Consulta municípios pelos filtros informados

    Com `codigoMunicipio` e exatamente um resultado, retorna o objeto;
    nos demais casos retorna a lista.
    """
    codigo, erro = converter_numero(
        codigo_municipio, 'codigoMunicipio', PREFIXO_GET
    )
    if erro:
        return resposta_erro(erro)
    codigo_uf_int, erro = converter_numero(codigo_uf, 'codigoUF', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)
    status_int, erro = converter_numero(status, 'status', PREFIXO_GET)
    if erro:
        return resposta_erro(erro)

    municipios = await MunicipioService(session).find_by_filters(
        codigo, codigo_uf_int, nome, status_int
    )
    if codigo is not None and len(municipios) == 1:
        return municipios[0]
    return municipios


@router.post(
    '',
    response_model=List[MunicipioDTO],
    responses={404: {'model': MensagemErro}},
)
async def incluir_municipio(
    municipio: MunicipioDTO, session: AsyncSessionDep
):
    """Inclui um município e retorna a lista atualizada"""
    service = MunicipioService(session)
    try:
        erro = await service.validate_insert(municipio)
        if erro:
            logger.info(f'Município rejeitado: {erro.mensagem}')
            return resposta_erro(erro)
        await service.insert(municipio)
        return await service.find_all()
    except ErroBancoDados as e:
        logger.error(f'Falha ao incluir município: {e.mensagem}')
        return resposta_erro(mensagem_erro(PREFIXO_POST))


@router.put(
    '',
    response_model=List[MunicipioDTO],
    responses={404: {'model': MensagemErro}},
)
async def alterar_municipio(
    municipio: MunicipioDTO, session: AsyncSessionDep
):
    """Altera um município existente e retorna a lista atualizada"""
    service = MunicipioService(session)
    erro = await service.validate_update(municipio)
    if erro:
        logger.info(f'Município rejeitado: {erro.mensagem}')
        return resposta_erro(erro)
    await service.update(municipio)
    return await service.find_all()
