"""
Utilitários para mensagens de erro padronizadas.

Todos os erros tratados pela API usam o status HTTP 404 e o corpo
``{"mensagem": ..., "status": ...}``.
"""

import re
from http import HTTPStatus
from typing import Optional, Tuple

from fastapi.responses import JSONResponse

from ..schemas import MensagemErro

STATUS_ERRO = HTTPStatus.NOT_FOUND.value

# Faixa das colunas Integer (32 bits)
INTEIRO_MIN = -(2**31)
INTEIRO_MAX = 2**31 - 1

ERRO_PROCESSAMENTO = 'Não foi possível processar a requisição.'

# (método, recurso) -> mensagem para corpo de requisição inválido
MENSAGENS_CORPO_INVALIDO = {
    ('POST', 'uf'): 'Não foi possível incluir UF no banco de dados.',
    ('PUT', 'uf'): 'Não foi possível alterar UF no banco de dados.',
    ('POST', 'municipio'): (
        'Não foi possível cadastrar município no banco de dados.'
    ),
    ('PUT', 'municipio'): (
        'Não foi possível alterar município no banco de dados.'
    ),
    ('POST', 'bairro'): 'Não foi possível incluir bairro no banco de dados.',
    ('PUT', 'bairro'): 'Não foi possível alterar bairro no banco de dados.',
    ('POST', 'pessoa'): 'Não foi possível incluir pessoa no banco de dados.',
    ('PUT', 'pessoa'): 'Não foi possível alterar pessoa no banco de dados.',
}


def mensagem_erro(prefixo: str, detalhe: str = '') -> MensagemErro:
    """
    Monta uma mensagem de erro padronizada.

    Args:
        prefixo: Ação que falhou ("Não foi possível incluir UF ...")
        detalhe: Motivo da falha (opcional)

    Returns:
        MensagemErro com o status padrão de erro
    """
    return MensagemErro(
        mensagem=f'{prefixo} {detalhe}'.strip(), status=STATUS_ERRO
    )


def resposta_erro(erro: MensagemErro) -> JSONResponse:
    """Converte uma MensagemErro na resposta HTTP correspondente."""
    return JSONResponse(status_code=erro.status, content=erro.model_dump())


def mensagem_corpo_invalido(metodo: str, caminho: str) -> str:
    """Mensagem para corpo de requisição malformado, por método e recurso."""
    recurso = caminho.strip('/').split('/')[0]
    prefixo = MENSAGENS_CORPO_INVALIDO.get((metodo.upper(), recurso))
    if prefixo is None:
        return ERRO_PROCESSAMENTO
    return f'{prefixo} Tipo de dado inválido.'


def converter_numero(
    valor: Optional[str],
    campo: str,
    prefixo: str,
    detalhe: Optional[str] = None,
) -> Tuple[Optional[int], Optional[MensagemErro]]:
    """
    Converte um parâmetro de consulta numérico.

    Valores fora da faixa das colunas inteiras do banco são rejeitados
    com a mesma mensagem de valor não numérico.

    Args:
        valor: Texto recebido na query string
        campo: Nome do parâmetro, usado na mensagem padrão
        prefixo: Ação que falhou
        detalhe: Mensagem substituta para a padrão (opcional)

    Returns:
        Tupla (valor convertido, erro). Parâmetro ausente retorna (None, None).
    """
    if valor is None:
        return None, None
    if re.fullmatch(r'-?\d+', valor):
        numero = int(valor)
        if INTEIRO_MIN <= numero <= INTEIRO_MAX:
            return numero, None
    return None, mensagem_erro(
        prefixo, detalhe or f'O campo {campo} deve conter apenas números.'
    )
