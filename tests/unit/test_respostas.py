import json

import pytest

from cadastro.utils.respostas import (
    ERRO_PROCESSAMENTO,
    STATUS_ERRO,
    converter_numero,
    mensagem_corpo_invalido,
    mensagem_erro,
    resposta_erro,
)

PREFIXO = 'Não foi possível consultar UF no banco de dados.'


def test_mensagem_erro_junta_prefixo_e_detalhe():
    erro = mensagem_erro(PREFIXO, 'Detalhe.')

    assert erro.mensagem == f'{PREFIXO} Detalhe.'
    assert erro.status == STATUS_ERRO == 404


def test_mensagem_erro_sem_detalhe():
    assert mensagem_erro(PREFIXO).mensagem == PREFIXO


def test_resposta_erro_usa_status_da_mensagem():
    resposta = resposta_erro(mensagem_erro(PREFIXO, 'X.'))

    assert resposta.status_code == 404
    assert json.loads(resposta.body) == {
        'mensagem': f'{PREFIXO} X.',
        'status': 404,
    }


@pytest.mark.parametrize(
    ('metodo', 'caminho', 'esperado'),
    [
        (
            'POST',
            '/uf',
            'Não foi possível incluir UF no banco de dados. '
            'Tipo de dado inválido.',
        ),
        (
            'POST',
            '/municipio',
            'Não foi possível cadastrar município no banco de dados. '
            'Tipo de dado inválido.',
        ),
        (
            'put',
            '/pessoa/',
            'Não foi possível alterar pessoa no banco de dados. '
            'Tipo de dado inválido.',
        ),
        ('GET', '/uf', ERRO_PROCESSAMENTO),
        ('POST', '/desconhecido', ERRO_PROCESSAMENTO),
    ],
)
def test_mensagem_corpo_invalido(metodo, caminho, esperado):
    assert mensagem_corpo_invalido(metodo, caminho) == esperado


class TestConverterNumero:
    @staticmethod
    def test_ausente():
        assert converter_numero(None, 'status', PREFIXO) == (None, None)

    @staticmethod
    @pytest.mark.parametrize(('valor', 'esperado'), [('7', 7), ('-3', -3)])
    def test_numero(valor, esperado):
        assert converter_numero(valor, 'status', PREFIXO) == (esperado, None)

    @staticmethod
    @pytest.mark.parametrize('valor', ['abc', '1.5', '', '7a'])
    def test_nao_numerico(valor):
        numero, erro = converter_numero(valor, 'codigoUF', PREFIXO)

        assert numero is None
        assert erro.mensagem == (
            f'{PREFIXO} O campo codigoUF deve conter apenas números.'
        )

    @staticmethod
    @pytest.mark.parametrize(
        ('valor', 'esperado'),
        [('2147483647', 2147483647), ('-2147483648', -2147483648)],
    )
    def test_limites_da_coluna(valor, esperado):
        assert converter_numero(valor, 'status', PREFIXO) == (esperado, None)

    @staticmethod
    @pytest.mark.parametrize(
        'valor', ['2147483648', '-2147483649', '99999999999999999999']
    )
    def test_fora_da_faixa(valor):
        numero, erro = converter_numero(valor, 'codigoUF', PREFIXO)

        assert numero is None
        assert erro.mensagem == (
            f'{PREFIXO} O campo codigoUF deve conter apenas números.'
        )

    @staticmethod
    def test_mensagem_substituta():
        _, erro = converter_numero(
            'x',
            'status',
            PREFIXO,
            'O campo status deve receber apenas números.',
        )

        assert erro.mensagem == (
            f'{PREFIXO} O campo status deve receber apenas números.'
        )
