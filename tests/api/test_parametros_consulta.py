import pytest
from fastapi import status
from httpx import AsyncClient

NUMERO_GRANDE = '99999999999999999999'


@pytest.mark.parametrize(
    ('caminho', 'parametro', 'mensagem'),
    [
        (
            '/uf',
            'codigoUF',
            'Não foi possível consultar UF no banco de dados. '
            'o campo codigoUF deve receber apenas números.',
        ),
        (
            '/uf',
            'status',
            'Não foi possível consultar UF no banco de dados. '
            'O campo status deve receber apenas números.',
        ),
        (
            '/municipio',
            'codigoMunicipio',
            'Não foi possível consultar Município no banco de dados. '
            'O campo codigoMunicipio deve conter apenas números.',
        ),
        (
            '/municipio',
            'codigoUF',
            'Não foi possível consultar Município no banco de dados. '
            'O campo codigoUF deve conter apenas números.',
        ),
        (
            '/bairro',
            'codigoBairro',
            'Não foi possível consultar Bairro no banco de dados. '
            'O campo codigoBairro deve conter apenas números.',
        ),
        (
            '/bairro',
            'codigoMunicipio',
            'Não foi possível consultar Bairro no banco de dados. '
            'O campo codigoMunicipio deve conter apenas números.',
        ),
        (
            '/pessoa',
            'codigoPessoa',
            'Não foi possível consultar Pessoa no banco de dados. '
            'O campo codigoPessoa deve conter apenas números.',
        ),
        (
            '/pessoa',
            'status',
            'Não foi possível consultar Pessoa no banco de dados. '
            'O campo status deve conter apenas números.',
        ),
    ],
)
@pytest.mark.asyncio
async def test_numero_fora_da_faixa_retorna_404(
    async_client: AsyncClient, caminho, parametro, mensagem
):
    """Números maiores que as colunas inteiras são rejeitados como inválidos."""
    response = await async_client.get(
        caminho, params={parametro: NUMERO_GRANDE}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {'mensagem': mensagem, 'status': 404}
