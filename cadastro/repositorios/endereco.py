"""Repositório para operações com endereços de pessoas."""

import logging
from typing import List

from sqlalchemy import delete, select

from ..models import Endereco
from ..utils.decorators import erro_banco_dados
from .base import RepositorioBase

logger = logging.getLogger(__name__)


class EnderecoRepositorio(RepositorioBase[Endereco]):
    model = Endereco
    campo_codigo = 'codigo_endereco'
    nome_sequencia = 'SEQUENCE_ENDERECO'

    @erro_banco_dados('Erro ao buscar endereços pelo código da pessoa')
    async def find_by_codigo_pessoa(self, codigo_pessoa: int) -> List[Endereco]:
        return await self._buscar_lista(
            select(Endereco)
            .where(Endereco.codigo_pessoa == codigo_pessoa)
            .order_by(Endereco.codigo_endereco)
        )

    @erro_banco_dados('Erro ao inserir endereço')
    async def insert(self, endereco: Endereco) -> Endereco:
        return await self._inserir(endereco)

    @erro_banco_dados('Erro ao deletar endereço')
    async def delete_by_codigo_endereco(self, codigo_endereco: int) -> None:
        endereco = await self.session.get(Endereco, codigo_endereco)
        if endereco is None:
            return
        await self.session.delete(endereco)
        await self.session.commit()
        logger.info(f'Endereco removido: {codigo_endereco}')

    @erro_banco_dados('Erro ao deletar endereços pelo código da pessoa')
    async def delete_by_codigo_pessoa(self, codigo_pessoa: int) -> None:
        await self.session.execute(
            delete(Endereco)
            .where(Endereco.codigo_pessoa == codigo_pessoa)
            .execution_options(synchronize_session='fetch')
        )
        await self.session.commit()
        logger.info(f'Endereços da pessoa {codigo_pessoa} removidos')
