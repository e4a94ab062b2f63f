"""Repositório para operações com bairros."""

from typing import List, Optional

from sqlalchemy import select

from ..models import Bairro
from ..utils.decorators import erro_banco_dados
from .base import RepositorioBase


class BairroRepositorio(RepositorioBase[Bairro]):
    model = Bairro
    campo_codigo = 'codigo_bairro'
    nome_sequencia = 'SEQUENCE_BAIRRO'

    @erro_banco_dados('Erro ao buscar bairros pelo código do município')
    async def find_by_codigo_municipio(
        self, codigo_municipio: int
    ) -> List[Bairro]:
        return await self._buscar_lista(
            select(Bairro)
            .where(Bairro.codigo_municipio == codigo_municipio)
            .order_by(Bairro.codigo_bairro.desc())
        )

    @erro_banco_dados('Erro ao buscar bairro por nome')
    async def find_by_nome(self, nome: str) -> Optional[Bairro]:
        return await self._buscar_um(
            select(Bairro).where(Bairro.nome == nome.upper())
        )

    @erro_banco_dados('Erro ao buscar bairros com filtros')
    async def find_by_filters(
        self,
        codigo_bairro: Optional[int] = None,
        codigo_municipio: Optional[int] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[Bairro]:
        return await self._find_by_filters(
            codigo_bairro=codigo_bairro,
            codigo_municipio=codigo_municipio,
            nome=nome.upper() if nome is not None else None,
            status=status,
        )

    @erro_banco_dados('Erro ao inserir bairro')
    async def insert(self, bairro: Bairro) -> Bairro:
        bairro.nome = bairro.nome.upper()
        return await self._inserir(bairro)

    async def update(self, bairro: Bairro) -> Bairro:
        bairro.nome = bairro.nome.upper()
        return await super().update(bairro)
