"""Repositório para operações com municípios."""

from typing import List, Optional

from sqlalchemy import select

from ..models import Municipio
from ..utils.decorators import erro_banco_dados
from .base import RepositorioBase


class MunicipioRepositorio(RepositorioBase[Municipio]):
    model = Municipio
    campo_codigo = 'codigo_municipio'
    nome_sequencia = 'SEQUENCE_MUNICIPIO'

    @erro_banco_dados('Erro ao buscar municípios pelo código da UF')
    async def find_by_codigo_uf(self, codigo_uf: int) -> List[Municipio]:
        return await self._buscar_lista(
            select(Municipio)
            .where(Municipio.codigo_uf == codigo_uf)
            .order_by(Municipio.codigo_municipio.desc())
        )

    @erro_banco_dados('Erro ao buscar município por nome')
    async def find_by_nome(self, nome: str) -> Optional[Municipio]:
        return await self._buscar_um(
            select(Municipio).where(Municipio.nome == nome.upper())
        )

    @erro_banco_dados('Erro ao buscar municípios com filtros')
    async def find_by_filters(
        self,
        codigo_municipio: Optional[int] = None,
        codigo_uf: Optional[int] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[Municipio]:
        return await self._find_by_filters(
            codigo_municipio=codigo_municipio,
            codigo_uf=codigo_uf,
            nome=nome.upper() if nome is not None else None,
            status=status,
        )

    @erro_banco_dados('Erro ao inserir município')
    async def insert(self, municipio: Municipio) -> Municipio:
        municipio.nome = municipio.nome.upper()
        return await self._inserir(municipio)

    async def update(self, municipio: Municipio) -> Municipio:
        municipio.nome = municipio.nome.upper()
        return await super().update(municipio)
