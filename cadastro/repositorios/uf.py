"""Repositório para operações com UFs."""

from typing import List, Optional

from sqlalchemy import select

from ..models import Uf
from ..utils.decorators import erro_banco_dados
from .base import RepositorioBase


class UfRepositorio(RepositorioBase[Uf]):
    model = Uf
    campo_codigo = 'codigo_uf'
    nome_sequencia = 'SEQUENCE_UF'

    @erro_banco_dados('Erro ao buscar UF por nome')
    async def find_by_nome(self, nome: str) -> Optional[Uf]:
        return await self._buscar_um(
            select(Uf).where(Uf.nome == nome.upper())
        )

    @erro_banco_dados('Erro ao buscar UF por sigla')
    async def find_by_sigla(self, sigla: str) -> Optional[Uf]:
        return await self._buscar_um(
            select(Uf).where(Uf.sigla == sigla.upper())
        )

    @erro_banco_dados('Erro ao buscar UFs com filtros')
    async def find_by_filters(
        self,
        codigo_uf: Optional[int] = None,
        sigla: Optional[str] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[Uf]:
        return await self._find_by_filters(
            codigo_uf=codigo_uf,
            sigla=sigla.upper() if sigla is not None else None,
            nome=nome.upper() if nome is not None else None,
            status=status,
        )

    @erro_banco_dados('Erro ao inserir UF')
    async def insert(self, uf: Uf) -> Uf:
        uf.sigla = uf.sigla.upper()
        uf.nome = uf.nome.upper()
        return await self._inserir(uf)

    async def update(self, uf: Uf) -> Uf:
        uf.sigla = uf.sigla.upper()
        uf.nome = uf.nome.upper()
        return await super().update(uf)
