"""Repositório para operações com pessoas."""

from typing import List, Optional

from sqlalchemy import func, or_, select

from ..models import Pessoa
from ..utils.decorators import erro_banco_dados
from .base import RepositorioBase


class PessoaRepositorio(RepositorioBase[Pessoa]):
    model = Pessoa
    campo_codigo = 'codigo_pessoa'
    nome_sequencia = 'SEQUENCE_PESSOA'

    @erro_banco_dados('Erro ao buscar pessoa por login')
    async def find_by_login(self, login: str) -> Optional[Pessoa]:
        return await self._buscar_um(
            select(Pessoa).where(Pessoa.login == login)
        )

    @erro_banco_dados('Erro ao buscar pessoas com filtros')
    async def find_by_filters(
        self,
        codigo_pessoa: Optional[int] = None,
        login: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[Pessoa]:
        stmt = select(Pessoa)
        if codigo_pessoa is not None:
            stmt = stmt.where(Pessoa.codigo_pessoa == codigo_pessoa)
        if login is not None:
            # upper() do SQLite só converte ASCII
            stmt = stmt.where(
                or_(
                    Pessoa.login == login,
                    func.upper(Pessoa.login) == login.upper(),
                )
            )
        if status is not None:
            stmt = stmt.where(Pessoa.status == status)
        return await self._buscar_lista(
            stmt.order_by(Pessoa.codigo_pessoa.desc())
        )

    @erro_banco_dados('Erro ao inserir pessoa')
    async def insert(self, pessoa: Pessoa) -> Pessoa:
        return await self._inserir(pessoa)
