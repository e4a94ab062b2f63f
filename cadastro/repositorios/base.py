"""
Repositório base com as operações comuns às entidades do cadastro.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Sequencia
from ..utils.decorators import erro_banco_dados

ModelType = TypeVar('ModelType')

logger = logging.getLogger(__name__)


class RepositorioBase(Generic[ModelType]):
    """
    Operações de banco de dados compartilhadas pelos repositórios.

    Cada subclasse informa o modelo, o nome da coluna de código (chave
    primária) e o nome da sequência usada para gerar novos códigos.
    """

    model: Type[ModelType]
    campo_codigo: str
    nome_sequencia: str

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def coluna_codigo(self):
        return getattr(self.model, self.campo_codigo)

    async def proximo_codigo(self) -> int:
        """
        Obtém o próximo valor da sequência da entidade.

        A linha da sequência é lida com bloqueio (quando o banco suporta)
        e incrementada na mesma transação do INSERT que usará o código.
        """
        sequencia = await self.session.get(
            Sequencia,
            self.nome_sequencia,
            with_for_update=True,
            populate_existing=True,
        )
        if sequencia is None:
            sequencia = Sequencia(nome=self.nome_sequencia)
            self.session.add(sequencia)
        sequencia.ultimo_valor += 1
        await self.session.flush()
        return sequencia.ultimo_valor

    async def _buscar_um(self, stmt) -> Optional[ModelType]:
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def _buscar_lista(self, stmt) -> List[ModelType]:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _find_by_filters(self, **filtros: Any) -> List[ModelType]:
        """
        Busca os registros que satisfazem todos os filtros informados.

        Filtros com valor None são ignorados; os demais viram predicados
        de igualdade combinados com AND.
        """
        stmt = select(self.model)
        for campo, valor in filtros.items():
            if valor is not None:
                stmt = stmt.where(getattr(self.model, campo) == valor)
        return await self._buscar_lista(
            stmt.order_by(self.coluna_codigo.desc())
        )

    async def _salvar(self, registro: ModelType) -> ModelType:
        self.session.add(registro)
        await self.session.commit()
        await self.session.refresh(registro)
        return registro

    async def _inserir(self, registro: ModelType) -> ModelType:
        setattr(registro, self.campo_codigo, await self.proximo_codigo())
        registro = await self._salvar(registro)
        logger.info(
            f'{self.model.__name__} inserido: '
            f'{getattr(registro, self.campo_codigo)}'
        )
        return registro

    @erro_banco_dados('Erro ao buscar registro por código')
    async def find_by_id(self, codigo: int) -> Optional[ModelType]:
        return await self._buscar_um(
            select(self.model).where(self.coluna_codigo == codigo)
        )

    @erro_banco_dados('Erro ao buscar registros por status')
    async def find_by_status(self, status: int) -> List[ModelType]:
        return await self._buscar_lista(
            select(self.model)
            .where(self.model.status == status)
            .order_by(self.coluna_codigo.desc())
        )

    @erro_banco_dados('Erro ao buscar todos os registros')
    async def find_all(self) -> List[ModelType]:
        return await self._buscar_lista(
            select(self.model).order_by(self.coluna_codigo.desc())
        )

    @erro_banco_dados('Erro ao atualizar registro')
    async def update(self, registro: ModelType) -> ModelType:
        """
        Grava as alterações feitas em um registro já existente.

        O registro deve ter sido obtido por este repositório (mesma sessão)
        e ter seus campos alterados antes da chamada.
        """
        registro = await self._salvar(registro)
        logger.info(
            f'{self.model.__name__} atualizado: '
            f'{getattr(registro, self.campo_codigo)}'
        )
        return registro
