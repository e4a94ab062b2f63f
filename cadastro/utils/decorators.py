"""
Decorators para centralizar padrões comuns da camada de acesso a dados.
"""

import functools
import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import ErroBancoDados

logger = logging.getLogger(__name__)


def erro_banco_dados(mensagem: str):
    """
    Decorator que converte falhas do SQLAlchemy em ErroBancoDados.

    Args:
        mensagem: Descrição da operação, usada como prefixo da causa

    Returns:
        Decorator para métodos assíncronos de repositórios. O repositório
        precisa expor o atributo ``session``, que é revertida antes de a
        exceção ser propagada.

    Exemplo de uso:
        @erro_banco_dados('Erro ao buscar UF por código')
        async def find_by_id(self, codigo_uf: int):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(f'{mensagem}: {e}', exc_info=True)
                await self.session.rollback()
                raise ErroBancoDados(f'{mensagem}: {e}') from e

        return wrapper

    return decorator
