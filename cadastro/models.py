from enum import IntEnum
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, registry, relationship

table_registry = registry()


class StatusRegistro(IntEnum):
    ativo = 1
    inativo = 2


@table_registry.mapped_as_dataclass
class Sequencia:
    """Último código gerado para cada entidade. Nunca é reiniciada."""

    __tablename__ = 'TB_SEQUENCIA'

    nome: Mapped[str] = mapped_column('NOME', String(30), primary_key=True)
    ultimo_valor: Mapped[int] = mapped_column('ULTIMO_VALOR', default=0)


@table_registry.mapped_as_dataclass
class Uf:
    __tablename__ = 'TB_UF'

    codigo_uf: Mapped[int] = mapped_column(
        'CODIGO_UF', primary_key=True, autoincrement=False, init=False
    )
    sigla: Mapped[str] = mapped_column('SIGLA', String(3), unique=True)
    nome: Mapped[str] = mapped_column('NOME', String(60), unique=True)
    status: Mapped[int] = mapped_column('STATUS')


@table_registry.mapped_as_dataclass
class Municipio:
    __tablename__ = 'TB_MUNICIPIO'

    codigo_municipio: Mapped[int] = mapped_column(
        'CODIGO_MUNICIPIO', primary_key=True, autoincrement=False, init=False
    )
    codigo_uf: Mapped[int] = mapped_column(
        'CODIGO_UF', ForeignKey('TB_UF.CODIGO_UF')
    )
    nome: Mapped[str] = mapped_column('NOME', String(256), unique=True)
    status: Mapped[int] = mapped_column('STATUS')

    uf: Mapped['Uf'] = relationship(init=False, lazy='selectin')


@table_registry.mapped_as_dataclass
class Bairro:
    __tablename__ = 'TB_BAIRRO'

    codigo_bairro: Mapped[int] = mapped_column(
        'CODIGO_BAIRRO', primary_key=True, autoincrement=False, init=False
    )
    codigo_municipio: Mapped[int] = mapped_column(
        'CODIGO_MUNICIPIO', ForeignKey('TB_MUNICIPIO.CODIGO_MUNICIPIO')
    )
    nome: Mapped[str] = mapped_column('NOME', String(256), unique=True)
    status: Mapped[int] = mapped_column('STATUS')

    municipio: Mapped['Municipio'] = relationship(init=False, lazy='selectin')


@table_registry.mapped_as_dataclass
class Pessoa:
    __tablename__ = 'TB_PESSOA'

    codigo_pessoa: Mapped[int] = mapped_column(
        'CODIGO_PESSOA', primary_key=True, autoincrement=False, init=False
    )
    nome: Mapped[str] = mapped_column('NOME', String(256))
    sobrenome: Mapped[str] = mapped_column('SOBRENOME', String(256))
    idade: Mapped[int] = mapped_column('IDADE')
    login: Mapped[str] = mapped_column('LOGIN', String(50), unique=True)
    senha: Mapped[str] = mapped_column('SENHA', String(50))
    status: Mapped[int] = mapped_column('STATUS')


@table_registry.mapped_as_dataclass
class Endereco:
    __tablename__ = 'TB_ENDERECO'

    codigo_endereco: Mapped[int] = mapped_column(
        'CODIGO_ENDERECO', primary_key=True, autoincrement=False, init=False
    )
    codigo_pessoa: Mapped[int] = mapped_column(
        'CODIGO_PESSOA', ForeignKey('TB_PESSOA.CODIGO_PESSOA')
    )
    codigo_bairro: Mapped[int] = mapped_column(
        'CODIGO_BAIRRO', ForeignKey('TB_BAIRRO.CODIGO_BAIRRO')
    )
    nome_rua: Mapped[str] = mapped_column('NOME_RUA', String(256))
    numero: Mapped[str] = mapped_column('NUMERO', String(20))
    cep: Mapped[str] = mapped_column('CEP', String(10))
    complemento: Mapped[Optional[str]] = mapped_column(
        'COMPLEMENTO', String(256), default=None, nullable=True
    )

    bairro: Mapped['Bairro'] = relationship(init=False, lazy='selectin')
