"""
Serviço de pessoas e de seus endereços.

Os endereços não têm rota própria: são incluídos, alterados e removidos
junto com a pessoa a que pertencem.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Endereco, Pessoa, StatusRegistro
from ..repositorios import (
    BairroRepositorio,
    EnderecoRepositorio,
    PessoaRepositorio,
)
from ..schemas import EnderecoDTO, MensagemErro, PessoaDTO
from ..utils.respostas import mensagem_erro
from .bairro_service import bairro_para_detalhe

logger = logging.getLogger(__name__)

PREFIXO_POST = 'Não foi possível incluir pessoa no banco de dados.'
PREFIXO_PUT = 'Não foi possível alterar pessoa no banco de dados.'

# (atributo, nome do campo no JSON) dos endereços
CAMPOS_ENDERECO = (
    ('nome_rua', 'nomeRua'),
    ('numero', 'numero'),
    ('cep', 'cep'),
)


def pessoa_para_dto(pessoa: Pessoa) -> PessoaDTO:
    return PessoaDTO(
        codigo_pessoa=pessoa.codigo_pessoa,
        nome=pessoa.nome,
        sobrenome=pessoa.sobrenome,
        idade=pessoa.idade,
        login=pessoa.login,
        senha=pessoa.senha,
        status=pessoa.status,
        enderecos=[],
    )


def endereco_para_dto(endereco: Endereco) -> EnderecoDTO:
    """Endereço com bairro, município e UF aninhados."""
    return EnderecoDTO(
        codigo_endereco=endereco.codigo_endereco,
        codigo_pessoa=endereco.codigo_pessoa,
        codigo_bairro=endereco.codigo_bairro,
        nome_rua=endereco.nome_rua,
        numero=endereco.numero,
        complemento=endereco.complemento,
        cep=endereco.cep,
        bairro=(
            bairro_para_detalhe(endereco.bairro) if endereco.bairro else None
        ),
    )


def _novo_endereco(dto: EnderecoDTO, codigo_pessoa: int) -> Endereco:
    return Endereco(
        codigo_pessoa=codigo_pessoa,
        codigo_bairro=dto.codigo_bairro,
        nome_rua=dto.nome_rua,
        numero=dto.numero,
        cep=dto.cep,
        complemento=dto.complemento,
    )


class PessoaService:
    def __init__(self, session: AsyncSession):
        self.pessoa_repositorio = PessoaRepositorio(session)
        self.endereco_repositorio = EnderecoRepositorio(session)
        self.bairro_repositorio = BairroRepositorio(session)

    async def find_all(self) -> List[PessoaDTO]:
        pessoas = await self.pessoa_repositorio.find_all()
        return _ordenar([pessoa_para_dto(p) for p in pessoas])

    async def find_by_filters(
        self,
        codigo_pessoa: Optional[int] = None,
        login: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[PessoaDTO]:
        pessoas = await self.pessoa_repositorio.find_by_filters(
            codigo_pessoa, login, status
        )
        return _ordenar([pessoa_para_dto(p) for p in pessoas])

    async def find_by_codigo_pessoa(
        self, codigo_pessoa: int
    ) -> Optional[PessoaDTO]:
        """
        Retorna a pessoa com seus endereços completos.

        Cada endereço traz o bairro, que traz o município, que traz a UF.

        Returns:
            PessoaDTO com os endereços, ou None se a pessoa não existir
        """
        pessoa = await self.pessoa_repositorio.find_by_id(codigo_pessoa)
        if pessoa is None:
            return None
        enderecos = await self.endereco_repositorio.find_by_codigo_pessoa(
            codigo_pessoa
        )
        pessoa_dto = pessoa_para_dto(pessoa)
        pessoa_dto.enderecos = [endereco_para_dto(e) for e in enderecos]
        return pessoa_dto

    async def insert(self, pessoa_dto: PessoaDTO) -> PessoaDTO:
        pessoa = Pessoa(
            nome=pessoa_dto.nome,
            sobrenome=pessoa_dto.sobrenome,
            idade=pessoa_dto.idade,
            login=pessoa_dto.login,
            senha=pessoa_dto.senha,
            status=pessoa_dto.status,
        )
        pessoa = await self.pessoa_repositorio.insert(pessoa)

        for endereco_dto in pessoa_dto.enderecos or []:
            await self.endereco_repositorio.insert(
                _novo_endereco(endereco_dto, pessoa.codigo_pessoa)
            )
        return pessoa_para_dto(pessoa)

    async def update(self, pessoa_dto: PessoaDTO) -> PessoaDTO:
        """
        Atualiza a pessoa e reconcilia seus endereços.

        - endereço com código já pertencente à pessoa: alterado
        - endereço sem código: incluído
        - endereço da pessoa ausente do corpo: removido

        As remoções acontecem depois de todas as alterações e inclusões.
        """
        pessoa = await self.pessoa_repositorio.find_by_id(
            pessoa_dto.codigo_pessoa
        )
        pessoa.nome = pessoa_dto.nome
        pessoa.sobrenome = pessoa_dto.sobrenome
        pessoa.idade = pessoa_dto.idade
        pessoa.login = pessoa_dto.login
        pessoa.senha = pessoa_dto.senha
        pessoa.status = pessoa_dto.status
        pessoa = await self.pessoa_repositorio.update(pessoa)

        atuais = {
            e.codigo_endereco: e
            for e in await self.endereco_repositorio.find_by_codigo_pessoa(
                pessoa.codigo_pessoa
            )
        }
        mantidos = set()

        for endereco_dto in pessoa_dto.enderecos or []:
            if endereco_dto.codigo_endereco is None:
                novo = await self.endereco_repositorio.insert(
                    _novo_endereco(endereco_dto, pessoa.codigo_pessoa)
                )
                mantidos.add(novo.codigo_endereco)
                continue

            existente = atuais.get(endereco_dto.codigo_endereco)
            if existente is None:
                logger.warning(
                    f'Endereço {endereco_dto.codigo_endereco} não pertence '
                    f'à pessoa {pessoa.codigo_pessoa}; ignorado'
                )
                continue

            existente.codigo_bairro = endereco_dto.codigo_bairro
            existente.nome_rua = endereco_dto.nome_rua
            existente.numero = endereco_dto.numero
            existente.complemento = endereco_dto.complemento
            existente.cep = endereco_dto.cep
            await self.endereco_repositorio.update(existente)
            mantidos.add(existente.codigo_endereco)

        for codigo_endereco in atuais:
            if codigo_endereco not in mantidos:
                await self.endereco_repositorio.delete_by_codigo_endereco(
                    codigo_endereco
                )
        return pessoa_para_dto(pessoa)

    async def validate_insert(
        self, pessoa: PessoaDTO
    ) -> Optional[MensagemErro]:
        if _todos_campos_ausentes(pessoa):
            return mensagem_erro(
                PREFIXO_POST,
                'Os campos nome, sobrenome, idade, login, senha e status '
                'precisam estar inclusos no corpo da requisição.',
            )
        erro = _validar_campos_obrigatorios(pessoa, PREFIXO_POST)
        if erro:
            return erro
        if await self.pessoa_repositorio.find_by_login(pessoa.login):
            return mensagem_erro(PREFIXO_POST, 'O login já existe.')
        return await self._validar_enderecos(pessoa, PREFIXO_POST)

    async def validate_update(
        self, pessoa: PessoaDTO
    ) -> Optional[MensagemErro]:
        if pessoa.codigo_pessoa is None and _todos_campos_ausentes(pessoa):
            return mensagem_erro(
                PREFIXO_PUT,
                'Os campos codigoPessoa, nome, sobrenome, idade, login, '
                'senha e status precisam estar inclusos no corpo '
                'da requisição.',
            )
        if pessoa.codigo_pessoa is None:
            return mensagem_erro(
                PREFIXO_PUT, "O campo 'codigoPessoa' é obrigatório."
            )
        erro = _validar_campos_obrigatorios(pessoa, PREFIXO_PUT)
        if erro:
            return erro
        if await self.pessoa_repositorio.find_by_id(pessoa.codigo_pessoa) is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O codigoPessoa fornecido não existe.'
            )
        existente = await self.pessoa_repositorio.find_by_login(pessoa.login)
        if existente and existente.codigo_pessoa != pessoa.codigo_pessoa:
            return mensagem_erro(PREFIXO_PUT, 'O login já existe.')
        return await self._validar_enderecos(pessoa, PREFIXO_PUT)

    async def _validar_enderecos(
        self, pessoa: PessoaDTO, prefixo: str
    ) -> Optional[MensagemErro]:
        for endereco in pessoa.enderecos or []:
            if endereco.codigo_bairro is None:
                return mensagem_erro(
                    prefixo,
                    "O campo 'codigoBairro' em 'enderecos' é obrigatório.",
                )
            bairro = await self.bairro_repositorio.find_by_id(
                endereco.codigo_bairro
            )
            if bairro is None:
                return mensagem_erro(
                    prefixo,
                    f'O código do bairro {endereco.codigo_bairro} '
                    'não existe.',
                )
            for atributo, campo in CAMPOS_ENDERECO:
                if not getattr(endereco, atributo):
                    return mensagem_erro(
                        prefixo,
                        f"O campo '{campo}' em 'enderecos' é obrigatório.",
                    )
        return None


def _todos_campos_ausentes(pessoa: PessoaDTO) -> bool:
    return all(
        valor is None
        for valor in (
            pessoa.nome,
            pessoa.sobrenome,
            pessoa.idade,
            pessoa.login,
            pessoa.senha,
            pessoa.status,
        )
    )


def _validar_campos_obrigatorios(
    pessoa: PessoaDTO, prefixo: str
) -> Optional[MensagemErro]:
    if not pessoa.nome:
        return mensagem_erro(
            prefixo,
            "O campo 'nome' é obrigatório e não pode estar vazio.",
        )
    if not pessoa.sobrenome:
        return mensagem_erro(
            prefixo,
            "O campo 'sobrenome' é obrigatório e não pode estar vazio.",
        )
    if pessoa.idade is None:
        return mensagem_erro(prefixo, "O campo 'idade' é obrigatório.")
    if not pessoa.login:
        return mensagem_erro(
            prefixo,
            "O campo 'login' é obrigatório e não pode estar vazio.",
        )
    if not pessoa.senha:
        return mensagem_erro(
            prefixo,
            "O campo 'senha' é obrigatório e não pode estar vazio.",
        )
    if pessoa.status is None:
        return mensagem_erro(prefixo, "O campo 'status' é obrigatório.")
    if pessoa.status not in (StatusRegistro.ativo, StatusRegistro.inativo):
        return mensagem_erro(prefixo, 'O status deve ser 1 ou 2.')
    return None


def _ordenar(pessoas: List[PessoaDTO]) -> List[PessoaDTO]:
    return sorted(pessoas, key=lambda p: p.codigo_pessoa, reverse=True)
