"""
Serviço de cadastro, atualização e validação de UFs (Unidades Federativas).
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import StatusRegistro, Uf
from ..repositorios import UfRepositorio
from ..schemas import MensagemErro, UfDTO
from ..utils.respostas import mensagem_erro
from ..utils.ufs import validar_nome_sigla_uf


PREFIXO_POST = 'Não foi possível incluir UF no banco de dados.'
PREFIXO_PUT = 'Não foi possível alterar UF no banco de dados.'


def uf_para_dto(uf: Uf) -> UfDTO:
    return UfDTO(
        codigo_uf=uf.codigo_uf,
        sigla=uf.sigla,
        nome=uf.nome,
        status=uf.status,
    )


class UfService:
    def __init__(self, session: AsyncSession):
        self.uf_repositorio = UfRepositorio(session)

    async def find_all(self) -> List[UfDTO]:
        ufs = await self.uf_repositorio.find_all()
        return _ordenar([uf_para_dto(uf) for uf in ufs])

    async def find_by_id(self, codigo_uf: int) -> Optional[UfDTO]:
        uf = await self.uf_repositorio.find_by_id(codigo_uf)
        return uf_para_dto(uf) if uf else None

    async def find_by_status(self, status: int) -> List[UfDTO]:
        ufs = await self.uf_repositorio.find_by_status(status)
        return _ordenar([uf_para_dto(uf) for uf in ufs])

    async def find_by_filters(
        self,
        codigo_uf: Optional[int] = None,
        sigla: Optional[str] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[UfDTO]:
        ufs = await self.uf_repositorio.find_by_filters(
            codigo_uf, sigla, nome, status
        )
        return _ordenar([uf_para_dto(uf) for uf in ufs])

    async def insert(self, uf_dto: UfDTO) -> UfDTO:
        uf = Uf(sigla=uf_dto.sigla, nome=uf_dto.nome, status=uf_dto.status)
        uf = await self.uf_repositorio.insert(uf)
        return uf_para_dto(uf)

    async def update(self, uf_dto: UfDTO) -> UfDTO:
        uf = await self.uf_repositorio.find_by_id(uf_dto.codigo_uf)
        uf.sigla = uf_dto.sigla
        uf.nome = uf_dto.nome
        uf.status = uf_dto.status
        uf = await self.uf_repositorio.update(uf)
        return uf_para_dto(uf)

    async def validate_insert(self, uf: UfDTO) -> Optional[MensagemErro]:
        """
        Valida os dados de uma UF antes da inserção.

        Returns:
            MensagemErro com o primeiro problema encontrado,
            ou None caso a validação passe.
        """
        if uf.sigla is None and uf.nome is None and uf.status is None:
            return mensagem_erro(
                PREFIXO_POST,
                'Os campos nome, sigla e status precisam estar inclusos '
                'no corpo da requisição.',
            )
        erro = _validar_campos_obrigatorios(uf, PREFIXO_POST)
        if erro:
            return erro
        if await self.uf_repositorio.find_by_nome(uf.nome):
            return mensagem_erro(
                PREFIXO_POST, f'O Estado {uf.nome} já está cadastrado.'
            )
        if await self.uf_repositorio.find_by_sigla(uf.sigla):
            return mensagem_erro(
                PREFIXO_POST,
                f'Já existe um Estado cadastrado com a sigla {uf.sigla}.',
            )
        if not validar_nome_sigla_uf(uf.nome, uf.sigla):
            return mensagem_erro(
                PREFIXO_POST,
                'O nome do Estado e/ou sigla foram digitados '
                'de maneira incorreta.',
            )
        return None

    async def validate_update(self, uf: UfDTO) -> Optional[MensagemErro]:
        """
        Valida os dados de uma UF antes da atualização.

        A UF informada pode manter o próprio nome e sigla; apenas outra UF
        com o mesmo nome ou sigla impede a alteração.
        """
        if uf.sigla is None and uf.nome is None and uf.status is None:
            return mensagem_erro(
                PREFIXO_PUT,
                'Os campos codigoUF, sigla, nome e status precisam estar '
                'inclusos no corpo da requisição.',
            )
        if uf.codigo_uf is None:
            return mensagem_erro(
                PREFIXO_PUT,
                'O campo codigoUF está vazio ou não foi incluso '
                'no corpo da requisição.',
            )
        erro = _validar_campos_obrigatorios(uf, PREFIXO_PUT)
        if erro:
            return erro
        if await self.uf_repositorio.find_by_id(uf.codigo_uf) is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O codigoUF fornecido não existe.'
            )
        existente = await self.uf_repositorio.find_by_sigla(uf.sigla)
        if existente and existente.codigo_uf != uf.codigo_uf:
            return mensagem_erro(
                PREFIXO_PUT,
                f'Já existe um Estado cadastrado com a sigla {uf.sigla}.',
            )
        existente = await self.uf_repositorio.find_by_nome(uf.nome)
        if existente and existente.codigo_uf != uf.codigo_uf:
            return mensagem_erro(
                PREFIXO_PUT, f'O Estado {uf.nome} já está cadastrado.'
            )
        if not validar_nome_sigla_uf(uf.nome, uf.sigla):
            return mensagem_erro(
                PREFIXO_PUT,
                'O Estado e/ou sigla foram digitados de maneira incorreta '
                'ou não foram preenchidos.',
            )
        return None


def _validar_campos_obrigatorios(
    uf: UfDTO, prefixo: str
) -> Optional[MensagemErro]:
    if not uf.sigla:
        return mensagem_erro(
            prefixo,
            'O campo sigla está vazio ou não foi incluso '
            'no corpo da requisição.',
        )
    if not uf.nome:
        return mensagem_erro(
            prefixo,
            'O campo nome está vazio ou não foi incluso '
            'no corpo da requisição.',
        )
    if uf.status is None:
        return mensagem_erro(
            prefixo,
            'O campo status está vazio ou não foi incluso '
            'no corpo da requisição.',
        )
    if uf.status not in (StatusRegistro.ativo, StatusRegistro.inativo):
        return mensagem_erro(prefixo, 'O status precisa ser 1 ou 2.')
    return None


def _ordenar(ufs: List[UfDTO]) -> List[UfDTO]:
    return sorted(ufs, key=lambda uf: uf.codigo_uf, reverse=True)
