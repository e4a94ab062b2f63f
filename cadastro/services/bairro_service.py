from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Bairro, StatusRegistro
from ..repositorios import BairroRepositorio, MunicipioRepositorio
from ..schemas import BairroDetalheDTO, BairroDTO, MensagemErro
from ..utils.respostas import mensagem_erro
from .municipio_service import municipio_para_detalhe


PREFIXO_POST = 'Não foi possível incluir bairro no banco de dados.'
PREFIXO_PUT = 'Não foi possível alterar bairro no banco de dados.'


def bairro_para_dto(bairro: Bairro) -> BairroDTO:
    return BairroDTO(
        codigo_bairro=bairro.codigo_bairro,
        codigo_municipio=bairro.codigo_municipio,
        nome=bairro.nome,
        status=bairro.status,
    )


def bairro_para_detalhe(bairro: Bairro) -> BairroDetalheDTO:
    """Bairro com município e UF aninhados."""
    return BairroDetalheDTO(
        codigo_bairro=bairro.codigo_bairro,
        codigo_municipio=bairro.codigo_municipio,
        nome=bairro.nome,
        status=bairro.status,
        municipio=(
            municipio_para_detalhe(bairro.municipio)
            if bairro.municipio
            else None
        ),
    )


class BairroService:
    def __init__(self, session: AsyncSession):
        self.bairro_repositorio = BairroRepositorio(session)
        self.municipio_repositorio = MunicipioRepositorio(session)

    async def find_all(self) -> List[BairroDTO]:
        bairros = await self.bairro_repositorio.find_all()
        return _ordenar([bairro_para_dto(b) for b in bairros])

    async def find_by_filters(
        self,
        codigo_bairro: Optional[int] = None,
        codigo_municipio: Optional[int] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[BairroDTO]:
        bairros = await self.bairro_repositorio.find_by_filters(
            codigo_bairro, codigo_municipio, nome, status
        )
        return _ordenar([bairro_para_dto(b) for b in bairros])

    async def insert(self, bairro_dto: BairroDTO) -> BairroDTO:
        bairro = Bairro(
            codigo_municipio=bairro_dto.codigo_municipio,
            nome=bairro_dto.nome,
            status=bairro_dto.status,
        )
        bairro = await self.bairro_repositorio.insert(bairro)
        return bairro_para_dto(bairro)

    async def update(self, bairro_dto: BairroDTO) -> BairroDTO:
        bairro = await self.bairro_repositorio.find_by_id(
            bairro_dto.codigo_bairro
        )
        bairro.codigo_municipio = bairro_dto.codigo_municipio
        bairro.nome = bairro_dto.nome
        bairro.status = bairro_dto.status
        bairro = await self.bairro_repositorio.update(bairro)
        return bairro_para_dto(bairro)

    async def validate_insert(
        self, bairro: BairroDTO
    ) -> Optional[MensagemErro]:
        if (
            bairro.codigo_municipio is None
            and bairro.nome is None
            and bairro.status is None
        ):
            return mensagem_erro(
                PREFIXO_POST,
                'Os campos codigoMunicipio, nome e status precisam estar '
                'inclusos no corpo da requisição.',
            )
        erro = _validar_campos_obrigatorios(bairro, PREFIXO_POST)
        if erro:
            return erro
        if (
            await self.municipio_repositorio.find_by_id(
                bairro.codigo_municipio
            )
            is None
        ):
            return mensagem_erro(
                PREFIXO_POST, 'O codigoMunicipio fornecido não existe.'
            )
        if await self.bairro_repositorio.find_by_nome(bairro.nome):
            return mensagem_erro(
                PREFIXO_POST,
                f'O bairro com o nome {bairro.nome} já está cadastrado.',
            )
        return None

    async def validate_update(
        self, bairro: BairroDTO
    ) -> Optional[MensagemErro]:
        if (
            bairro.codigo_bairro is None
            and bairro.codigo_municipio is None
            and bairro.nome is None
            and bairro.status is None
        ):
            return mensagem_erro(
                PREFIXO_PUT,
                'Os campos codigoBairro, codigoMunicipio, nome e status '
                'precisam estar inclusos no corpo da requisição.',
            )
        if bairro.codigo_bairro is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O campo codigoBairro é obrigatório.'
            )
        erro = _validar_campos_obrigatorios(bairro, PREFIXO_PUT)
        if erro:
            return erro
        if await self.bairro_repositorio.find_by_id(bairro.codigo_bairro) is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O codigoBairro fornecido não existe.'
            )
        if (
            await self.municipio_repositorio.find_by_id(
                bairro.codigo_municipio
            )
            is None
        ):
            return mensagem_erro(
                PREFIXO_PUT, 'O código Município fornecido não existe.'
            )
        existente = await self.bairro_repositorio.find_by_nome(bairro.nome)
        if existente and existente.codigo_bairro != bairro.codigo_bairro:
            return mensagem_erro(
                PREFIXO_PUT,
                f'O bairro com o nome {bairro.nome} já está cadastrado.',
            )
        return None


def _validar_campos_obrigatorios(
    bairro: BairroDTO, prefixo: str
) -> Optional[MensagemErro]:
    if bairro.codigo_municipio is None:
        return mensagem_erro(prefixo, 'O campo codigoMunicipio é obrigatório.')
    if not bairro.nome:
        return mensagem_erro(prefixo, 'O campo nome é obrigatório.')
    if bairro.status is None:
        return mensagem_erro(prefixo, 'O campo status é obrigatório.')
    if bairro.status not in (StatusRegistro.ativo, StatusRegistro.inativo):
        return mensagem_erro(prefixo, 'O status precisa ser 1 ou 2.')
    return None


def _ordenar(bairros: List[BairroDTO]) -> List[BairroDTO]:
    return sorted(bairros, key=lambda b: b.codigo_bairro, reverse=True)
