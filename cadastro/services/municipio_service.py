from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Municipio, StatusRegistro
from ..repositorios import MunicipioRepositorio, UfRepositorio
from ..schemas import MensagemErro, MunicipioDetalheDTO, MunicipioDTO
from ..utils.respostas import mensagem_erro
from .uf_service import uf_para_dto


PREFIXO_POST = 'Não foi possível cadastrar município no banco de dados.'
PREFIXO_PUT = 'Não foi possível alterar município no banco de dados.'


def municipio_para_dto(municipio: Municipio) -> MunicipioDTO:
    return MunicipioDTO(
        codigo_municipio=municipio.codigo_municipio,
        codigo_uf=municipio.codigo_uf,
        nome=municipio.nome,
        status=municipio.status,
    )


def municipio_para_detalhe(municipio: Municipio) -> MunicipioDetalheDTO:
    """Município com a UF aninhada."""
    return MunicipioDetalheDTO(
        codigo_municipio=municipio.codigo_municipio,
        codigo_uf=municipio.codigo_uf,
        nome=municipio.nome,
        status=municipio.status,
        uf=uf_para_dto(municipio.uf) if municipio.uf else None,
    )


class MunicipioService:
    def __init__(self, session: AsyncSession):
        self.municipio_repositorio = MunicipioRepositorio(session)
        self.uf_repositorio = UfRepositorio(session)

    async def find_all(self) -> List[MunicipioDTO]:
        municipios = await self.municipio_repositorio.find_all()
        return _ordenar([municipio_para_dto(m) for m in municipios])

    async def find_by_filters(
        self,
        codigo_municipio: Optional[int] = None,
        codigo_uf: Optional[int] = None,
        nome: Optional[str] = None,
        status: Optional[int] = None,
    ) -> List[MunicipioDTO]:
        municipios = await self.municipio_repositorio.find_by_filters(
            codigo_municipio, codigo_uf, nome, status
        )
        return _ordenar([municipio_para_dto(m) for m in municipios])

    async def insert(self, municipio_dto: MunicipioDTO) -> MunicipioDTO:
        municipio = Municipio(
            codigo_uf=municipio_dto.codigo_uf,
            nome=municipio_dto.nome,
            status=municipio_dto.status,
        )
        municipio = await self.municipio_repositorio.insert(municipio)
        return municipio_para_dto(municipio)

    async def update(self, municipio_dto: MunicipioDTO) -> MunicipioDTO:
        municipio = await self.municipio_repositorio.find_by_id(
            municipio_dto.codigo_municipio
        )
        municipio.codigo_uf = municipio_dto.codigo_uf
        municipio.nome = municipio_dto.nome
        municipio.status = municipio_dto.status
        municipio = await self.municipio_repositorio.update(municipio)
        return municipio_para_dto(municipio)

    async def validate_insert(
        self, municipio: MunicipioDTO
    ) -> Optional[MensagemErro]:
        """
        Valida um município antes da inserção.

        A UF informada precisa existir e o nome não pode estar em uso.
        """
        if (
            municipio.codigo_uf is None
            and municipio.nome is None
            and municipio.status is None
        ):
            return mensagem_erro(
                PREFIXO_POST,
                'Os campos codigoUF, nome e status precisam estar inclusos '
                'no corpo da requisição.',
            )
        erro = _validar_campos_obrigatorios(municipio, PREFIXO_POST)
        if erro:
            return erro
        if await self.uf_repositorio.find_by_id(municipio.codigo_uf) is None:
            return mensagem_erro(
                PREFIXO_POST, 'O codigoUF fornecido não existe.'
            )
        if await self.municipio_repositorio.find_by_nome(municipio.nome):
            return mensagem_erro(
                PREFIXO_POST,
                f'O município com o nome {municipio.nome} '
                'já está cadastrado.',
            )
        return None

    async def validate_update(
        self, municipio: MunicipioDTO
    ) -> Optional[MensagemErro]:
        if (
            municipio.codigo_municipio is None
            and municipio.codigo_uf is None
            and municipio.nome is None
            and municipio.status is None
        ):
            return mensagem_erro(
                PREFIXO_PUT,
                'Os campos codigoMunicipio, codigoUF, nome e status precisam '
                'estar inclusos no corpo da requisição.',
            )
        if municipio.codigo_municipio is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O campo codigoMunicipio é obrigatório.'
            )
        erro = _validar_campos_obrigatorios(municipio, PREFIXO_PUT)
        if erro:
            return erro
        if (
            await self.municipio_repositorio.find_by_id(
                municipio.codigo_municipio
            )
            is None
        ):
            return mensagem_erro(
                PREFIXO_PUT, 'O codigoMunicipio fornecido não existe.'
            )
        if await self.uf_repositorio.find_by_id(municipio.codigo_uf) is None:
            return mensagem_erro(
                PREFIXO_PUT, 'O codigoUF fornecido não existe.'
            )
        existente = await self.municipio_repositorio.find_by_nome(
            municipio.nome
        )
        if (
            existente
            and existente.codigo_municipio != municipio.codigo_municipio
        ):
            return mensagem_erro(
                PREFIXO_PUT,
                f'O município com o nome {municipio.nome} '
                'já está cadastrado.',
            )
        return None


def _validar_campos_obrigatorios(
    municipio: MunicipioDTO, prefixo: str
) -> Optional[MensagemErro]:
    if municipio.codigo_uf is None:
        return mensagem_erro(prefixo, 'O campo codigoUF é obrigatório.')
    if not municipio.nome:
        return mensagem_erro(prefixo, 'O campo nome é obrigatório.')
    if municipio.status is None:
        return mensagem_erro(prefixo, 'O campo status é obrigatório.')
    if municipio.status not in (
        StatusRegistro.ativo,
        StatusRegistro.inativo,
    ):
        return mensagem_erro(prefixo, 'O status precisa ser 1 ou 2.')
    return None


def _ordenar(municipios: List[MunicipioDTO]) -> List[MunicipioDTO]:
    return sorted(
        municipios, key=lambda m: m.codigo_municipio, reverse=True
    )
