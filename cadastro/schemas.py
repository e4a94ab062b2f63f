from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseDTO(BaseModel):
    """Classe base dos DTOs: campos em snake_case, JSON em camelCase."""

    model_config = ConfigDict(populate_by_name=True)


# ---------- MENSAGENS ----------
class Message(BaseModel):
    message: str


class MensagemErro(BaseModel):
    mensagem: str
    status: int


# ---------- UF ----------
class UfDTO(BaseDTO):
    codigo_uf: Optional[int] = Field(None, alias='codigoUF', examples=[1])
    sigla: Optional[str] = Field(None, examples=['SP'])
    nome: Optional[str] = Field(None, examples=['SÃO PAULO'])
    status: Optional[int] = Field(None, examples=[1])


# ---------- MUNICIPIO ----------
class MunicipioDTO(BaseDTO):
    codigo_municipio: Optional[int] = Field(None, alias='codigoMunicipio')
    codigo_uf: Optional[int] = Field(None, alias='codigoUF')
    nome: Optional[str] = Field(None, examples=['CAMPINAS'])
    status: Optional[int] = None


class MunicipioDetalheDTO(MunicipioDTO):
    uf: Optional[UfDTO] = None


# ---------- BAIRRO ----------
class BairroDTO(BaseDTO):
    codigo_bairro: Optional[int] = Field(None, alias='codigoBairro')
    codigo_municipio: Optional[int] = Field(None, alias='codigoMunicipio')
    nome: Optional[str] = Field(None, examples=['CAMBUÍ'])
    status: Optional[int] = None


class BairroDetalheDTO(BairroDTO):
    municipio: Optional[MunicipioDetalheDTO] = None


# ---------- ENDERECO ----------
class EnderecoDTO(BaseDTO):
    codigo_endereco: Optional[int] = Field(None, alias='codigoEndereco')
    codigo_pessoa: Optional[int] = Field(None, alias='codigoPessoa')
    codigo_bairro: Optional[int] = Field(None, alias='codigoBairro')
    nome_rua: Optional[str] = Field(
        None, alias='nomeRua', examples=['RUA DAS FLORES']
    )
    numero: Optional[str] = Field(None, examples=['100'])
    complemento: Optional[str] = Field(None, examples=['APTO 12'])
    cep: Optional[str] = Field(None, examples=['13025-000'])
    bairro: Optional[BairroDetalheDTO] = None


# ---------- PESSOA ----------
class PessoaDTO(BaseDTO):
    codigo_pessoa: Optional[int] = Field(None, alias='codigoPessoa')
    nome: Optional[str] = Field(None, examples=['Maria'])
    sobrenome: Optional[str] = Field(None, examples=['Silva'])
    idade: Optional[int] = Field(None, examples=[30])
    login: Optional[str] = Field(None, examples=['maria.silva'])
    senha: Optional[str] = None
    status: Optional[int] = None
    enderecos: Optional[List[EnderecoDTO]] = Field(default_factory=list)
