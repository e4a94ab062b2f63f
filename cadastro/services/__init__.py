from .bairro_service import BairroService
from .municipio_service import MunicipioService
from .pessoa_service import PessoaService
from .uf_service import UfService

__all__ = [
    'UfService',
    'MunicipioService',
    'BairroService',
    'PessoaService',
]
