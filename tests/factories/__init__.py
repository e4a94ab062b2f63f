from .bairro_factory import BairroFactory
from .endereco_factory import EnderecoFactory
from .municipio_factory import MunicipioFactory
from .pessoa_factory import PessoaFactory
from .uf_factory import UfFactory

__all__ = [
    'UfFactory',
    'MunicipioFactory',
    'BairroFactory',
    'PessoaFactory',
    'EnderecoFactory',
]
