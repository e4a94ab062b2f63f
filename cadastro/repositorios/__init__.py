# Repositórios: uma classe de acesso a dados por entidade

from .bairro import BairroRepositorio
from .endereco import EnderecoRepositorio
from .municipio import MunicipioRepositorio
from .pessoa import PessoaRepositorio
from .uf import UfRepositorio

__all__ = [
    'UfRepositorio',
    'MunicipioRepositorio',
    'BairroRepositorio',
    'PessoaRepositorio',
    'EnderecoRepositorio',
]
