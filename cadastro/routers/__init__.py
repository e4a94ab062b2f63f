from .bairro import router as bairro_router
from .municipio import router as municipio_router
from .pessoa import router as pessoa_router
from .uf import router as uf_router

__all__ = [
    'uf_router',
    'municipio_router',
    'bairro_router',
    'pessoa_router',
]
