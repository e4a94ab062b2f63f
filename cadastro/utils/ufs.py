"""
Tabela de referência dos estados brasileiros.

Usada para impedir o cadastro de UFs inexistentes: o nome e a sigla
informados precisam formar um dos pares abaixo.
"""

from typing import Optional

# Nome do estado (maiúsculo) -> sigla
UFS_BRASIL = {
    'ACRE': 'AC',
    'ALAGOAS': 'AL',
    'AMAPÁ': 'AP',
    'AMAZONAS': 'AM',
    'BAHIA': 'BA',
    'CEARÁ': 'CE',
    'DISTRITO FEDERAL': 'DF',
    'ESPÍRITO SANTO': 'ES',
    'GOIÁS': 'GO',
    'MARANHÃO': 'MA',
    'MATO GROSSO': 'MT',
    'MATO GROSSO DO SUL': 'MS',
    'MINAS GERAIS': 'MG',
    'PARÁ': 'PA',
    'PARAÍBA': 'PB',
    'PARANÁ': 'PR',
    'PERNAMBUCO': 'PE',
    'PIAUÍ': 'PI',
    'RIO DE JANEIRO': 'RJ',
    'RIO GRANDE DO NORTE': 'RN',
    'RIO GRANDE DO SUL': 'RS',
    'RONDÔNIA': 'RO',
    'RORAIMA': 'RR',
    'SANTA CATARINA': 'SC',
    'SÃO PAULO': 'SP',
    'SERGIPE': 'SE',
    'TOCANTINS': 'TO',
}


def validar_nome_sigla_uf(nome: Optional[str], sigla: Optional[str]) -> bool:
    """Verifica se nome e sigla correspondem ao mesmo estado."""
    if not nome or not sigla:
        return False
    return UFS_BRASIL.get(nome.upper()) == sigla.upper()
