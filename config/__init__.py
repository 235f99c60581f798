"""
Módulo de configuração do catálogo de demonstrações SOLID.
"""

from config.settings import PRINCIPLE_TITLES


def principle_keys():
    """Retorna as chaves dos princípios na ordem de apresentação."""
    return list(PRINCIPLE_TITLES)
