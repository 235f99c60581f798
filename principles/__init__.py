"""
Principles - Demonstrações dos cinco princípios SOLID.

Cada módulo é independente e expõe uma função main() que executa sua
demonstração do início ao fim.
"""

import io
from contextlib import redirect_stdout
from typing import Callable, Dict, List

from . import (
    single_responsibility,
    open_closed,
    liskov_substitution,
    interface_segregation,
    dependency_inversion,
)

DEMOS: Dict[str, Callable[[], None]] = {
    "srp": single_responsibility.main,
    "ocp": open_closed.main,
    "lsp": liskov_substitution.main,
    "isp": interface_segregation.main,
    "dip": dependency_inversion.main,
}


def get_demo(key: str) -> Callable[[], None]:
    """
    Obtém o ponto de entrada de uma demonstração.

    Args:
        key: Chave do princípio (srp, ocp, lsp, isp, dip), sem diferenciar maiúsculas

    Raises:
        ValueError: Se a chave não corresponder a nenhum princípio
    """
    demo = DEMOS.get(key.lower())
    if demo is None:
        raise ValueError(f"Princípio desconhecido: {key}. Opções: {', '.join(DEMOS)}")
    return demo


def run_demo(key: str) -> List[str]:
    """Executa uma demonstração e retorna as linhas que ela imprimiu."""
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        get_demo(key)()
    return buffer.getvalue().splitlines()


__all__ = [
    'DEMOS',
    'get_demo',
    'run_demo',
    'single_responsibility',
    'open_closed',
    'liskov_substitution',
    'interface_segregation',
    'dependency_inversion',
]
