#!/usr/bin/env python3
"""
Catálogo de demonstrações dos princípios SOLID

Uso:
    python main.py [princípio]

Princípios: srp, ocp, lsp, isp, dip ou todos (padrão)

Exemplo:
    python main.py lsp
"""

import sys

from config import principle_keys
from config.settings import ALL_PRINCIPLES, get_settings, get_log_level, get_report_dir
from principles import get_demo, run_demo
from utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def select_principles(argv):
    """
    Resolve os princípios pedidos na linha de comando.

    Raises:
        ValueError: Se o argumento não for um princípio conhecido
    """
    if len(argv) < 2:
        return principle_keys()

    key = argv[1].lower()
    if key == ALL_PRINCIPLES:
        return principle_keys()

    get_demo(key)
    return [key]


def main(argv=None):
    """Função principal do catálogo."""
    argv = sys.argv if argv is None else argv
    try:
        settings = get_settings()
        setup_logging(get_log_level())
        keys = select_principles(argv)
    except ValueError as e:
        print(f"Erro: {e}")
        print("Uso: python main.py [srp|ocp|lsp|isp|dip|todos]")
        sys.exit(1)

    logger.info("Executando demonstrações: %s", ", ".join(keys))

    transcript = {}
    for key in keys:
        print(f"\n=== {settings.get_principle_title(key)} ===")
        lines = run_demo(key)
        for line in lines:
            print(line)
        transcript[key] = lines

    if settings.is_report_enabled():
        report_dir = get_report_dir()
        from utils.analysis import generate_report
        paths = generate_report(report_dir, transcript)
        print(f"\nRelatório gerado em: {report_dir}")
        for path in paths.values():
            print(f"  - {path}")


if __name__ == "__main__":
    main()
