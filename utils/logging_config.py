"""
Configuração de logging do catálogo.

As demonstrações escrevem seu texto em stdout; o log vai para stderr para não
se misturar com a saída esperada.
"""

import logging
import sys
from typing import Optional

from config.settings import get_settings


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configura o logger raiz com o formato da configuração carregada.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Usa o nível configurado se não informado.

    Returns:
        logging.Logger: Logger raiz configurado
    """
    config = get_settings().get_logging_config()
    level = (level or config["level"]).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(getattr(logging, level))
    handler.setFormatter(logging.Formatter(
        config["log_format"],
        datefmt=config["date_format"]
    ))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger de um módulo (normalmente ``__name__``)."""
    return logging.getLogger(name)
