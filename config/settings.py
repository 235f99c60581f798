"""
Configuração do catálogo de demonstrações SOLID.

Reúne as constantes usadas pelas demonstrações e a classe Settings, que carrega
a configuração a partir de valores padrão, de um arquivo JSON opcional e de
variáveis de ambiente.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from pathlib import Path


logger = logging.getLogger(__name__)

# =====================================================================
# Princípios disponíveis
# =====================================================================

PRINCIPLE_TITLES = {
    "srp": "Princípio da Responsabilidade Única",
    "ocp": "Princípio Aberto-Fechado",
    "lsp": "Princípio da Substituição de Liskov",
    "isp": "Princípio da Segregação de Interfaces",
    "dip": "Princípio da Inversão de Dependência",
}

ALL_PRINCIPLES = "todos"

# =====================================================================
# SRP - dados simulados do repositório
# =====================================================================

DEFAULT_EMPLOYEE_NAME = "Fulano"
DEFAULT_VALUE_HOUR = 8.0
DEFAULT_DISCOUNTS = 50.0

SRP_REGISTRY_NUMBER = 1
SRP_TOTAL_HOURS = 160

# =====================================================================
# OCP - tipos de contrato
# =====================================================================

CLT_SALARY = 5000.0
TRAINEE_STIPEND = 1500.0
PJ_VALUE_HOUR = 100.0
PJ_HOURS_WORKED = 160

# =====================================================================
# DIP - consultas de exemplo
# =====================================================================

MYSQL_QUERY = "SELECT * FROM users;"
MYSQL_INSERT = "INSERT INTO users VALUES ('John Doe');"
POSTGRESQL_QUERY = "SELECT * FROM employees;"
POSTGRESQL_INSERT = "INSERT INTO employees VALUES ('Jane Doe');"

# =====================================================================
# Logging e relatórios
# =====================================================================

LOGGING_CONFIG = {
    "level": "WARNING",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S"
}

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

REPORT_CONFIG = {
    "output_dir": None,
    "transcript_file": "transcricao.csv",
    "compensation_file": "remuneracoes.csv",
    "capabilities_file": "capacidades.csv",
    "chart_file": "remuneracoes.png"
}


class Settings:
    """
    Configuração do catálogo.

    Ordem de carga:
    - Valores padrão (constantes deste módulo)
    - Arquivo JSON opcional
    - Variáveis de ambiente
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_data: Dict[str, Any] = {}
        self._config_file = config_file
        self._load_configuration()

    def _load_configuration(self):
        """Carrega a configuração de todas as fontes disponíveis."""
        self._load_defaults()

        if self._config_file and Path(self._config_file).exists():
            self._load_from_file(self._config_file)

        self._load_from_environment()
        self._validate_configuration()

    def _load_defaults(self):
        self._config_data = {
            "principles": dict(PRINCIPLE_TITLES),
            "logging": dict(LOGGING_CONFIG),
            "report": dict(REPORT_CONFIG),
        }

    def _load_from_file(self, config_file: str):
        """Carrega configuração a partir de um arquivo JSON."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Não foi possível carregar o arquivo de configuração %s: %s", config_file, e)
            return

        self._deep_update(self._config_data, file_config)

    def _load_from_environment(self):
        """Carrega configuração a partir de variáveis de ambiente."""
        env_mappings = {
            "SOLID_DEMOS_LOG_LEVEL": ("logging", "level"),
            "SOLID_DEMOS_REPORT_DIR": ("report", "output_dir"),
        }

        for env_var, (section, key) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                self._config_data.setdefault(section, {})[key] = env_value

    def _validate_configuration(self):
        """Valida a coerência da configuração."""
        errors = []

        level = str(self._config_data["logging"].get("level", "")).upper()
        if level not in VALID_LOG_LEVELS:
            errors.append(f"Nível de log inválido: {self._config_data['logging'].get('level')}")

        for key in self._config_data["principles"]:
            if key not in PRINCIPLE_TITLES:
                errors.append(f"Princípio desconhecido: {key}")

        if errors:
            raise ValueError("Erros na configuração: " + "; ".join(errors))

    def _deep_update(self, base_dict: dict, update_dict: dict):
        """Atualiza um dicionário recursivamente."""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    # =====================================================================
    # Acesso à configuração
    # =====================================================================

    def get_logging_config(self) -> Dict[str, Any]:
        return self._config_data["logging"]

    def get_report_config(self) -> Dict[str, Any]:
        return self._config_data["report"]

    def get_principle_title(self, key: str) -> str:
        """Retorna o título de um princípio, ou a própria chave se não houver título."""
        return self._config_data["principles"].get(key, key)

    def is_report_enabled(self) -> bool:
        return bool(self._config_data["report"].get("output_dir"))

    def update_setting(self, path: str, value: Any):
        """
        Atualiza um valor de configuração.

        Args:
            path: Caminho no formato "secao.chave"
            value: Novo valor
        """
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def get_setting(self, path: str, default: Any = None) -> Any:
        """
        Obtém um valor de configuração pelo caminho "secao.chave".

        Retorna ``default`` se o caminho não existir.
        """
        keys = path.split('.')
        current = self._config_data

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default


# Instância global, criada no primeiro acesso
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Retorna a configuração global, carregando-a na primeira chamada.

    Raises:
        ValueError: Se a configuração for inválida
    """
    global _settings
    if _settings is None:
        _settings = Settings(os.getenv("SOLID_DEMOS_CONFIG"))
    return _settings


def get_log_level() -> str:
    """Nível de log configurado."""
    return get_settings().get_logging_config()["level"].upper()


def get_report_dir() -> Optional[str]:
    """Diretório de relatórios configurado, ou None se desativado."""
    return get_settings().get_report_config().get("output_dir")
