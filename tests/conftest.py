"""Configuração do pytest e fixtures compartilhadas."""
import pytest

from principles.single_responsibility import Repository, EmployerService
from principles.dependency_inversion import MySQLDatabase, PostgreSQLDatabase


@pytest.fixture
def employer_service():
    """Serviço de remuneração com o repositório simulado."""
    return EmployerService(Repository())


@pytest.fixture(params=[MySQLDatabase, PostgreSQLDatabase], ids=["mysql", "postgresql"])
def database(request):
    """Cada um dos bancos simulados."""
    return request.param()


@pytest.fixture
def printed_lines(capsys):
    """Retorna uma função que devolve as linhas impressas até o momento."""
    def _lines():
        return capsys.readouterr().out.splitlines()
    return _lines


@pytest.fixture
def fresh_settings(monkeypatch):
    """Configuração global nova, sem variáveis de ambiente do catálogo."""
    import config.settings as settings_module

    for env_var in ("SOLID_DEMOS_LOG_LEVEL", "SOLID_DEMOS_REPORT_DIR", "SOLID_DEMOS_CONFIG"):
        monkeypatch.delenv(env_var, raising=False)
    settings = settings_module.Settings()
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


@pytest.fixture
def restore_root_logger():
    """Restaura os handlers e o nível do logger raiz após o teste."""
    import logging

    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
