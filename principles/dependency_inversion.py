"""
Princípio da Inversão de Dependência (DIP).

Classes de alto nível não devem depender de classes de baixo nível, mas de
abstrações. As abstrações não devem depender dos detalhes; os detalhes devem
depender das abstrações.

Uma camada de Repository separa a persistência de dados da lógica de negócio,
e o serviço conhece apenas as abstrações.
"""

from abc import ABC, abstractmethod

from config.settings import MYSQL_QUERY, MYSQL_INSERT, POSTGRESQL_QUERY, POSTGRESQL_INSERT
from utils.logging_config import get_logger

logger = get_logger(__name__)


# =====================================================================
# Abstração e implementações do banco de dados
# =====================================================================

class Database(ABC):
    """Operações no banco de dados que qualquer implementação deve oferecer."""

    @abstractmethod
    def connect(self) -> None:
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass

    @abstractmethod
    def read_data(self, query: str) -> str:
        pass

    @abstractmethod
    def write_data(self, data: str) -> None:
        pass


class MySQLDatabase(Database):
    """Banco MySQL simulado: apenas descreve as ações."""

    def connect(self) -> None:
        print("Conectando ao banco de dados MySQL...")

    def disconnect(self) -> None:
        print("Desconectando do banco de dados MySQL...")

    def read_data(self, query: str) -> str:
        return f"Resultado da consulta: {query}"

    def write_data(self, data: str) -> None:
        print(f"Escrevendo no banco de dados MySQL: {data}")


class PostgreSQLDatabase(Database):
    """Banco PostgreSQL simulado: apenas descreve as ações."""

    def connect(self) -> None:
        print("Conectando ao banco de dados PostgreSQL...")

    def disconnect(self) -> None:
        print("Desconectando do banco de dados PostgreSQL...")

    def read_data(self, query: str) -> str:
        return f"Resultado da consulta no PostgreSQL: {query}"

    def write_data(self, data: str) -> None:
        print(f"Escrevendo no banco de dados PostgreSQL: {data}")


# =====================================================================
# Repository
# =====================================================================

class UserRepository(ABC):
    """Abstração da persistência usada pela camada de serviço."""

    @abstractmethod
    def get_user_data(self, query: str) -> str:
        pass

    @abstractmethod
    def save_user_data(self, data: str) -> None:
        pass


class UserRepositoryImpl(UserRepository):
    """
    Repository que usa a abstração Database.

    Cada operação abre e fecha a conexão dentro da própria chamada.
    """

    def __init__(self, database: Database):
        self.database = database

    def get_user_data(self, query: str) -> str:
        logger.debug("Lendo dados com %s", type(self.database).__name__)
        self.database.connect()
        data = self.database.read_data(query)
        self.database.disconnect()
        return data

    def save_user_data(self, data: str) -> None:
        logger.debug("Gravando dados com %s", type(self.database).__name__)
        self.database.connect()
        self.database.write_data(data)
        self.database.disconnect()


# =====================================================================
# Serviços
# =====================================================================

class CoupledUserService:
    """Versão acoplada: cria o MySQLDatabase por conta própria."""

    def __init__(self):
        self.database = MySQLDatabase()

    def get_user_data(self, query: str) -> str:
        self.database.connect()
        data = self.database.read_data(query)
        self.database.disconnect()
        return data


class UserService:
    """
    Serviço que depende apenas de UserRepository.

    O construtor recebe a abstração, permitindo injetar qualquer repositório.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def get_user_data(self, query: str) -> str:
        return self.user_repository.get_user_data(query)

    def save_user_data(self, data: str) -> None:
        self.user_repository.save_user_data(data)


def build_user_service(database: Database) -> UserService:
    """Monta o serviço a partir do banco escolhido."""
    return UserService(UserRepositoryImpl(database))


def main():
    """Demonstra o DIP com a camada de Repository em MySQL e PostgreSQL."""
    user_service_mysql = build_user_service(MySQLDatabase())
    print(user_service_mysql.get_user_data(MYSQL_QUERY))
    user_service_mysql.save_user_data(MYSQL_INSERT)

    user_service_postgresql = build_user_service(PostgreSQLDatabase())
    print(user_service_postgresql.get_user_data(POSTGRESQL_QUERY))
    user_service_postgresql.save_user_data(POSTGRESQL_INSERT)


if __name__ == "__main__":
    main()
