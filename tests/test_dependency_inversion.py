"""Testes da demonstração do princípio da inversão de dependência."""
import inspect

from principles import dependency_inversion
from principles.dependency_inversion import (
    Database,
    MySQLDatabase,
    PostgreSQLDatabase,
    UserRepository,
    UserRepositoryImpl,
    UserService,
    CoupledUserService,
    build_user_service,
)


class RecordingDatabase(Database):
    """Banco em memória que registra as chamadas recebidas."""

    def __init__(self):
        self.calls = []

    def connect(self):
        self.calls.append("connect")

    def disconnect(self):
        self.calls.append("disconnect")

    def read_data(self, query):
        self.calls.append(("read", query))
        return f"registro: {query}"

    def write_data(self, data):
        self.calls.append(("write", data))


class TestDatabases:
    def test_read_contains_query(self, database, printed_lines):
        result = database.read_data("SELECT 1;")

        assert "SELECT 1;" in result
        assert printed_lines() == []

    def test_read_is_stand_in_specific(self):
        query = "SELECT * FROM users;"

        assert MySQLDatabase().read_data(query) == "Resultado da consulta: SELECT * FROM users;"
        assert PostgreSQLDatabase().read_data(query) == \
            "Resultado da consulta no PostgreSQL: SELECT * FROM users;"


class TestUserRepositoryImpl:
    def test_get_user_data_wraps_connection(self):
        db = RecordingDatabase()
        result = UserRepositoryImpl(db).get_user_data("q")

        assert result == "registro: q"
        assert db.calls == ["connect", ("read", "q"), "disconnect"]

    def test_save_user_data_wraps_connection(self):
        db = RecordingDatabase()
        UserRepositoryImpl(db).save_user_data("d")

        assert db.calls == ["connect", ("write", "d"), "disconnect"]


class TestUserService:
    def test_delegates_to_repository(self):
        class FakeRepository(UserRepository):
            def __init__(self):
                self.saved = []

            def get_user_data(self, query):
                return query.upper()

            def save_user_data(self, data):
                self.saved.append(data)

        repository = FakeRepository()
        service = UserService(repository)
        service.save_user_data("x")

        assert service.get_user_data("abc") == "ABC"
        assert repository.saved == ["x"]

    def test_swapping_database_changes_only_output(self, printed_lines):
        query = "SELECT * FROM users;"
        mysql_result = build_user_service(MySQLDatabase()).get_user_data(query)
        postgresql_result = build_user_service(PostgreSQLDatabase()).get_user_data(query)

        assert mysql_result != postgresql_result
        assert query in mysql_result and query in postgresql_result

    def test_service_and_repository_reference_only_abstractions(self):
        for cls in (UserService, UserRepositoryImpl):
            source = inspect.getsource(cls)
            assert "MySQLDatabase" not in source
            assert "PostgreSQLDatabase" not in source

    def test_coupled_service_is_bound_to_mysql(self):
        assert isinstance(CoupledUserService().database, MySQLDatabase)


class TestMain:
    def test_main_output(self, printed_lines):
        dependency_inversion.main()

        assert printed_lines() == [
            "Conectando ao banco de dados MySQL...",
            "Desconectando do banco de dados MySQL...",
            "Resultado da consulta: SELECT * FROM users;",
            "Conectando ao banco de dados MySQL...",
            "Escrevendo no banco de dados MySQL: INSERT INTO users VALUES ('John Doe');",
            "Desconectando do banco de dados MySQL...",
            "Conectando ao banco de dados PostgreSQL...",
            "Desconectando do banco de dados PostgreSQL...",
            "Resultado da consulta no PostgreSQL: SELECT * FROM employees;",
            "Conectando ao banco de dados PostgreSQL...",
            "Escrevendo no banco de dados PostgreSQL: INSERT INTO employees VALUES ('Jane Doe');",
            "Desconectando do banco de dados PostgreSQL...",
        ]
