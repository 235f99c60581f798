"""
Princípio da Responsabilidade Única (SRP).

Uma classe, método ou função deve ter uma e somente uma razão para mudar.
Deve ser especializada em um único assunto e possuir apenas uma
responsabilidade.

Exemplo: um repositório tem a única responsabilidade de fazer o meio de campo
entre os serviços e o banco de dados, assim como um método deve apenas
calcular o salário de um funcionário.
"""

from dataclasses import dataclass

from config.settings import (
    DEFAULT_EMPLOYEE_NAME,
    DEFAULT_VALUE_HOUR,
    DEFAULT_DISCOUNTS,
    SRP_REGISTRY_NUMBER,
    SRP_TOTAL_HOURS,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Employee:
    """
    Representa o empregado, com os dados básicos necessários para o cálculo.

    Attributes:
        name (str): Nome do empregado
        registry_number (int): Número de registro (matrícula)
        value_hour (float): Valor pago por hora trabalhada
    """
    name: str
    registry_number: int
    value_hour: float


class Repository:
    """Responsável por lidar com persistência e recuperação de dados (simulado)."""

    def get_employer(self, registry_number: int) -> Employee:
        logger.debug("Buscando empregado %s", registry_number)
        return Employee(DEFAULT_EMPLOYEE_NAME, registry_number, DEFAULT_VALUE_HOUR)

    def get_employer_discounts(self, registry_number: int) -> float:
        logger.debug("Buscando descontos do empregado %s", registry_number)
        return DEFAULT_DISCOUNTS


class EmployerService:
    """
    Serviço de cálculo de remuneração.

    Mostra lado a lado um método que acumula responsabilidades e a versão
    que separa a busca de dados do cálculo.
    """

    def __init__(self, repository: Repository):
        self.repository = repository

    def calculate_income_wrong(self, registry_number: int, total_hours: int) -> float:
        """
        Exemplo errado: viola a responsabilidade única.

        1. Busca o empregado no banco de dados (responsabilidade do repositório)
        2. Busca os descontos (responsabilidade do repositório)
        3. Calcula o valor final (responsabilidade do cálculo)
        """
        employer = self.repository.get_employer(registry_number)
        discounts = self.repository.get_employer_discounts(employer.registry_number)
        return employer.value_hour * total_hours - discounts

    def calculate_income_correct(self, value_hour: float, total_hours: int, discounts: float) -> float:
        """Exemplo correto: apenas calcula o valor a partir dos parâmetros."""
        return value_hour * total_hours - discounts

    def calculate_employer_income(self, registry_number: int, total_hours: int) -> float:
        """Busca os dados necessários e delega o cálculo a calculate_income_correct."""
        employer = self.repository.get_employer(registry_number)
        discounts = self.repository.get_employer_discounts(registry_number)
        return self.calculate_income_correct(employer.value_hour, total_hours, discounts)


# =====================================================================
# Classe "Deus": responsabilidades desconexas em um só lugar
# =====================================================================

class ClassGod:
    """Viola o SRP ao acumular persistência, cálculo, e-mail, arquivos e mensageria."""

    def save_employer(self, employee: Employee):
        print(f"Salvando empregado {employee.name}")

    def calculate_salary(self) -> float:
        return 0.0

    def get_employer_details(self):
        return None

    def calculate_discount(self) -> float:
        return 0.0

    def send_mail(self, to: str, subject: str):
        print(f"Enviando e-mail para {to}: {subject}")

    def print_file(self, filename: str):
        print(f"Imprimindo arquivo {filename}")

    def publish_rabbitmq_message(self, message: str):
        print(f"Publicando mensagem no RabbitMQ: {message}")


# =====================================================================
# Responsabilidades distribuídas em classes distintas
# =====================================================================

class EmployerManagementService:
    """Apenas regras de negócio do empregado."""

    def save_employer(self, employee: Employee):
        print(f"Salvando empregado {employee.name}")

    def calculate_salary(self) -> float:
        return 0.0

    def get_employer_details(self):
        return None

    def calculate_discount(self) -> float:
        return 0.0


class FileService:
    def print_file(self, filename: str):
        print(f"Imprimindo arquivo {filename}")


class MailService:
    def send_mail(self, to: str, subject: str):
        print(f"Enviando e-mail para {to}: {subject}")


class RabbitMQService:
    def publish_message(self, message: str):
        print(f"Publicando mensagem no RabbitMQ: {message}")


def main():
    """Demonstra o cálculo de remuneração antes e depois de aplicar o SRP."""
    service = EmployerService(Repository())

    wrong = service.calculate_income_wrong(SRP_REGISTRY_NUMBER, SRP_TOTAL_HOURS)
    print(f"Cálculo com responsabilidades misturadas: {wrong}")

    correct = service.calculate_employer_income(SRP_REGISTRY_NUMBER, SRP_TOTAL_HOURS)
    print(f"Cálculo com responsabilidade única: {correct}")

    employee = Repository().get_employer(SRP_REGISTRY_NUMBER)
    EmployerManagementService().save_employer(employee)
    FileService().print_file("holerite.pdf")
    MailService().send_mail("fulano@empresa.com", "Holerite disponível")
    RabbitMQService().publish_message("holerite-gerado")


if __name__ == "__main__":
    main()
