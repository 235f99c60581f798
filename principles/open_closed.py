"""
Princípio Aberto-Fechado (OCP).

Objetos ou entidades devem estar abertos para extensão, mas fechados para
modificação. Ao adicionar um comportamento novo, o código existente não deve
ser alterado.

Problema: a empresa trabalha com funcionários CLT e Trainee, e o cálculo da
remuneração fica concentrado em uma única classe; cada novo tipo de
funcionário exige modificar esse código.

Solução: cada tipo de funcionário implementa uma abstração que define como
calcular sua remuneração, e novos tipos entram sem tocar no cálculo.
"""

from abc import ABC, abstractmethod

from config.settings import CLT_SALARY, TRAINEE_STIPEND, PJ_VALUE_HOUR, PJ_HOURS_WORKED
from utils.logging_config import get_logger

logger = get_logger(__name__)


# =====================================================================
# Versão que quebra o OCP
# =====================================================================

class ContractCLT:
    """Funcionário CLT (Consolidação das Leis do Trabalho)."""

    def __init__(self, salary: float = 0.0):
        self.salary = salary


class Trainee:
    """Trainee que recebe bolsa-auxílio."""

    def __init__(self, stipend: float = 0.0):
        self.stipend = stipend


class Income:
    """
    Verifica explicitamente o tipo do funcionário para calcular a remuneração.

    Cada novo tipo (por exemplo, PJ) exige mais um ramo condicional aqui.
    """

    def calculate(self, employee) -> float:
        balance = 0.0
        if isinstance(employee, ContractCLT):
            balance = employee.salary
        elif isinstance(employee, Trainee):
            balance = employee.stipend
        else:
            logger.debug("Tipo de funcionário não suportado: %s", type(employee).__name__)
        return balance


# =====================================================================
# Versão que respeita o OCP
# =====================================================================

class Compensation(ABC):
    """Comportamento de cálculo de remuneração de um tipo de funcionário."""

    @abstractmethod
    def compensation(self) -> float:
        """Retorna a remuneração do período."""
        pass


class CLTContract(Compensation):
    """Remuneração de funcionário CLT: salário fixo."""

    def __init__(self, salary: float):
        self.salary = salary

    def compensation(self) -> float:
        return self.salary


class TraineeContract(Compensation):
    """Remuneração de trainee: bolsa-auxílio fixa."""

    def __init__(self, stipend: float):
        self.stipend = stipend

    def compensation(self) -> float:
        return self.stipend


class ContractorPJ(Compensation):
    """Remuneração de prestador PJ: valor da hora vezes horas trabalhadas."""

    def __init__(self, value_hour: float, hours_worked: int):
        self.value_hour = value_hour
        self.hours_worked = hours_worked

    def compensation(self) -> float:
        return self.value_hour * self.hours_worked


class IncomeCorrect:
    """
    Calcula a remuneração dependendo apenas de Compensation.

    Qualquer nova implementação é suportada sem modificar esta classe.
    """

    def calculate(self, employee_type: Compensation) -> float:
        return employee_type.compensation()


def demo_contracts():
    """Retorna os contratos usados na demonstração, com seus rótulos."""
    return [
        ("CLT", CLTContract(CLT_SALARY)),
        ("Trainee", TraineeContract(TRAINEE_STIPEND)),
        ("PJ", ContractorPJ(PJ_VALUE_HOUR, PJ_HOURS_WORKED)),
    ]


def main():
    """Calcula a remuneração de diferentes tipos de funcionário com IncomeCorrect."""
    income = IncomeCorrect()

    for label, contract in demo_contracts():
        print(f"{label}: {income.calculate(contract)}")


if __name__ == "__main__":
    main()
