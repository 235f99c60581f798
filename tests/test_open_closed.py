"""Testes da demonstração do princípio aberto-fechado."""
import inspect

import pytest

from principles import open_closed
from principles.open_closed import (
    ContractCLT,
    Trainee,
    Income,
    Compensation,
    CLTContract,
    TraineeContract,
    ContractorPJ,
    IncomeCorrect,
)


class TestIncome:
    """Testes da versão que verifica o tipo em tempo de execução."""

    def test_calculate_clt(self):
        assert Income().calculate(ContractCLT(5000.0)) == 5000.0

    def test_calculate_trainee(self):
        assert Income().calculate(Trainee(1500.0)) == 1500.0

    def test_unknown_type_needs_modification(self):
        # PJ não é reconhecido sem alterar Income
        assert Income().calculate(ContractorPJ(100.0, 160)) == 0.0


class TestIncomeCorrect:
    """Testes da versão baseada em Compensation."""

    @pytest.mark.parametrize("contract,expected", [
        (CLTContract(5000.0), 5000.0),
        (TraineeContract(1500.0), 1500.0),
        (ContractorPJ(100.0, 160), 16000.0),
    ])
    def test_calculate(self, contract, expected):
        assert IncomeCorrect().calculate(contract) == expected

    def test_new_variant_needs_no_change(self):
        class Intern(Compensation):
            def compensation(self):
                return 800.0

        assert IncomeCorrect().calculate(Intern()) == 800.0

    def test_compensation_is_abstract(self):
        with pytest.raises(TypeError):
            Compensation()

    def test_calculate_does_not_inspect_types(self):
        source = inspect.getsource(IncomeCorrect)

        assert "isinstance" not in source
        assert "type(" not in source


class TestMain:
    def test_main_output(self, printed_lines):
        open_closed.main()

        assert printed_lines() == ["CLT: 5000.0", "Trainee: 1500.0", "PJ: 16000.0"]
