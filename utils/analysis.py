"""
Análise das demonstrações: tabela de remunerações (OCP) e matriz de
capacidades das aves (ISP).
"""

import os
import pandas as pd
import matplotlib
matplotlib.use('Agg')  # Sem interface gráfica
import matplotlib.pyplot as plt

from config.settings import get_settings
from principles.open_closed import IncomeCorrect, demo_contracts
from principles.interface_segregation import BIRDS, CAPABILITIES, capabilities_of
from utils.exporter import export_dataframe_to_csv, export_transcript_to_csv
from utils.logging_config import get_logger

logger = get_logger(__name__)


def compensation_table(contracts=None):
    """
    Monta a tabela de remuneração por tipo de contrato.

    Args:
        contracts: Lista de tuplas (rótulo, Compensation). Usa os contratos
            da demonstração OCP se não informada.

    Returns:
        pd.DataFrame: Colunas "tipo" e "remuneracao"
    """
    if contracts is None:
        contracts = demo_contracts()

    income = IncomeCorrect()
    rows = [{"tipo": label, "remuneracao": income.calculate(contract)}
            for label, contract in contracts]
    return pd.DataFrame(rows, columns=["tipo", "remuneracao"])


def summarize_compensation(table):
    """Estatísticas básicas de uma tabela de remuneração."""
    if table.empty:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "total": 0.0}

    values = table["remuneracao"]
    return {
        "min": float(values.min()),
        "max": float(values.max()),
        "avg": float(values.mean()),
        "total": float(values.sum())
    }


def capability_matrix(birds=None):
    """
    Monta a matriz aves x capacidades.

    Returns:
        pd.DataFrame: Índice com o nome de cada ave e uma coluna booleana
        por capacidade (fly, swim, walk)
    """
    if birds is None:
        birds = BIRDS

    data = {}
    for bird in birds:
        declared = capabilities_of(bird)
        data[bird.__name__] = {name: name in declared for name in CAPABILITIES}

    matrix = pd.DataFrame.from_dict(data, orient="index", columns=list(CAPABILITIES))
    matrix.index.name = "ave"
    return matrix


def generate_compensation_chart(table, chart_path):
    """Gera um gráfico de barras das remunerações e o salva como imagem."""
    summary = summarize_compensation(table)

    plt.figure(figsize=(8, 5))
    plt.bar(table["tipo"], table["remuneracao"], color='#1f77b4')
    plt.axhline(y=summary["avg"], color='r', linestyle='-', label=f'Média: {summary["avg"]:.2f}')
    plt.xlabel('Tipo de contrato')
    plt.ylabel('Remuneração')
    plt.title('Remuneração por Tipo de Contrato')
    plt.legend()
    plt.tight_layout()

    plt.savefig(chart_path)
    plt.close()

    return chart_path


def generate_report(output_dir, transcript):
    """
    Gera os artefatos do relatório em um diretório.

    Args:
        output_dir: Diretório de saída (criado se não existir)
        transcript: Dicionário {princípio: [linhas impressas]}

    Returns:
        dict: Caminho de cada artefato gerado
    """
    os.makedirs(output_dir, exist_ok=True)
    files = get_settings().get_report_config()

    table = compensation_table()
    paths = {
        "transcript": export_transcript_to_csv(
            transcript, os.path.join(output_dir, files["transcript_file"])),
        "compensation": export_dataframe_to_csv(
            table, os.path.join(output_dir, files["compensation_file"])),
        "capabilities": export_dataframe_to_csv(
            capability_matrix(), os.path.join(output_dir, files["capabilities_file"])),
        "chart": generate_compensation_chart(
            table, os.path.join(output_dir, files["chart_file"])),
    }

    for name, path in paths.items():
        logger.info("Relatório %s gerado em %s", name, path)

    return paths
