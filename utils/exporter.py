"""
Exportação da saída das demonstrações para CSV.
"""

import csv


def export_transcript_to_csv(transcript, output_filename):
    """
    Exporta as linhas impressas por cada demonstração.

    Args:
        transcript: Dicionário {princípio: [linhas]}
        output_filename: Nome do arquivo CSV de saída
    """
    with open(output_filename, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)

        writer.writerow(["Princípio", "Ordem", "Linha"])

        for principle, lines in transcript.items():
            for order, line in enumerate(lines, 1):
                writer.writerow([principle, order, line])

    return output_filename


def export_dataframe_to_csv(df, output_filename):
    """Exporta uma tabela de análise (DataFrame) para CSV."""
    df.to_csv(output_filename, encoding='utf-8')
    return output_filename
