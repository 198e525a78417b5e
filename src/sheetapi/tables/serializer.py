"""
Conversão da aba (cabeçalho + linhas) para a estrutura devolvida em JSON.
"""
import logging
from collections.abc import Iterable

from ..gateway import get_header_mapping
from .record_schema import FIRST_DATA_ROW, TableSnapshot, build_record

logger = logging.getLogger(__name__)


def compute_unique_values(
        header: list[str],
        data_rows: list[list[str]],
        columns: Iterable[str],
) -> dict[str, list[str]]:
    """
    Calcula, para cada coluna configurada, os valores distintos não vazios em ordem crescente.

    Colunas ausentes do cabeçalho, ou uma tabela sem linhas de dados, resultam em lista vazia.

    Args:
        header (list[str]): Cabeçalho da aba.
        data_rows (list[list[str]]): Linhas de dados (sem o cabeçalho).
        columns (Iterable[str]): Colunas que possuem índice de valores únicos.

    Returns:
        dict[str, list[str]]: Mapeamento {coluna: valores ordenados}.
    """
    mapping = get_header_mapping(header)
    unique_values: dict[str, list[str]] = {}

    for column_name in columns:
        column_index = mapping.get(column_name)
        if column_index is None or not data_rows:
            unique_values[column_name] = []
            continue

        values = {
            row[column_index]
            for row in data_rows
            if column_index < len(row) and row[column_index]
        }
        unique_values[column_name] = sorted(values)

    return unique_values


def serialize_table(values: list[list[str]], unique_value_columns: Iterable[str]) -> TableSnapshot:
    """
    Converte os valores brutos da aba em um TableSnapshot.

    Args:
        values (list[list[str]]): Todas as linhas da aba, incluindo o cabeçalho.
        unique_value_columns (Iterable[str]): Colunas que possuem índice de valores únicos.

    Returns:
        TableSnapshot: Cabeçalho, registros e valores únicos.
    """
    if len(values) < FIRST_DATA_ROW:
        logger.debug("Tabela sem linhas de dados (%d linhas no total).", len(values))
        return TableSnapshot(
            headers=[],
            rows=[],
            unique_values={column_name: [] for column_name in unique_value_columns},
        )

    header = list(values[0])
    data_rows = values[1:]

    rows = [
        build_record(header, row, row_index)
        for row_index, row in enumerate(data_rows, start=FIRST_DATA_ROW)
    ]

    return TableSnapshot(
        headers=header,
        rows=rows,
        unique_values=compute_unique_values(header, data_rows, unique_value_columns),
    )
