"""Configuração de testes pytest."""
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Adicionar src ao path para importação dos módulos
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from sheetapi.config import Config  # noqa: E402


class FakeWorksheet:
    """
    Aba em memória com o subconjunto da API do gspread usado pelo gateway.

    Linhas vazias no final são descartadas, como faz a API do Sheets.
    """

    def __init__(self, values, title="Cadastro", row_count=1000):
        self.title = title
        self.values = [list(row) for row in values]
        self.row_count = max(row_count, len(self.values))

    def _trim(self):
        while self.values and not any(self.values[-1]):
            self.values.pop()

    def get_all_values(self):
        self._trim()
        return [list(row) for row in self.values]

    def row_values(self, row):
        if row > len(self.values):
            return []
        values = list(self.values[row - 1])
        while values and values[-1] == "":
            values.pop()
        return values

    def append_row(self, values, value_input_option=None):
        # values.append: a tabela detectada a partir de A1 termina na primeira linha vazia
        position = 0
        while position < len(self.values) and any(self.values[position]):
            position += 1
        if position < len(self.values):
            self.values[position] = [str(v) for v in values]
        else:
            self.values.append([str(v) for v in values])

    def add_rows(self, rows):
        self.row_count += rows

    def update(self, range_name=None, values=None, value_input_option=None):
        row = int(range_name.split(":")[0])
        if row > self.row_count:
            raise ValueError(f"Linha {row} fora da grade ({self.row_count} linhas)")
        while len(self.values) < row:
            self.values.append([])
        self.values[row - 1] = [str(v) for v in values[0]]

    def delete_rows(self, start_index, end_index=None):
        end_index = end_index or start_index
        del self.values[start_index - 1:end_index]
        self.row_count -= end_index - start_index + 1


@pytest.fixture
def fake_worksheet():
    return FakeWorksheet([
        ["Nome", "Cidade", "Status"],
        ["Ana", "Recife", "Ativo"],
        ["Bruno", "Natal", ""],
        ["Carla", "Recife", "Inativo"],
    ])


@pytest.fixture
def config():
    return Config(
        spreadsheet_id="test_sheet_id",
        service_account_file="test_account.json",
        unique_value_columns=("Cidade", "Status"),
        lock_timeout_seconds=1.0,
    )


@pytest.fixture
def spreadsheet_for():
    """Cria um cliente falso cujo open_by_key devolve uma planilha com a aba dada."""

    def _factory(worksheet):
        spreadsheet = Mock()
        spreadsheet.title = "Planilha"
        spreadsheet.get_worksheet.return_value = worksheet
        client = Mock()
        client.open_by_key.return_value = spreadsheet
        return client

    return _factory
