"""Testes unitários para o módulo serializer."""
from sheetapi.tables.record_schema import build_record, build_row
from sheetapi.tables.serializer import compute_unique_values, serialize_table


class TestBuildRecord:
    """Testes para build_record e build_row."""

    def test_build_record_pads_missing_cells(self):
        """Células ausentes no final devem virar string vazia."""
        record = build_record(["Nome", "Cidade", "Status"], ["Ana"], 2)

        assert record == {"Nome": "Ana", "Cidade": "", "Status": "", "rowIndex": 2}

    def test_build_record_keeps_header_order(self):
        """As chaves devem seguir a ordem do cabeçalho, com rowIndex por último."""
        record = build_record(["B", "A"], ["1", "2"], 5)

        assert list(record) == ["B", "A", "rowIndex"]

    def test_build_record_row_index_wins_over_column(self):
        """Uma coluna chamada rowIndex não deve sobrescrever o número da linha."""
        record = build_record(["rowIndex", "Nome"], ["99", "Ana"], 3)

        assert record["rowIndex"] == 3

    def test_build_row_defaults_to_empty_string(self):
        """Colunas sem parâmetro devem virar string vazia."""
        row = build_row(["Nome", "Cidade", "Status"], {"Nome": "Ana", "Extra": "x"})

        assert row == ["Ana", "", ""]


    def test_build_row_null_becomes_empty_string(self):
        """Valores nulos devem virar string vazia; outros tipos, texto."""
        row = build_row(["Nome", "Cidade", "Idade"], {"Nome": "Ana", "Cidade": None, "Idade": 30})

        assert row == ["Ana", "", "30"]


class TestComputeUniqueValues:
    """Testes para compute_unique_values."""

    def test_sorted_distinct_non_empty(self):
        """Deve retornar valores distintos, não vazios e ordenados."""
        header = ["Nome", "Cidade"]
        rows = [["Ana", "Recife"], ["Bruno", ""], ["Carla", "Natal"], ["Davi", "Recife"], ["Eva"]]

        result = compute_unique_values(header, rows, ["Cidade"])

        assert result == {"Cidade": ["Natal", "Recife"]}

    def test_missing_column_yields_empty_list(self):
        """Coluna ausente do cabeçalho deve resultar em lista vazia."""
        result = compute_unique_values(["Nome"], [["Ana"]], ["Cidade"])

        assert result == {"Cidade": []}

    def test_no_data_rows_yields_empty_list(self):
        """Sem linhas de dados, todas as colunas devem ter lista vazia."""
        result = compute_unique_values(["Nome", "Cidade"], [], ["Cidade", "Nome"])

        assert result == {"Cidade": [], "Nome": []}

    def test_lexicographic_order(self):
        """A ordenação é por string, não numérica."""
        result = compute_unique_values(["N"], [["10"], ["9"], ["2"]], ["N"])

        assert result == {"N": ["10", "2", "9"]}


class TestSerializeTable:
    """Testes para serialize_table."""

    def test_serialize_table(self):
        """Deve converter cabeçalho e linhas em registros com rowIndex."""
        values = [
            ["Nome", "Cidade"],
            ["Ana", "Recife"],
            ["Bruno"],
        ]

        snapshot = serialize_table(values, ("Cidade",)).to_dict()

        assert snapshot == {
            "headers": ["Nome", "Cidade"],
            "rows": [
                {"Nome": "Ana", "Cidade": "Recife", "rowIndex": 2},
                {"Nome": "Bruno", "Cidade": "", "rowIndex": 3},
            ],
            "uniqueValues": {"Cidade": ["Recife"]},
        }

    def test_serialize_header_only_table(self):
        """Tabela só com cabeçalho deve ter headers e rows vazios."""
        snapshot = serialize_table([["Nome", "Cidade"]], ("Cidade",)).to_dict()

        assert snapshot == {"headers": [], "rows": [], "uniqueValues": {"Cidade": []}}

    def test_serialize_empty_table(self):
        """Aba vazia não deve falhar."""
        snapshot = serialize_table([], ()).to_dict()

        assert snapshot == {"headers": [], "rows": [], "uniqueValues": {}}
