from dataclasses import dataclass, field
from typing import Any


# Status devolvidos no corpo de todas as respostas
SUCCESS = "SUCCESS"
ERROR = "ERROR"

# Chave do número físico da linha em cada registro
ROW_INDEX_KEY = "rowIndex"

# Primeira linha de dados (a linha 1 é o cabeçalho)
FIRST_DATA_ROW = 2

Record = dict[str, Any]


def build_record(header: list[str], row: list[str], row_index: int) -> Record:
    """
    Monta um registro {coluna: valor} a partir de uma linha da aba.

    Células ausentes no final da linha viram string vazia. O rowIndex é
    atribuído por último e prevalece sobre uma coluna homônima.

    Args:
        header (list[str]): Cabeçalho da aba.
        row (list[str]): Valores de exibição da linha.
        row_index (int): Número físico da linha (1-based, >= 2).

    Returns:
        Record: Registro com uma chave por coluna e o rowIndex.
    """
    record: Record = {}
    for position, column_name in enumerate(header):
        record[column_name] = row[position] if position < len(row) else ""
    record[ROW_INDEX_KEY] = row_index
    return record


def _cell_value(value: Any) -> str:
    return "" if value is None else str(value)


def build_row(header: list[str], params: dict[str, Any]) -> list[str]:
    """Converte parâmetros {coluna: valor} em uma linha alinhada ao cabeçalho; ausentes e nulos viram ""."""
    return [_cell_value(params.get(column_name)) for column_name in header]


@dataclass(frozen=True)
class ActionResult:
    """
    Resultado de uma ação de escrita.

    Attributes:
        status (str): SUCCESS ou ERROR.
        message (str): Mensagem legível descrevendo o resultado.
    """
    status: str
    message: str

    @classmethod
    def success(cls, message: str) -> "ActionResult":
        return cls(SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> "ActionResult":
        return cls(ERROR, message)

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status, "message": self.message}


@dataclass
class TableSnapshot:
    """
    Visão completa da tabela em um instante, pronta para virar JSON.

    Attributes:
        headers (list[str]): Cabeçalho da aba (vazio se não houver linhas de dados).
        rows (list[Record]): Um registro por linha de dados.
        unique_values (dict[str, list[str]]): Valores distintos e ordenados por coluna configurada.
    """
    headers: list[str] = field(default_factory=list)
    rows: list[Record] = field(default_factory=list)
    unique_values: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "headers": self.headers,
            "rows": self.rows,
            "uniqueValues": self.unique_values,
        }
