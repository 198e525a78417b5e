"""
Tabela de registros sobre a primeira aba da planilha.

Módulos:
    - record_schema: Registro, resultado de ação e snapshot da tabela
    - serializer: Conversão da aba para JSON e índice de valores únicos
    - dispatcher: Ações de escrita (create, update, delete, duplicate)
    - record_table: Leitura e escrita com lock
"""

from .record_schema import ERROR, SUCCESS, ActionResult, TableSnapshot
from .record_table import RecordTable

__all__ = [
    "ERROR",
    "SUCCESS",
    "ActionResult",
    "TableSnapshot",
    "RecordTable",
]
