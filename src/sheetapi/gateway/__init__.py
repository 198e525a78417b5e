"""
Gateway para acesso ao Google Sheets.

Este módulo encapsula as operações de leitura e escrita na API do Google Sheets.
Cada chamada é feita uma única vez: falhas são propagadas para quem chamou.

Módulos:
    - connection: Conexão e obtenção de spreadsheets
    - worksheet: Primeira aba, cabeçalho e última linha
    - operations: Operações CRUD em linhas
"""

from .connection import connect_service_account, get_spreadsheet
from .operations import (
    append_row,
    delete_row,
    get_all_values,
    get_row,
    update_row,
)
from .worksheet import get_first_worksheet, get_header, get_header_mapping, get_last_row

__all__ = [
    "connect_service_account",
    "get_spreadsheet",
    "get_first_worksheet",
    "get_header",
    "get_header_mapping",
    "get_last_row",
    "get_all_values",
    "get_row",
    "append_row",
    "update_row",
    "delete_row",
]
