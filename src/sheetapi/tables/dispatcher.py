"""
Despacho das ações de escrita (create, update, delete, duplicate) para operações em linhas.

O chamador é responsável pelo lock e por converter exceções da API em resultados de erro.
"""
import logging
from collections.abc import Callable
from typing import Any

from gspread import Worksheet

from ..gateway import append_row, delete_row, get_row, update_row
from .record_schema import FIRST_DATA_ROW, ROW_INDEX_KEY, ActionResult, build_row

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"
DELETE = "delete"
DUPLICATE = "duplicate"

ACTIONS = (CREATE, UPDATE, DELETE, DUPLICATE)


def parse_row_index(raw: Any) -> int | None:
    """
    Converte o parâmetro rowIndex em inteiro.

    Args:
        raw (Any): Valor recebido (string da requisição ou inteiro vindo de JSON).

    Returns:
        int | None: O número da linha, ou None se não for um inteiro válido.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _valid_row_index(params: dict[str, Any], last_row: int) -> int | None:
    row_index = parse_row_index(params.get(ROW_INDEX_KEY))
    if row_index is None or not FIRST_DATA_ROW <= row_index <= last_row:
        return None
    return row_index


def _create(worksheet: Worksheet, header: list[str], last_row: int, params: dict[str, Any]) -> ActionResult:
    append_row(worksheet, build_row(header, params), last_row)
    logger.info("Registro criado na aba '%s' (linha %d).", worksheet.title, last_row + 1)
    return ActionResult.success("Record created")


def _update(worksheet: Worksheet, header: list[str], last_row: int, params: dict[str, Any]) -> ActionResult:
    row_index = _valid_row_index(params, last_row)
    if row_index is None:
        logger.warning("rowIndex inválido para update: %r (última linha: %d)", params.get(ROW_INDEX_KEY), last_row)
        return ActionResult.error("Invalid row index for update")

    update_row(worksheet, row_index, build_row(header, params))
    logger.info("Registro da linha %d atualizado na aba '%s'.", row_index, worksheet.title)
    return ActionResult.success(f"Record at row {row_index} updated")


def _delete(worksheet: Worksheet, header: list[str], last_row: int, params: dict[str, Any]) -> ActionResult:
    row_index = _valid_row_index(params, last_row)
    if row_index is None:
        logger.warning("rowIndex inválido para delete: %r (última linha: %d)", params.get(ROW_INDEX_KEY), last_row)
        return ActionResult.error("Invalid row index for delete")

    delete_row(worksheet, row_index)
    logger.info("Registro da linha %d removido da aba '%s'.", row_index, worksheet.title)
    return ActionResult.success(f"Record at row {row_index} deleted")


def _duplicate(worksheet: Worksheet, header: list[str], last_row: int, params: dict[str, Any]) -> ActionResult:
    row_index = _valid_row_index(params, last_row)
    if row_index is None:
        logger.warning("rowIndex inválido para duplicate: %r (última linha: %d)", params.get(ROW_INDEX_KEY), last_row)
        return ActionResult.error("Invalid row index for duplicate")

    row = get_row(worksheet, row_index)
    width = max(len(header), len(row))
    append_row(worksheet, row + [""] * (width - len(row)), last_row)
    logger.info(
        "Registro da linha %d duplicado na aba '%s' (nova linha %d).",
        row_index,
        worksheet.title,
        last_row + 1,
    )
    return ActionResult.success(f"Record at row {row_index} duplicated")


_HANDLERS: dict[str, Callable[[Worksheet, list[str], int, dict[str, Any]], ActionResult]] = {
    CREATE: _create,
    UPDATE: _update,
    DELETE: _delete,
    DUPLICATE: _duplicate,
}


def apply_action(
        worksheet: Worksheet,
        header: list[str],
        last_row: int,
        action: str | None,
        params: dict[str, Any],
) -> ActionResult:
    """
    Aplica uma ação de escrita à aba.

    Erros de validação (ação desconhecida, rowIndex ausente ou fora do intervalo
    [2, last_row]) são devolvidos como ActionResult de erro sem tocar na aba.
    Exceções da API do Sheets são propagadas.

    Args:
        worksheet (Worksheet): Aba alvo.
        header (list[str]): Cabeçalho atual da aba.
        last_row (int): Última linha com conteúdo (1-based).
        action (str | None): Nome da ação.
        params (dict[str, Any]): Valores por coluna e/ou rowIndex.

    Returns:
        ActionResult: SUCCESS ou ERROR com mensagem.
    """
    handler = _HANDLERS.get(action) if isinstance(action, str) else None
    if handler is None:
        logger.warning("Ação inválida recebida: %r", action)
        return ActionResult.error(f"Invalid action: {action}")

    return handler(worksheet, header, last_row, params)
