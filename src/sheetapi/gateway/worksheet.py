import logging

from gspread import Spreadsheet, Worksheet, WorksheetNotFound

logger = logging.getLogger(__name__)


def get_first_worksheet(spreadsheet: Spreadsheet) -> Worksheet:
    """
    Obtém a primeira aba de uma planilha do Google Sheets.

    Args:
        spreadsheet (Spreadsheet): A planilha do Google Sheets.

    Returns:
        Worksheet: A primeira aba da planilha.

    Raises:
        WorksheetNotFound: Se a planilha não possuir nenhuma aba.
    """
    logger.debug("Obtendo a primeira aba da planilha '%s'.", spreadsheet.title)
    worksheet = spreadsheet.get_worksheet(0)

    if worksheet is None:
        logger.error("A planilha '%s' não possui abas.", spreadsheet.title)
        raise WorksheetNotFound(f"A planilha '{spreadsheet.title}' não possui abas.")

    return worksheet


def get_header(worksheet: Worksheet) -> list[str]:
    """
    Lê o cabeçalho (linha 1) de uma aba.

    Args:
        worksheet (Worksheet): A aba do Google Sheets.

    Returns:
        list[str]: Nomes das colunas, na ordem em que aparecem.
    """
    logger.debug("Lendo o cabeçalho da aba '%s'.", worksheet.title)
    return worksheet.row_values(1)


def get_header_mapping(header: list[str]) -> dict[str, int]:
    """
    Associa nomes de colunas aos seus índices (0-based).
    Em caso de nomes repetidos, vale a primeira ocorrência.

    Args:
        header (list[str]): Cabeçalho da aba.

    Returns:
        dict[str, int]: Dicionário mapeando nomes de colunas para seus índices.
    """
    mapping: dict[str, int] = {}

    for index, column_name in enumerate(header):
        mapping.setdefault(column_name, index)

    return mapping


def get_last_row(worksheet: Worksheet) -> int:
    """
    Retorna o número da última linha com conteúdo (1-based), ou 0 se a aba estiver vazia.

    A API do Sheets descarta linhas vazias no final do intervalo, então o
    tamanho de get_all_values() corresponde à última linha preenchida.

    Args:
        worksheet (Worksheet): A aba do Google Sheets.

    Returns:
        int: Número da última linha com conteúdo.
    """
    last_row = len(worksheet.get_all_values())
    logger.debug("Última linha da aba '%s': %d", worksheet.title, last_row)
    return last_row
