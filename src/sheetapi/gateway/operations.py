import logging

from gspread import Worksheet


logger = logging.getLogger(__name__)

# Valores enviados são interpretados como se digitados na interface do Sheets
VALUE_INPUT_OPTION = "USER_ENTERED"


def get_all_values(worksheet: Worksheet) -> list[list[str]]:
    """
    Lê todas as linhas da aba como valores de exibição (strings).

    Args:
        worksheet (Worksheet): Aba a ser lida.

    Returns:
        list[list[str]]: Linhas da aba, incluindo o cabeçalho.
    """
    logger.debug("Lendo todos os valores da aba '%s'.", worksheet.title)
    return worksheet.get_all_values()


def get_row(
        worksheet: Worksheet,
        row_number: int,
) -> list[str]:
    """
    Lê os valores de exibição de uma linha específica da aba.

    Args:
        worksheet (Worksheet): Aba onde a linha será lida.
        row_number (int): Número da linha (1-based, como no Google Sheets).

    Returns:
        list[str]: Valores da linha. Células vazias no final são omitidas pela API.
    """
    logger.debug(
        "Lendo a linha %d da aba '%s'.",
        row_number,
        worksheet.title,
    )
    return worksheet.row_values(row_number)


def append_row(
        worksheet: Worksheet,
        row: list[str],
        last_row: int,
) -> int:
    """
    Escreve uma linha logo abaixo da última linha com conteúdo.

    Não usa values.append: a detecção de tabela da API para na primeira linha
    totalmente vazia e gravaria a linha no meio dos dados. A grade é ampliada
    quando a nova linha passa do número de linhas da aba.

    Args:
        worksheet (Worksheet): Aba onde a linha será adicionada.
        row (list[str]): Lista de valores da linha.
        last_row (int): Última linha com conteúdo (1-based), lida sob o lock.

    Returns:
        int: Número da linha escrita (last_row + 1).
    """
    row_number = last_row + 1
    logger.debug(
        "Adicionando uma linha na aba '%s' (linha %d): %s",
        worksheet.title,
        row_number,
        row,
    )

    missing_rows = row_number - worksheet.row_count
    if missing_rows > 0:
        worksheet.add_rows(missing_rows)

    update_row(worksheet, row_number, row)

    logger.debug(
        "Linha %d adicionada com sucesso na aba '%s'.",
        row_number,
        worksheet.title,
    )
    return row_number


def update_row(
        worksheet: Worksheet,
        row_number: int,
        new_row: list[str],
) -> None:
    """
    Substitui o conteúdo de uma linha pelos novos valores.

    Args:
        worksheet (Worksheet): Aba onde a linha será atualizada.
        row_number (int): Número da linha (1-based).
        new_row (list[str]): Novos valores da linha, alinhados ao cabeçalho.
    """
    logger.debug(
        "Atualizando a linha %d da aba '%s' para: %s",
        row_number,
        worksheet.title,
        new_row,
    )

    cell_range = f"{row_number}:{row_number}"
    worksheet.update(
        range_name=cell_range,
        values=[new_row],
        value_input_option=VALUE_INPUT_OPTION,
    )

    logger.debug(
        "Linha %d atualizada com sucesso na aba '%s'.",
        row_number,
        worksheet.title,
    )


def delete_row(
        worksheet: Worksheet,
        row_number: int,
) -> None:
    """
    Remove fisicamente uma linha da aba.

    As linhas seguintes sobem uma posição, então seus números mudam.

    Args:
        worksheet (Worksheet): Aba onde a linha será removida.
        row_number (int): Número da linha (1-based).
    """
    logger.debug(
        "Removendo a linha %d da aba '%s'.",
        row_number,
        worksheet.title,
    )

    worksheet.delete_rows(row_number)

    logger.debug(
        "Linha %d removida com sucesso na aba '%s'.",
        row_number,
        worksheet.title,
    )
