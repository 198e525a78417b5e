"""
Exemplo básico de uso do Sheet API sem o servidor HTTP.

Este script lê a tabela, cria um registro, duplica e remove a cópia,
usando diretamente a RecordTable.
"""

import json
import logging

from dotenv import load_dotenv

from sheetapi import Config, RecordTable

# Carrega variáveis de ambiente do arquivo .env
load_dotenv()


def show(title: str, response: dict) -> None:
    """Imprime o status e a mensagem de uma resposta."""
    print(f"{title}: {response['status']} {response.get('message', '')}")


def main():
    """Função principal."""
    logging.basicConfig(level=logging.INFO)

    config = Config()
    table = RecordTable(config)

    print("=" * 60)
    print(f"📊 Planilha: {config.spreadsheet_id}")
    print(f"🔎 Colunas com valores únicos: {', '.join(config.unique_value_columns) or '-'}")
    print("=" * 60)

    response = table.read()
    show("Leitura", response)
    if response["status"] != "SUCCESS":
        return

    headers = response["headers"]
    print(f"Colunas: {headers}")
    print(f"Registros: {len(response['rows'])}")

    # Cria um registro preenchendo apenas a primeira coluna
    response = table.write("create", {headers[0]: "Exemplo"} if headers else {})
    show("Create", response)
    if response["status"] != "SUCCESS":
        return

    new_row = response["rows"][-1]["rowIndex"]

    response = table.write("duplicate", {"rowIndex": str(new_row)})
    show("Duplicate", response)

    # Remove a cópia e depois o original (a cópia está abaixo, então o índice do original não muda)
    show("Delete", table.write("delete", {"rowIndex": str(new_row + 1)}))
    response = table.write("delete", {"rowIndex": str(new_row)})
    show("Delete", response)

    print(json.dumps(response.get("uniqueValues", {}), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
