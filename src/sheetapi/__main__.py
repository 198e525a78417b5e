"""Ponto de entrada para execução do módulo como script."""

import logging
import sys

from .app import create_app
from .config import Config


def main():
    """Função principal para rodar o servidor HTTP."""
    try:
        config = Config()
    except ValueError as e:
        print(f"Erro de configuração: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = create_app(config)

    print(f"Planilha: {config.spreadsheet_id}")
    print(f"Servidor em http://{config.host}:{config.port}")

    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
