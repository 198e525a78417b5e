import logging
import threading
from collections.abc import Callable
from typing import Any

from gspread import Client, Worksheet

from ..config import Config
from ..gateway import (
    connect_service_account,
    get_all_values,
    get_first_worksheet,
    get_header,
    get_last_row,
    get_spreadsheet,
)
from .dispatcher import apply_action
from .record_schema import ERROR, SUCCESS
from .serializer import serialize_table

logger = logging.getLogger(__name__)


class RecordTable:
    """
    Expõe a primeira aba da planilha configurada como uma tabela de registros.

    Leituras não usam lock. Escritas são serializadas por um lock de exclusão
    mútua, liberado sempre antes da resposta ser montada.
    """

    def __init__(
        self,
        config: Config,
        lock: "threading.Lock | None" = None,
        client_factory: Callable[[str], Client] = connect_service_account,
    ):
        """
        Args:
            config: Configuração do serviço
            lock: Lock compartilhado pelas escritas (um novo é criado se omitido)
            client_factory: Função que cria o cliente gspread a partir do arquivo de conta de serviço
        """
        self.config = config
        self.lock = lock or threading.Lock()
        self._client_factory = client_factory
        self._client: Client | None = None

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = self._client_factory(self.config.service_account_file)
        return self._client

    def open_table(self) -> Worksheet | None:
        """
        Abre a primeira aba da planilha configurada.

        Returns:
            Worksheet | None: A aba, ou None se a planilha não puder ser aberta.
        """
        try:
            spreadsheet = get_spreadsheet(self._get_client(), self.config.spreadsheet_id)
            worksheet = get_first_worksheet(spreadsheet)
        except Exception as e:
            logger.error(
                "Não foi possível abrir a planilha '%s': %s",
                self.config.spreadsheet_id,
                str(e),
                exc_info=True,
            )
            return None

        logger.info("Aba aberta: %s", worksheet.title)
        return worksheet

    def snapshot(self, worksheet: Worksheet) -> dict[str, Any]:
        """Lê a aba inteira e devolve {headers, rows, uniqueValues}."""
        values = get_all_values(worksheet)
        return serialize_table(values, self.config.unique_value_columns).to_dict()

    def read(self) -> dict[str, Any]:
        """
        Lê a tabela completa.

        Returns:
            dict: {status: SUCCESS, headers, rows, uniqueValues} ou {status: ERROR, message}.
        """
        worksheet = self.open_table()
        if worksheet is None:
            return {"status": ERROR, "message": "Could not open spreadsheet"}

        try:
            return {"status": SUCCESS, **self.snapshot(worksheet)}
        except Exception as e:
            logger.error("Erro ao ler a aba '%s': %s", worksheet.title, str(e), exc_info=True)
            return {"status": ERROR, "message": f"Error reading table: {e}"}

    def write(self, action: str | None, params: dict[str, Any]) -> dict[str, Any]:
        """
        Aplica uma ação de escrita sob o lock e devolve o resultado.

        Em caso de sucesso, a resposta inclui uma leitura atualizada da tabela.

        Args:
            action (str | None): create, update, delete ou duplicate.
            params (dict[str, Any]): Valores por coluna e/ou rowIndex.

        Returns:
            dict: {status, message} e, em caso de sucesso, headers, rows e uniqueValues.
        """
        timeout = self.config.lock_timeout_seconds
        if not self.lock.acquire(timeout=timeout):
            logger.error("Lock de escrita não obtido após %.1fs (ação: %s).", timeout, action)
            return {
                "status": ERROR,
                "message": f"Could not acquire lock: timed out after {timeout:g} seconds",
            }

        worksheet: Worksheet | None = None
        try:
            worksheet = self.open_table()
            if worksheet is None:
                return {"status": ERROR, "message": "Could not open spreadsheet"}

            header = get_header(worksheet)
            last_row = get_last_row(worksheet)
            result = apply_action(worksheet, header, last_row, action, params)

        except Exception as e:
            logger.error("Erro durante a ação '%s': %s", action, str(e), exc_info=True)
            return {"status": ERROR, "message": f"Error during {action}: {e}"}

        finally:
            self.lock.release()

        response: dict[str, Any] = result.to_dict()
        if not result.ok:
            return response

        try:
            response.update(self.snapshot(worksheet))
        except Exception as e:
            logger.error("Erro ao reler a aba após '%s': %s", action, str(e), exc_info=True)
            return {"status": ERROR, "message": f"Error reading table after {action}: {e}"}

        return response
