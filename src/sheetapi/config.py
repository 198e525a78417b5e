from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Carrega as variáveis de ambiente do arquivo .env
load_dotenv()


def _parse_columns(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(column.strip() for column in raw.split(",") if column.strip())


@dataclass(frozen=True)
class Config:
    """
    Configurações do serviço, obtidas de variáveis de ambiente quando não informadas.

    Attributes:
        spreadsheet_id (str | None): ID da planilha, obtido da variável de ambiente SPREADSHEET_ID.
        service_account_file (str | None): Caminho para o arquivo de conta de serviço, obtido de SERVICE_ACCOUNT_FILE.
        unique_value_columns (tuple[str, ...] | str | None): Colunas com índice de valores únicos (UNIQUE_VALUE_COLUMNS, separadas por vírgula; uma string direta é separada da mesma forma).
        lock_timeout_seconds (float | None): Tempo máximo de espera pelo lock de escrita (LOCK_TIMEOUT_SECONDS, padrão 30).
        host (str | None): Endereço do servidor HTTP (HOST, padrão 0.0.0.0).
        port (int | None): Porta do servidor HTTP (PORT, padrão 5000).
        log_level (str | None): Nível de log (LOG_LEVEL, padrão INFO).
    """
    spreadsheet_id: str | None = None
    service_account_file: str | None = None
    unique_value_columns: tuple[str, ...] | None = None
    lock_timeout_seconds: float | None = None
    host: str | None = None
    port: int | None = None
    log_level: str | None = None

    def __post_init__(self):
        if self.spreadsheet_id is None:
            object.__setattr__(self, 'spreadsheet_id', os.getenv('SPREADSHEET_ID'))
        if self.service_account_file is None:
            object.__setattr__(self, 'service_account_file', os.getenv('SERVICE_ACCOUNT_FILE'))
        if self.unique_value_columns is None:
            object.__setattr__(
                self, 'unique_value_columns', _parse_columns(os.getenv('UNIQUE_VALUE_COLUMNS'))
            )
        elif isinstance(self.unique_value_columns, str):
            object.__setattr__(
                self, 'unique_value_columns', _parse_columns(self.unique_value_columns)
            )
        else:
            object.__setattr__(self, 'unique_value_columns', tuple(self.unique_value_columns))
        if self.lock_timeout_seconds is None:
            raw_timeout = os.getenv('LOCK_TIMEOUT_SECONDS', '30')
            try:
                object.__setattr__(self, 'lock_timeout_seconds', float(raw_timeout))
            except ValueError:
                raise ValueError(
                    f"A variável de ambiente 'LOCK_TIMEOUT_SECONDS' deve ser numérica: '{raw_timeout}'."
                ) from None
        if self.host is None:
            object.__setattr__(self, 'host', os.getenv('HOST', '0.0.0.0'))
        if self.port is None:
            raw_port = os.getenv('PORT', '5000')
            try:
                object.__setattr__(self, 'port', int(raw_port))
            except ValueError:
                raise ValueError(
                    f"A variável de ambiente 'PORT' deve ser um inteiro: '{raw_port}'."
                ) from None
        if self.log_level is None:
            object.__setattr__(self, 'log_level', os.getenv('LOG_LEVEL', 'INFO').upper())

        if not self.spreadsheet_id:
            raise ValueError("A variável de ambiente 'SPREADSHEET_ID' é obrigatória.")
        if not self.service_account_file:
            raise ValueError("A variável de ambiente 'SERVICE_ACCOUNT_FILE' é obrigatória.")
        if self.lock_timeout_seconds <= 0:
            raise ValueError("A variável de ambiente 'LOCK_TIMEOUT_SECONDS' deve ser maior que zero.")
