"""
Sheet API

Backend JSON para um aplicativo de cadastro de tabela única, usando
a primeira aba de uma planilha do Google Sheets como armazenamento.

Este módulo expõe as principais classes para uso externo:

- Config: Configuração do serviço
- RecordTable: Leitura e escrita de registros na planilha
- create_app: Fábrica da aplicação Flask
"""

from .__version__ import __version__
from .app import create_app
from .config import Config
from .tables import RecordTable

__all__ = [
    '__version__',
    'Config',
    'RecordTable',
    'create_app',
]
