"""
Aplicação Flask com os dois pontos de entrada da API:

- GET /   -> leitura completa da tabela
- POST /  -> create | update | delete | duplicate

Todas as respostas são HTTP 200; o sucesso ou a falha vai no campo "status" do corpo.
"""
import logging
from typing import Any

from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import Config
from .tables import RecordTable

logger = logging.getLogger(__name__)


def _request_params() -> dict[str, Any]:
    """Junta query string, formulário e corpo JSON (nessa ordem de prioridade crescente)."""
    params: dict[str, Any] = request.values.to_dict()
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        params.update(payload)
    return params


def create_app(config: Config | None = None, table: RecordTable | None = None) -> Flask:
    """
    Cria a aplicação Flask.

    Args:
        config: Configuração do serviço (lida do ambiente se omitida e sem table)
        table: Tabela de registros já construída (usada em testes)

    Returns:
        Flask: A aplicação configurada.
    """
    if table is None:
        table = RecordTable(config or Config())

    app = Flask(__name__)
    CORS(app)
    app.json.sort_keys = False  # registros seguem a ordem do cabeçalho
    app.extensions["record_table"] = table

    @app.route("/", methods=["GET"])
    def read_records():
        """GET / -> {status, headers, rows, uniqueValues} ou {status, message}."""
        return jsonify(table.read())

    @app.route("/", methods=["POST"])
    def write_records():
        """POST / com action e parâmetros por coluna e/ou rowIndex."""
        params = _request_params()
        action = params.pop("action", None)
        logger.debug("Requisição de escrita recebida: action=%r params=%s", action, params)
        return jsonify(table.write(action, params))

    return app
