"""Configuração de logging do remessa_cnab (usada pela CLI e pelo app)."""

import json
import logging
import sys
from datetime import datetime, timezone

FORMATO_PADRAO = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """Uma linha JSON por registro de log."""

    def format(self, record: logging.LogRecord) -> str:
        dados = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            dados["exception"] = self.formatException(record.exc_info)
        return json.dumps(dados, ensure_ascii=False)


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """
    Troca os handlers do logger raiz por um único handler em stderr.

    ``format_type`` é "standard" (texto) ou "json".
    """
    nivel = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(FORMATO_PADRAO, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    raiz = logging.getLogger()
    raiz.handlers[:] = [handler]
    raiz.setLevel(nivel)
    logging.getLogger("remessa_cnab").setLevel(nivel)

    # Werkzeug loga cada requisição em INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
