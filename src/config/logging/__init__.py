"""Logging estruturado JSON do serviço de reservas.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="seminar_booking")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("booking_submitted", extra={"component": "booking_service"})

Todo registro sai com correlation_id, service, level, logger, message e asctime.
Nomes e emails de convidados nunca entram em `extra`.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
