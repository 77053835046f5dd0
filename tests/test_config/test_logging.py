"""Testes do logging JSON com os eventos emitidos pelo serviço de reservas."""

from __future__ import annotations

import io
import json
import logging

import pytest

from app.domain.booking import BookingRequest
from app.infra.stores import MemoryBookingStore
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.services.availability_resolver import ResolverOptions, resolve
from app.services.booking_service import BookingService, BookingServiceConfig
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
)
from tests.fakes.fake_calendar_service import FakeCalendarService, make_event

DAY = "2026-03-10"


@pytest.fixture
def json_records():
    """Configura o logging do serviço e devolve os registros emitidos."""
    configure_logging(
        level="DEBUG",
        service_name="seminar_booking",
        correlation_id_getter=get_correlation_id,
    )
    stream = io.StringIO()
    logging.getLogger().handlers[0].setStream(stream)

    def _read() -> list[dict[str, object]]:
        return [json.loads(line) for line in stream.getvalue().splitlines() if line]

    return _read


def _by_message(records: list[dict[str, object]], message: str) -> dict[str, object]:
    return next(record for record in records if record["message"] == message)


class TestConfigureLogging:
    """Nível e handler do root logger."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("info", logging.INFO), ("DEBUG", logging.DEBUG), ("Warning", logging.WARNING)],
    )
    def test_level_is_case_insensitive(self, level: str, expected: int) -> None:
        configure_logging(level=level)

        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_repeated_configuration_keeps_single_handler(self) -> None:
        configure_logging()
        configure_logging(level="DEBUG")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in handlers[0].filters)

    def test_noisy_library_loggers_are_quieted(self) -> None:
        configure_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("googleapiclient.discovery_cache").level == logging.WARNING


class TestServiceEvents:
    """Registros JSON dos eventos de domínio."""

    def test_zero_width_slot_warning_carries_request_context(self, json_records) -> None:
        at = f"{DAY}T10:00:00+09:00"
        token = set_correlation_id("req-zero")
        try:
            resolve([make_event("Z", at, at, title="予約可能")], [], ResolverOptions())
        finally:
            reset_correlation_id(token)

        record = _by_message(json_records(), "template_slot_zero_width")
        renamed = {FIELD_RENAME_MAP.get(field, field) for field in REQUIRED_LOG_FIELDS}
        assert renamed <= set(record)
        assert record["level"] == "WARNING"
        assert record["logger"] == "app.services.availability_resolver"
        assert record["correlation_id"] == "req-zero"
        assert record["service"] == "seminar_booking"
        assert record["event_id"] == "Z"

    @pytest.mark.asyncio
    async def test_booking_submitted_has_ids_but_no_guest_data(self, json_records) -> None:
        calendar = FakeCalendarService(
            [
                make_event(
                    "slot-a",
                    f"{DAY}T10:00:00+09:00",
                    f"{DAY}T11:00:00+09:00",
                    title="予約可能",
                )
            ]
        )
        service = BookingService(
            calendar=calendar,
            store=MemoryBookingStore(),
            config=BookingServiceConfig(resolver=ResolverOptions()),
        )

        record = await service.submit_booking(
            BookingRequest(
                slot_id="slot-a",
                date=DAY,
                name="Yamada Taro",
                email="taro@example.com",
            )
        )

        records = json_records()
        submitted = _by_message(records, "booking_submitted")
        assert submitted["component"] == "booking_service"
        assert submitted["result"] == "pending"
        assert submitted["booking_id"] == record.id
        assert submitted["slot_id"] == "slot-a"
        raw = json.dumps(records, ensure_ascii=False)
        assert "Yamada Taro" not in raw
        assert "taro@example.com" not in raw

    def test_explicit_correlation_id_wins_over_context(self, json_records) -> None:
        token = set_correlation_id("from-context")
        try:
            logging.getLogger("app.services.booking_service").info(
                "booking_synced",
                extra={"correlation_id": "from-extra", "booking_id": "b-1"},
            )
        finally:
            reset_correlation_id(token)

        record = _by_message(json_records(), "booking_synced")
        assert record["correlation_id"] == "from-extra"
        assert record["booking_id"] == "b-1"
