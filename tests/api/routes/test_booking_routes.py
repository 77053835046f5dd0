"""Testes das rotas de reserva com TestClient e dependências sobrescritas."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import get_booking_service, get_booking_store, get_calendar_service
from app.infra.script_backend import ScriptBackendClient
from app.infra.stores import MemoryBookingStore
from app.services.availability_resolver import ResolverOptions
from app.services.booking_service import BookingService, BookingServiceConfig
from tests.fakes.fake_calendar_service import FakeCalendarService, make_event
from utils.errors import CalendarUnavailableError

DAY = "2026-03-10"


def _events():
    return [
        make_event(
            "slot-a",
            f"{DAY}T10:00:00+09:00",
            f"{DAY}T11:00:00+09:00",
            title="予約可能",
        ),
        make_event(
            "slot-b",
            f"{DAY}T13:00:00+09:00",
            f"{DAY}T14:00:00+09:00",
            title="予約可能",
            description="#予約確定済み",
        ),
    ]


@pytest.fixture
def calendar() -> FakeCalendarService:
    return FakeCalendarService(_events())


@pytest.fixture
def client(calendar: FakeCalendarService) -> TestClient:
    app = create_app()
    service = BookingService(
        calendar=calendar,
        store=MemoryBookingStore(),
        config=BookingServiceConfig(resolver=ResolverOptions()),
    )
    app.dependency_overrides[get_booking_service] = lambda: service
    return TestClient(app)


def _booking_body(slot_id: str = "slot-a") -> dict[str, str]:
    return {
        "slot_id": slot_id,
        "date": DAY,
        "name": "Yamada Taro",
        "email": "taro@example.com",
        "note": "",
    }


class TestSlotRoutes:
    """GET /api/slots."""

    def test_lists_slots_of_day(self, client: TestClient) -> None:
        response = client.get("/api/slots", params={"date": DAY})

        assert response.status_code == 200
        payload = response.json()
        assert [(slot["id"], slot["booked"]) for slot in payload] == [
            ("slot-a", False),
            ("slot-b", True),
        ]
        assert payload[0]["time_label"] == "10:00 - 11:00"

    def test_invalid_date_is_rejected(self, client: TestClient) -> None:
        response = client.get("/api/slots", params={"date": "10-03-2026"})

        assert response.status_code == 422

    def test_malformed_calendar_event_returns_422_with_event_id(self) -> None:
        app = create_app()
        broken = FakeCalendarService([make_event("bad-1", "???", "???", title="予約可能")])
        app.dependency_overrides[get_booking_service] = lambda: BookingService(
            calendar=broken,
            store=MemoryBookingStore(),
            config=BookingServiceConfig(resolver=ResolverOptions()),
        )

        response = TestClient(app).get("/api/slots", params={"date": DAY})

        assert response.status_code == 422
        assert response.json()["event_id"] == "bad-1"

    def test_calendar_unavailable_returns_503(self) -> None:
        app = create_app()

        def _unavailable() -> BookingService:
            raise CalendarUnavailableError("integracao com calendario desabilitada")

        app.dependency_overrides[get_booking_service] = _unavailable

        response = TestClient(app).get("/api/slots", params={"date": DAY})

        assert response.status_code == 503
        assert response.json() == {"error": "service_unavailable"}

    def test_invalid_calendar_credentials_return_503(
        self,
        monkeypatch: pytest.MonkeyPatch,
        clear_settings_cache: None,
    ) -> None:
        monkeypatch.setenv("CALENDAR_ENABLED", "true")
        monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", "{not json")
        monkeypatch.setenv("BOOKING_STORE_BACKEND", "memory")
        get_calendar_service.cache_clear()
        get_booking_store.cache_clear()
        try:
            client = TestClient(create_app())
            first = client.get("/api/slots", params={"date": DAY})
            second = client.get("/api/slots", params={"date": DAY})
        finally:
            get_calendar_service.cache_clear()
            get_booking_store.cache_clear()

        assert first.status_code == 503
        assert second.status_code == 503
        assert second.json() == {"error": "service_unavailable"}


class TestBookingRoutes:
    """POST /api/bookings e rotas de administração."""

    def test_create_booking_returns_201(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=_booking_body())

        assert response.status_code == 201
        payload = response.json()
        assert payload["status"] == "pending"
        assert payload["slot_id"] == "slot-a"
        assert payload["id"]

    def test_booked_slot_returns_409(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=_booking_body("slot-b"))

        assert response.status_code == 409
        assert response.json()["error"] == "slot_unavailable"

    def test_unknown_slot_returns_404(self, client: TestClient) -> None:
        response = client.post("/api/bookings", json=_booking_body("slot-z"))

        assert response.status_code == 404
        assert response.json()["error"] == "slot_not_found"

    def test_invalid_email_returns_422(self, client: TestClient) -> None:
        body = _booking_body()
        body["email"] = "invalido"

        response = client.post("/api/bookings", json=body)

        assert response.status_code == 422

    def test_admin_lifecycle(self, client: TestClient, calendar: FakeCalendarService) -> None:
        created = client.post("/api/bookings", json=_booking_body()).json()

        listed = client.get("/api/admin/bookings").json()
        synced = client.post(f"/api/admin/bookings/{created['id']}/sync")
        resync = client.post(f"/api/admin/bookings/{created['id']}/sync")
        deleted = client.delete(f"/api/admin/bookings/{created['id']}")

        assert [item["id"] for item in listed] == [created["id"]]
        assert synced.status_code == 200
        assert synced.json()["status"] == "synced"
        assert len(calendar.inserted) == 1
        assert resync.status_code == 409
        assert deleted.json()["status"] == "deleted"

    def test_unknown_booking_returns_404(self, client: TestClient) -> None:
        response = client.delete("/api/admin/bookings/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "booking_not_found", "booking_id": "missing"}


class TestCorrelationId:
    """Propagação do header X-Correlation-Id."""

    def test_echoes_incoming_header(self, client: TestClient) -> None:
        response = client.get(
            "/api/slots",
            params={"date": DAY},
            headers={"X-Correlation-Id": "req-123"},
        )

        assert response.headers["X-Correlation-Id"] == "req-123"

    def test_generates_header_on_error_response(self, client: TestClient) -> None:
        response = client.delete("/api/admin/bookings/missing")

        assert response.status_code == 404
        assert response.headers["X-Correlation-Id"]


class TestScriptBackendRoutes:
    """Repasse para o web app de script."""

    def test_not_configured_returns_503(self) -> None:
        response = TestClient(create_app()).get("/api/script/slots")

        assert response.status_code == 503

    def test_submit_booking_through_web_app(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "message": "ok"})

        app = create_app()
        app.state.script_backend = ScriptBackendClient(
            web_app_url="https://script.example.com/exec",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        response = TestClient(app).post(
            "/api/script/bookings",
            json={"slot_id": "a", "name": "Taro", "email": "taro@example.com"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "ok"}
