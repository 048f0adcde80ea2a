import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from src.adapter.services.notification_service import (
    CompositeNotificationService,
    LoggingNotificationService,
    WebhookNotificationService,
    create_notification_service,
)
from src.app.use_cases.reconciliation import ReconciliationReportDTO


@pytest.fixture
def report():
    return ReconciliationReportDTO(
        parties_checked=3,
        invoices_checked=5,
        reconciliation_time=datetime(2024, 3, 1, 2, 0, 0),
        execution_time_ms=12,
    )


def http_client(error=None):
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    response = MagicMock()
    response.raise_for_status = MagicMock()
    client.post = AsyncMock(return_value=response, side_effect=error)
    return client


@pytest.mark.asyncio
class TestWebhookNotificationService:

    @patch("src.adapter.services.notification_service.httpx.AsyncClient")
    async def test_posts_report(self, mock_client_class, report):
        client = http_client()
        mock_client_class.return_value = client

        sent = await WebhookNotificationService("https://hooks.example.net/billing").send_discrepancy_alert(report)

        assert sent is True
        payload = client.post.call_args.kwargs["json"]
        assert payload["type"] == "reconciliation_alert"
        assert payload["parties_checked"] == 3
        assert payload["discrepancies_found"] == 0

    @patch("src.adapter.services.notification_service.httpx.AsyncClient")
    async def test_http_error_returns_false(self, mock_client_class, report):
        mock_client_class.return_value = http_client(error=httpx.ConnectTimeout("timed out"))

        sent = await WebhookNotificationService("https://hooks.example.net/billing").send_discrepancy_alert(report)

        assert sent is False


@pytest.mark.asyncio
class TestCompositeNotificationService:

    async def test_one_success_is_enough(self, report):
        failing = MagicMock()
        failing.send_discrepancy_alert = AsyncMock(side_effect=Exception("smtp down"))

        service = CompositeNotificationService([failing, LoggingNotificationService()])

        assert await service.send_discrepancy_alert(report) is True


def test_factory_without_webhook_logs_only():
    assert isinstance(create_notification_service(None), LoggingNotificationService)
    assert isinstance(create_notification_service("https://hooks.example.net/billing"), CompositeNotificationService)
