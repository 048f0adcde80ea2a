import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.audit import GetAuditTrail
from src.domain.activity_log import ActivityLog


@pytest.mark.asyncio
class TestGetAuditTrail:

    async def test_returns_entries_with_decoded_details(self, mock_activity_log_repo):
        """
        Given: A payment edited once
        When: Its audit trail is read
        Then: The entry comes back with its JSON details decoded
        """
        log = ActivityLog.record(
            tenant_id="tenant_1",
            action="update_payment",
            entity_type="payment",
            entity_id="pay_1",
            actor="accounts",
            details={"old_amount": Decimal("4000.00"), "new_amount": Decimal("6000.00")},
        )
        mock_activity_log_repo.get_by_entity = AsyncMock(return_value=[log])

        result = await GetAuditTrail(mock_activity_log_repo).execute("payment", "pay_1")

        assert result.is_ok()
        trail = result.value
        assert trail.entity_id == "pay_1"
        assert len(trail.entries) == 1
        assert trail.entries[0].action == "update_payment"
        assert trail.entries[0].actor == "accounts"
        assert trail.entries[0].details == {"old_amount": "4000.00", "new_amount": "6000.00"}
        mock_activity_log_repo.get_by_entity.assert_called_once_with("payment", "pay_1")

    async def test_unknown_entity_type(self, mock_activity_log_repo):
        mock_activity_log_repo.get_by_entity = AsyncMock()

        result = await GetAuditTrail(mock_activity_log_repo).execute("party", "p1")

        assert result.is_err()
        assert result.error.code == "INVALID_ENTITY_TYPE"
        mock_activity_log_repo.get_by_entity.assert_not_called()

    async def test_store_failure(self, mock_activity_log_repo):
        mock_activity_log_repo.get_by_entity = AsyncMock(side_effect=Exception("connection reset"))

        result = await GetAuditTrail(mock_activity_log_repo).execute("invoice", "inv_1")

        assert result.is_err()
        assert result.error.code == "GET_AUDIT_TRAIL_FAILED"
        assert result.error.reason == "connection reset"
