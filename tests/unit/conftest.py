import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock


def _echo(obj, *args, **kwargs):
    return obj


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_party_repo():
    """Mock party repository; create/update return the entity they were given"""
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=_echo)
    repo.update = AsyncMock(side_effect=_echo)
    repo.list_by_kind = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_ledger_repo():
    """Mock party ledger repository"""
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    repo.get_sum = AsyncMock()
    repo.get_sum_by_reference = AsyncMock(return_value=Decimal("0"))
    repo.list_by_party = AsyncMock(return_value=[])
    repo.count_by_party = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=_echo)
    repo.update = AsyncMock(side_effect=_echo)
    repo.delete = AsyncMock()
    repo.get_all = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.create_many = AsyncMock(side_effect=_echo)
    repo.delete_by_invoice_id = AsyncMock()
    return repo


@pytest.fixture
def mock_payment_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.create = AsyncMock(side_effect=_echo)
    repo.update = AsyncMock(side_effect=_echo)
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_recharge_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=_echo)
    repo.update = AsyncMock(side_effect=_echo)
    return repo


@pytest.fixture
def mock_customer_payment_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    return repo


@pytest.fixture
def mock_activity_log_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    return repo


@pytest.fixture
def mock_reseller_transaction_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    return repo


@pytest.fixture
def mock_wallet_transaction_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    repo.get_by_customer_id = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_item_category_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_tenant_id = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_item_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_echo)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_tenant_id = AsyncMock(return_value=[])
    return repo
