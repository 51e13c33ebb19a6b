"""Unit tests for OwnershipValidator

Tests cover:
- Company not owned -> AUTHORIZATION_ERROR
- Client missing or from another company -> VALIDATION_ERROR
- First bad item in request order is reported with its item_id
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.ownership_validator import OwnershipValidator
from src.domain.catalog_item import CatalogItem
from src.domain.client import Client
from src.domain.company import Company

USER_ID = 7
COMPANY_ID = 1


def _item(item_id: int, company_id: int = COMPANY_ID, user_id: int = USER_ID) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        user_id=user_id,
        company_id=company_id,
        name=f"Item {item_id}",
        price=Decimal("10.00"),
        tax_rate=Decimal("0"),
    )


@pytest.fixture
def company_repo():
    repo = MagicMock()
    repo.get_owned = AsyncMock(return_value=Company(id=COMPANY_ID, user_id=USER_ID, name="Acme"))
    return repo


@pytest.fixture
def client_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(
        return_value=Client(id=5, user_id=USER_ID, company_id=COMPANY_ID, name="Globex")
    )
    return repo


@pytest.fixture
def item_repo():
    repo = MagicMock()
    repo.get_by_ids = AsyncMock(return_value={1: _item(1), 2: _item(2)})
    return repo


@pytest.fixture
def validator(company_repo, client_repo, item_repo):
    return OwnershipValidator(company_repo, client_repo, item_repo)


@pytest.mark.asyncio
class TestOwnershipValidator:

    async def test_valid_chain(self, validator):
        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1, 2])

        assert result.is_ok()
        assert result.value.company.id == COMPANY_ID
        assert result.value.client.id == 5
        assert set(result.value.items) == {1, 2}

    async def test_company_not_owned(self, validator, company_repo, client_repo):
        company_repo.get_owned = AsyncMock(return_value=None)

        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1])

        assert result.is_err()
        assert result.error.code == "AUTHORIZATION_ERROR"
        assert result.error.details == {"company_id": COMPANY_ID}
        client_repo.get_by_id.assert_not_called()

    async def test_client_missing(self, validator, client_repo):
        client_repo.get_by_id = AsyncMock(return_value=None)

        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1])

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details == {"client_id": 5}

    async def test_client_of_sibling_company(self, validator, client_repo):
        client_repo.get_by_id = AsyncMock(
            return_value=Client(id=5, user_id=USER_ID, company_id=2, name="Other")
        )

        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1])

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"

    async def test_first_bad_item_reported(self, validator, item_repo):
        item_repo.get_by_ids = AsyncMock(return_value={1: _item(1), 3: _item(3, company_id=2)})

        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1, 3, 4])

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details == {"item_id": 3}

    async def test_missing_item_reported(self, validator):
        result = await validator.validate(USER_ID, COMPANY_ID, 5, [1, 99])

        assert result.is_err()
        assert result.error.details == {"item_id": 99}
