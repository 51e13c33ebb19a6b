"""Ownership checks for an invoice request.

Confirms the tenant owns the company and that the client and every
referenced catalog item belong to that same company. Read only.
"""

from dataclasses import dataclass
from typing import Dict, List
from libs.result import Result, Return, Error
from src.app.repositories.company_repository import CompanyRepository
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.catalog_item_repository import CatalogItemRepository
from src.domain.catalog_item import CatalogItem
from src.domain.client import Client
from src.domain.company import Company
from .error_codes import AUTHORIZATION_ERROR, VALIDATION_ERROR


@dataclass(frozen=True)
class OwnershipCheck:
    company: Company
    client: Client
    items: Dict[int, CatalogItem]


class OwnershipValidator:
    """
    Validates the ownership chain tenant -> company -> client / items

    Business Rules:
    1. Company must be owned by the tenant (AUTHORIZATION_ERROR otherwise)
    2. Client must exist and belong to the company (VALIDATION_ERROR)
    3. Each item must exist and belong to the company (VALIDATION_ERROR
       carrying the item_id); the first bad item in request order is reported
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        client_repo: ClientRepository,
        item_repo: CatalogItemRepository,
    ):
        self.company_repo = company_repo
        self.client_repo = client_repo
        self.item_repo = item_repo

    async def validate(
        self,
        user_id: int,
        company_id: int,
        client_id: int,
        item_ids: List[int],
    ) -> Result[OwnershipCheck]:
        company = await self.company_repo.get_owned(company_id, user_id)
        if not company:
            return Return.err(
                Error(
                    code=AUTHORIZATION_ERROR,
                    message="Unauthorized company access",
                    reason=f"company {company_id} is not owned by user {user_id}",
                    details={"company_id": company_id},
                )
            )

        client = await self.client_repo.get_by_id(client_id)
        if not client or client.company_id != company_id or client.user_id != user_id:
            return Return.err(
                Error(
                    code=VALIDATION_ERROR,
                    message="Invalid or unauthorized client",
                    reason=f"client {client_id} does not belong to company {company_id}",
                    details={"client_id": client_id},
                )
            )

        items = await self.item_repo.get_by_ids(item_ids)
        for item_id in item_ids:
            item = items.get(item_id)
            if not item or item.company_id != company_id or item.user_id != user_id:
                return Return.err(
                    Error(
                        code=VALIDATION_ERROR,
                        message="Invalid or unauthorized item",
                        reason=f"item {item_id} does not belong to company {company_id}",
                        details={"item_id": item_id},
                    )
                )

        return Return.ok(OwnershipCheck(company=company, client=client, items=items))
