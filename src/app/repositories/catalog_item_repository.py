"""Catalog Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable
from src.domain.catalog_item import CatalogItem


class CatalogItemRepository(ABC):

    @abstractmethod
    async def get_by_ids(self, item_ids: Iterable[int]) -> Dict[int, CatalogItem]:
        """
        Retrieve several catalog items

        Args:
            item_ids: Item IDs (duplicates allowed)

        Returns:
            Mapping of item ID to item for the IDs that exist
        """
        pass
