"""Client Address Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.address import AddressType, ClientAddress


class ClientAddressRepository(ABC):

    @abstractmethod
    async def get_for_client(
        self, client_id: int, address_type: AddressType
    ) -> Optional[ClientAddress]:
        """
        Retrieve the client's current address of the given kind

        Args:
            client_id: Client ID
            address_type: billing or shipping

        Returns:
            ClientAddress if on file, None otherwise
        """
        pass
