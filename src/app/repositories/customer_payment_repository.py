"""Customer Payment Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.customer_payment import CustomerPayment


class CustomerPaymentRepository(ABC):
    """Repository interface for customer payment history"""

    @abstractmethod
    async def create(self, payment: CustomerPayment) -> CustomerPayment:
        pass

    @abstractmethod
    async def get_by_customer_id(self, customer_id: str) -> List[CustomerPayment]:
        """
        Retrieve payment history of a customer

        Args:
            customer_id: Customer ID

        Returns:
            List of payments, newest first
        """
        pass
