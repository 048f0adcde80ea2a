"""BulkRechargeCustomers Use Case

Recharges several customers one after another. Each customer is its own
transaction; a failure is reported and the remaining customers still run.
"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BulkRechargeCommandDTO, BulkRechargeItemResultDTO, BulkRechargeResponseDTO
from .recharge_customer import RechargeCustomer

logger = logging.getLogger(__name__)


class BulkRechargeCustomers:

    def __init__(self, uow: UnitOfWork, recharge_customer: RechargeCustomer):
        self.uow = uow
        self.recharge_customer = recharge_customer

    async def execute(self, command: BulkRechargeCommandDTO) -> Result[BulkRechargeResponseDTO]:
        results: list[BulkRechargeItemResultDTO] = []

        for item in command.items:
            result = await self.recharge_customer.execute(item)

            if result.is_ok():
                results.append(
                    BulkRechargeItemResultDTO(
                        customer_id=item.customer_id,
                        success=True,
                        recharge=result.value,
                    )
                )
            else:
                # Release any row lock taken before the business check failed
                await self.uow.rollback()
                logger.warning(
                    f"Bulk recharge failed for customer {item.customer_id}: {result.error.message}"
                )
                results.append(
                    BulkRechargeItemResultDTO(
                        customer_id=item.customer_id,
                        success=False,
                        error_code=result.error.code,
                        error_message=result.error.message,
                    )
                )

        succeeded = sum(1 for r in results if r.success)
        logger.info(f"Bulk recharge complete: {succeeded} succeeded, {len(results) - succeeded} failed")

        return Return.ok(
            BulkRechargeResponseDTO(
                results=results,
                succeeded=succeeded,
                failed=len(results) - succeeded,
            )
        )
