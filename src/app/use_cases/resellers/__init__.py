"""Reseller balance use cases"""
from .fund_sub_reseller import FundSubReseller
from .deduct_sub_reseller import DeductSubReseller
from .top_up_reseller import TopUpReseller
from .recharge_customer_from_reseller import RechargeCustomerFromReseller
from .list_reseller_transactions import ListResellerTransactions
from .dtos import (
    TransferCommandDTO,
    TopUpResellerCommandDTO,
    ResellerRechargeCustomerCommandDTO,
    ResellerTransactionDTO,
    TransferResponseDTO,
    ListResellerTransactionsResponseDTO,
    ResellerRechargeCustomerResponseDTO,
)

__all__ = [
    "FundSubReseller",
    "DeductSubReseller",
    "TopUpReseller",
    "RechargeCustomerFromReseller",
    "ListResellerTransactions",
    "TransferCommandDTO",
    "TopUpResellerCommandDTO",
    "ResellerRechargeCustomerCommandDTO",
    "ResellerTransactionDTO",
    "TransferResponseDTO",
    "ListResellerTransactionsResponseDTO",
    "ResellerRechargeCustomerResponseDTO",
]
