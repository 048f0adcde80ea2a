"""Background workers for billing service"""
from .balance_reconciler import BalanceReconcilerWorker

__all__ = ["BalanceReconcilerWorker"]
