from .unit_of_work import SqlAlchemyUnitOfWork
from .notification_service import (
    LoggingNotificationService,
    WebhookNotificationService,
    CompositeNotificationService,
    create_notification_service,
)
from .pdf_service import ReportLabPdfService
from .wallet_service import SqlAlchemyWalletService, HttpWalletService, create_wallet_service

__all__ = [
    "SqlAlchemyUnitOfWork",
    "LoggingNotificationService",
    "WebhookNotificationService",
    "CompositeNotificationService",
    "create_notification_service",
    "ReportLabPdfService",
    "SqlAlchemyWalletService",
    "HttpWalletService",
    "create_wallet_service",
]
