from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import Depends
from config import ApplicationConfig
from src.adapter.services.wallet_service import create_wallet_service
from src.app.services.wallet_service import WalletService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_wallet_service(session: AsyncSession = Depends(get_session)) -> WalletService:
    """Wallet service bound to the request's session (or the remote RPC when configured)"""
    return create_wallet_service(
        session,
        url=ApplicationConfig.WALLET_DEBIT_URL,
        timeout=ApplicationConfig.WALLET_DEBIT_TIMEOUT,
    )
