from typing import Annotated

from fastapi import Depends

from weddingwander.accounts.repository import AccountRepository
from weddingwander.accounts.schemas import Account
from weddingwander.accounts.service import AccountService
from weddingwander.auth import verify_token
from weddingwander.database import get_store
from weddingwander.exceptions import NotFoundError, UnauthorizedError
from weddingwander.notifications.service import NotificationService
from weddingwander.registrations.repository import RegistrationRepository
from weddingwander.registrations.service import LedgerService
from weddingwander.weddings.repository import WeddingRepository
from weddingwander.weddings.service import WeddingService

TokenPayload = Annotated[dict, Depends(verify_token)]


def get_wedding_repo() -> WeddingRepository:
    return WeddingRepository(get_store())


def get_wedding_service() -> WeddingService:
    return WeddingService(get_wedding_repo())


def get_registration_repo() -> RegistrationRepository:
    return RegistrationRepository(get_store())


def get_account_repo() -> AccountRepository:
    return AccountRepository(get_store())


def get_account_service() -> AccountService:
    return AccountService(get_store(), get_account_repo())


def get_notification_service() -> NotificationService:
    return NotificationService()


def get_ledger_service() -> LedgerService:
    return LedgerService(
        get_store(),
        get_wedding_repo(),
        get_registration_repo(),
        get_account_repo(),
        get_notification_service(),
    )


WeddingServiceDep = Annotated[WeddingService, Depends(get_wedding_service)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
LedgerServiceDep = Annotated[LedgerService, Depends(get_ledger_service)]


async def get_current_account(payload: TokenPayload, service: AccountServiceDep) -> Account:
    try:
        return await service.get_by_id(payload.get("sub", ""))
    except NotFoundError:
        raise UnauthorizedError("Account no longer exists") from None


CurrentAccount = Annotated[Account, Depends(get_current_account)]
