from fastapi import APIRouter

from weddingwander.dependencies import CurrentAccount, LedgerServiceDep
from weddingwander.registrations.schemas import Dashboard, Registration, RegistrationCreate

router = APIRouter()


@router.post("/", status_code=201, response_model=Registration)
async def create_registration(
    data: RegistrationCreate,
    service: LedgerServiceDep,
    account: CurrentAccount,
) -> Registration:
    return await service.register(account.id, data.wedding_id, data.guests)


@router.get("/", response_model=list[Registration])
async def list_registrations(
    service: LedgerServiceDep,
    account: CurrentAccount,
) -> list[Registration]:
    return await service.list_for_user(account.id)


@router.get("/dashboard", response_model=Dashboard)
async def get_dashboard(
    service: LedgerServiceDep,
    account: CurrentAccount,
) -> Dashboard:
    return await service.dashboard(account.id)


@router.post("/{registration_id}/cancel", response_model=Registration)
async def cancel_registration(
    registration_id: str,
    service: LedgerServiceDep,
    account: CurrentAccount,
) -> Registration:
    return await service.cancel(registration_id, user_id=account.id)
