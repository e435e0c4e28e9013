from fastapi import APIRouter

from weddingwander.accounts.schemas import (
    Account,
    AccountResponse,
    LoginRequest,
    SignupRequest,
    TokenResponse,
)
from weddingwander.auth import create_access_token
from weddingwander.dependencies import AccountServiceDep, CurrentAccount

router = APIRouter()


def _token_response(account: Account) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(account.id),
        account=AccountResponse(id=account.id, name=account.name, email=account.email),
    )


@router.post("/signup", status_code=201, response_model=TokenResponse)
async def signup(data: SignupRequest, service: AccountServiceDep) -> TokenResponse:
    account = await service.signup(data.name, data.email, data.password)
    return _token_response(account)


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, service: AccountServiceDep) -> TokenResponse:
    account = await service.login(data.email, data.password)
    return _token_response(account)


@router.post("/logout", status_code=204)
async def logout(service: AccountServiceDep, _account: CurrentAccount) -> None:
    await service.logout()


@router.get("/me", response_model=AccountResponse)
async def me(account: CurrentAccount) -> AccountResponse:
    return AccountResponse(id=account.id, name=account.name, email=account.email)
