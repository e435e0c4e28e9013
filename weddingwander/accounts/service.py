from uuid import uuid4

import structlog

from weddingwander.accounts.repository import AccountRepository
from weddingwander.accounts.schemas import Account
from weddingwander.exceptions import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from weddingwander.store import CollectionStore

logger = structlog.get_logger()


class AccountService:
    """Account creation, credential check and the single current session.

    Credentials are stored and compared verbatim. This is a demo identity
    layer and offers no security.
    """

    def __init__(self, store: CollectionStore, repo: AccountRepository) -> None:
        self._store = store
        self._repo = repo

    async def signup(self, name: str, email: str, password: str) -> Account:
        async with self._store.transaction():
            if await self._repo.get_by_email(email) is not None:
                raise AlreadyExistsError(email)

            account = Account(id=str(uuid4()), name=name, email=email, password=password)
            await self._repo.add(account.model_dump())
            await self._repo.set_session(account.model_dump())

        logger.info("account_created", account_id=account.id)
        return account

    async def login(self, email: str, password: str) -> Account:
        row = await self._repo.get_by_email(email)
        if row is None or row.get("password") != password:
            logger.info("login_failed", email=email)
            raise InvalidCredentialsError()

        account = Account.model_validate(row)
        await self._repo.set_session(account.model_dump())
        logger.info("login_succeeded", account_id=account.id)
        return account

    async def current_account(self) -> Account | None:
        row = await self._repo.get_session()
        if row is None:
            return None
        return Account.model_validate(row)

    async def logout(self) -> None:
        await self._repo.clear_session()
        logger.info("logged_out")

    async def get_by_id(self, account_id: str) -> Account:
        row = await self._repo.get_by_id(account_id)
        if row is None:
            raise NotFoundError("Account", account_id)
        return Account.model_validate(row)
