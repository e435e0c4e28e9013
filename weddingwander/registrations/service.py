from datetime import UTC, date, datetime
from uuid import uuid4

import structlog

from weddingwander.accounts.repository import AccountRepository
from weddingwander.config import settings
from weddingwander.exceptions import (
    AlreadyRegisteredError,
    CapacityExceededError,
    NotFoundError,
    RegistrationAlreadyCanceledError,
    ValidationError,
)
from weddingwander.notifications.service import NotificationService
from weddingwander.registrations.models import ACTIVE_STATUSES, RegistrationStatus
from weddingwander.registrations.repository import RegistrationRepository
from weddingwander.registrations.schemas import (
    Dashboard,
    Registration,
    RegistrationWithWedding,
)
from weddingwander.store import CollectionStore
from weddingwander.weddings.repository import WeddingRepository
from weddingwander.weddings.schemas import Wedding, WeddingResponse

logger = structlog.get_logger()


class LedgerService:
    """Keeps registrations and wedding ``registered`` counts consistent.

    Every mutation runs inside one store transaction so the registration
    record and the wedding count are written together or not at all.
    """

    def __init__(
        self,
        store: CollectionStore,
        weddings: WeddingRepository,
        registrations: RegistrationRepository,
        accounts: AccountRepository,
        notifications: NotificationService,
        allow_reregistration: bool | None = None,
        max_guests: int | None = None,
    ) -> None:
        self._store = store
        self._weddings = weddings
        self._registrations = registrations
        self._accounts = accounts
        self._notifications = notifications
        self._allow_reregistration = (
            settings.allow_reregistration if allow_reregistration is None else allow_reregistration
        )
        self._max_guests = settings.max_guests_per_registration if max_guests is None else max_guests

    async def register(self, user_id: str, wedding_id: str, guests: int) -> Registration:
        if guests < 1:
            raise ValidationError("At least 1 guest is required")
        if guests > self._max_guests:
            raise ValidationError(f"Maximum {self._max_guests} guests allowed per registration")

        async with self._store.transaction():
            row = await self._weddings.get_by_id(wedding_id)
            if row is None:
                raise NotFoundError("Wedding", wedding_id)
            wedding = Wedding.model_validate(row)

            existing = await self._registrations.find_for(user_id, wedding_id)
            if any(self._blocks_registration(r) for r in existing):
                raise AlreadyRegisteredError(wedding_id)

            remaining = wedding.remaining_spots()
            if guests > remaining:
                raise CapacityExceededError(wedding_id, requested=guests, remaining=remaining)

            registration = Registration(
                id=str(uuid4()),
                user_id=user_id,
                wedding_id=wedding_id,
                registration_date=datetime.now(UTC).isoformat(),
                status=RegistrationStatus.confirmed,
                guests=guests,
            )
            await self._registrations.add(registration.model_dump(mode="json"))

            updated = wedding.model_copy(update={"registered": wedding.registered + guests})
            await self._weddings.save(updated.model_dump(mode="json"))

        logger.info(
            "registration_created",
            registration_id=registration.id,
            user_id=user_id,
            wedding_id=wedding_id,
            guests=guests,
            registered=updated.registered,
            capacity=updated.capacity,
        )

        await self._notify_registration(user_id, wedding, guests)
        return registration

    async def cancel(self, registration_id: str, user_id: str | None = None) -> Registration:
        async with self._store.transaction():
            row = await self._registrations.get_by_id(registration_id)
            # A foreign registration is reported as missing.
            if row is None or (user_id is not None and row.get("user_id") != user_id):
                raise NotFoundError("Registration", registration_id)

            registration = Registration.model_validate(row)
            if registration.status == RegistrationStatus.canceled:
                raise RegistrationAlreadyCanceledError(registration_id)

            canceled = registration.model_copy(update={"status": RegistrationStatus.canceled})
            await self._registrations.update(canceled.model_dump(mode="json"))

            wedding = await self._release_seats(registration)

        logger.info(
            "registration_canceled",
            registration_id=registration_id,
            user_id=registration.user_id,
            wedding_id=registration.wedding_id,
            guests=registration.guests,
        )

        if wedding is not None:
            await self._notify_cancellation(registration.user_id, wedding)
        return canceled

    async def list_for_user(self, user_id: str) -> list[Registration]:
        rows = await self._registrations.list_for_user(user_id)
        return [Registration.model_validate(row) for row in rows]

    async def get_registration_for(self, user_id: str, wedding_id: str) -> Registration | None:
        rows = await self._registrations.find_for(user_id, wedding_id)
        if not rows:
            return None
        registrations = [Registration.model_validate(row) for row in rows]
        active = [r for r in registrations if r.status in ACTIVE_STATUSES]
        return (active or registrations)[-1]

    async def dashboard(self, user_id: str, today: date | None = None) -> Dashboard:
        today = today or date.today()
        weddings = {
            row["id"]: Wedding.model_validate(row) for row in await self._weddings.list_all()
        }

        upcoming: list[RegistrationWithWedding] = []
        past: list[RegistrationWithWedding] = []
        canceled: list[RegistrationWithWedding] = []
        for registration in await self.list_for_user(user_id):
            wedding = weddings.get(registration.wedding_id)
            entry = RegistrationWithWedding(
                **registration.model_dump(),
                wedding=WeddingResponse.from_wedding(wedding) if wedding else None,
            )
            if registration.status == RegistrationStatus.canceled:
                canceled.append(entry)
            elif registration.status == RegistrationStatus.confirmed and wedding is not None:
                if wedding.date >= today:
                    upcoming.append(entry)
                else:
                    past.append(entry)

        return Dashboard(upcoming=upcoming, past=past, canceled=canceled)

    def _blocks_registration(self, row: dict) -> bool:
        if not self._allow_reregistration:
            return True
        return row.get("status") in ACTIVE_STATUSES

    async def _release_seats(self, registration: Registration) -> Wedding | None:
        row = await self._weddings.get_by_id(registration.wedding_id)
        if row is None:
            logger.warning(
                "registration_wedding_missing",
                registration_id=registration.id,
                wedding_id=registration.wedding_id,
            )
            return None

        wedding = Wedding.model_validate(row)
        new_count = wedding.registered - registration.guests
        if new_count < 0:
            logger.warning(
                "registered_count_clamped",
                wedding_id=wedding.id,
                registered=wedding.registered,
                released=registration.guests,
            )
            new_count = 0

        updated = wedding.model_copy(update={"registered": new_count})
        await self._weddings.save(updated.model_dump(mode="json"))
        return updated

    async def _notify_registration(self, user_id: str, wedding: Wedding, guests: int) -> None:
        account = await self._accounts.get_by_id(user_id)
        if account is None:
            return
        await self._notifications.send_registration_confirmation(
            account["email"], wedding.title, guests
        )

    async def _notify_cancellation(self, user_id: str, wedding: Wedding) -> None:
        account = await self._accounts.get_by_id(user_id)
        if account is None:
            return
        await self._notifications.send_cancellation_notice(account["email"], wedding.title)
