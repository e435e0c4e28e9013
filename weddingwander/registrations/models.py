from enum import StrEnum


class RegistrationStatus(StrEnum):
    confirmed = "confirmed"
    pending = "pending"
    canceled = "canceled"


ACTIVE_STATUSES = frozenset({RegistrationStatus.confirmed, RegistrationStatus.pending})
