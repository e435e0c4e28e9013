from pydantic import BaseModel, Field

from weddingwander.registrations.models import RegistrationStatus
from weddingwander.weddings.schemas import WeddingResponse


class RegistrationCreate(BaseModel):
    wedding_id: str = Field(min_length=1)
    guests: int = Field(default=1, ge=1)


class Registration(BaseModel):
    id: str
    user_id: str
    wedding_id: str
    registration_date: str
    status: RegistrationStatus
    guests: int = Field(ge=1)


class RegistrationWithWedding(Registration):
    wedding: WeddingResponse | None = None


class Dashboard(BaseModel):
    upcoming: list[RegistrationWithWedding]
    past: list[RegistrationWithWedding]
    canceled: list[RegistrationWithWedding]
