import datetime

from pydantic import BaseModel, Field, model_validator


class Coordinates(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Location(BaseModel):
    country: str
    city: str
    venue: str
    coordinates: Coordinates


class Host(BaseModel):
    name: str
    photo_url: str | None = None


class Wedding(BaseModel):
    id: str
    title: str
    description: str
    date: datetime.date
    location: Location
    hosts: list[Host] = Field(default_factory=list)
    photo_url: str
    capacity: int = Field(gt=0)
    registered: int = Field(default=0, ge=0)

    def remaining_spots(self) -> int:
        return max(self.capacity - self.registered, 0)


class WeddingResponse(Wedding):
    spots_remaining: int
    is_full: bool

    @classmethod
    def from_wedding(cls, wedding: Wedding) -> "WeddingResponse":
        remaining = wedding.remaining_spots()
        return cls(**wedding.model_dump(), spots_remaining=remaining, is_full=remaining == 0)


class WeddingFilter(BaseModel):
    search: str | None = None
    country: str | None = None
    from_date: datetime.date | None = None
    to_date: datetime.date | None = None

    @model_validator(mode="after")
    def _check_date_range(self) -> "WeddingFilter":
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValueError("from_date must not be after to_date")
        return self
