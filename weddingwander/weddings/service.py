import structlog

from weddingwander.exceptions import NotFoundError
from weddingwander.weddings.repository import WeddingRepository
from weddingwander.weddings.schemas import Wedding, WeddingFilter, WeddingResponse

logger = structlog.get_logger()


def matches_filter(wedding: Wedding, filters: WeddingFilter) -> bool:
    """Conjunction of the filter predicates; unset predicates always match."""
    if filters.search:
        needle = filters.search.lower()
        haystack = (
            wedding.title,
            wedding.description,
            wedding.location.country,
            wedding.location.city,
        )
        if not any(needle in field.lower() for field in haystack):
            return False
    if filters.country and wedding.location.country != filters.country:
        return False
    if filters.from_date and wedding.date < filters.from_date:
        return False
    if filters.to_date and wedding.date > filters.to_date:
        return False
    return True


class WeddingService:
    def __init__(self, repo: WeddingRepository) -> None:
        self._repo = repo

    async def list_all(self) -> list[WeddingResponse]:
        return [WeddingResponse.from_wedding(w) for w in await self._load_all()]

    async def get_by_id(self, wedding_id: str) -> WeddingResponse:
        row = await self._repo.get_by_id(wedding_id)
        if row is None:
            raise NotFoundError("Wedding", wedding_id)
        return WeddingResponse.from_wedding(Wedding.model_validate(row))

    async def filter(self, filters: WeddingFilter) -> list[WeddingResponse]:
        weddings = await self._load_all()
        matched = [WeddingResponse.from_wedding(w) for w in weddings if matches_filter(w, filters)]
        logger.debug(
            "catalog_filtered",
            search=filters.search,
            country=filters.country,
            matched=len(matched),
            total=len(weddings),
        )
        return matched

    async def list_countries(self) -> list[str]:
        countries: list[str] = []
        for wedding in await self._load_all():
            if wedding.location.country not in countries:
                countries.append(wedding.location.country)
        return countries

    async def featured(self, limit: int = 3) -> list[WeddingResponse]:
        weddings = await self._load_all()
        return [WeddingResponse.from_wedding(w) for w in weddings[:limit]]

    async def _load_all(self) -> list[Wedding]:
        return [Wedding.model_validate(row) for row in await self._repo.list_all()]
