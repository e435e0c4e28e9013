from typing import Annotated

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect

from weddingwander.config import settings
from weddingwander.dependencies import CurrentAccount, LedgerServiceDep, WeddingServiceDep
from weddingwander.exceptions import NotFoundError
from weddingwander.registrations.schemas import Registration
from weddingwander.weddings.live_search import LiveSearch
from weddingwander.weddings.schemas import WeddingFilter, WeddingResponse

router = APIRouter()


@router.get("/", response_model=list[WeddingResponse])
async def list_weddings(
    service: WeddingServiceDep,
    filters: Annotated[WeddingFilter, Query()],
) -> list[WeddingResponse]:
    return await service.filter(filters)


@router.get("/countries", response_model=list[str])
async def list_countries(service: WeddingServiceDep) -> list[str]:
    return await service.list_countries()


@router.get("/featured", response_model=list[WeddingResponse])
async def list_featured(service: WeddingServiceDep) -> list[WeddingResponse]:
    return await service.featured(settings.featured_count)


@router.websocket("/live")
async def live_search(websocket: WebSocket, service: WeddingServiceDep) -> None:
    await websocket.accept()

    async def push(results: list[WeddingResponse]) -> None:
        await websocket.send_json([r.model_dump(mode="json") for r in results])

    search = LiveSearch(service, on_results=push)
    try:
        while True:
            search.update(await websocket.receive_text())
    except WebSocketDisconnect:
        pass
    finally:
        search.close()


@router.get("/{wedding_id}", response_model=WeddingResponse)
async def get_wedding(wedding_id: str, service: WeddingServiceDep) -> WeddingResponse:
    return await service.get_by_id(wedding_id)


@router.get("/{wedding_id}/registration", response_model=Registration)
async def get_my_registration(
    wedding_id: str,
    service: LedgerServiceDep,
    account: CurrentAccount,
) -> Registration:
    registration = await service.get_registration_for(account.id, wedding_id)
    if registration is None:
        raise NotFoundError("Registration", wedding_id)
    return registration
