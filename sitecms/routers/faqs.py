from fastapi import APIRouter, Depends

from sitecms.dependencies import PaginationParams, get_store
from sitecms.schemas import FaqCreate, FaqResponse
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1/faqs", tags=["faqs"])

@router.get("", response_model=list[FaqResponse])
async def list_faqs(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_faqs(store, pagination.page, pagination.limit)

@router.post("", status_code=201, response_model=FaqResponse)
async def create_faq(data: FaqCreate, store: EntityStore = Depends(get_store)):
    return await content_service.create_faq(store, data)
