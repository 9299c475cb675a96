from fastapi import APIRouter, Depends

from sitecms.dependencies import PaginationParams, get_store
from sitecms.schemas import ContactMessageCreate, ContactMessageResponse
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1/contact-messages", tags=["contact"])

@router.post("", status_code=201, response_model=ContactMessageResponse)
async def create_contact_message(data: ContactMessageCreate, store: EntityStore = Depends(get_store)):
    return await content_service.create_contact_message(store, data)

@router.get("", response_model=list[ContactMessageResponse])
async def list_contact_messages(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_contact_messages(store, pagination.page, pagination.limit)
