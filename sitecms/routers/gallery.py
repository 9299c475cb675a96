from fastapi import APIRouter, Depends

from sitecms.dependencies import PaginationParams, get_store
from sitecms.schemas import GalleryItemCreate, GalleryItemResponse
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1/gallery", tags=["gallery"])

@router.get("", response_model=list[GalleryItemResponse])
async def list_gallery_items(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_gallery_items(store, pagination.page, pagination.limit)

@router.post("", status_code=201, response_model=GalleryItemResponse)
async def create_gallery_item(data: GalleryItemCreate, store: EntityStore = Depends(get_store)):
    return await content_service.create_gallery_item(store, data)
