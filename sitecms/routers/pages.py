from fastapi import APIRouter, Depends, HTTPException

from sitecms.dependencies import PaginationParams, get_store
from sitecms.exceptions import ConstraintViolation
from sitecms.schemas import PageCreate, PageResponse, PageUpdate
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1/pages", tags=["pages"])

@router.get("", response_model=list[PageResponse])
async def list_pages(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_pages(store, pagination.page, pagination.limit)

@router.get("/{slug}", response_model=PageResponse)
async def get_page(slug: str, store: EntityStore = Depends(get_store)):
    page = await content_service.get_page_by_slug(store, slug)
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")
    return page

@router.post("", status_code=201, response_model=PageResponse)
async def create_page(data: PageCreate, store: EntityStore = Depends(get_store)):
    try:
        return await content_service.create_page(store, data)
    except ConstraintViolation:
        raise HTTPException(status_code=409, detail="A page with this slug already exists")

@router.patch("/{page_id}", response_model=PageResponse)
async def update_page(page_id: int, data: PageUpdate, store: EntityStore = Depends(get_store)):
    try:
        page = await content_service.update_page(store, page_id, data)
    except ConstraintViolation:
        raise HTTPException(status_code=409, detail="A page with this slug already exists")
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")
    return page
