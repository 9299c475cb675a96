from fastapi import APIRouter, Depends

from sitecms.dependencies import PaginationParams, get_store
from sitecms.schemas import ProductCreate, ProductResponse, ServiceCreate, ServiceResponse
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1", tags=["catalog"])

# --- Services ---

@router.get("/services", response_model=list[ServiceResponse])
async def list_services(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_services(store, pagination.page, pagination.limit)

@router.post("/services", status_code=201, response_model=ServiceResponse)
async def create_service(data: ServiceCreate, store: EntityStore = Depends(get_store)):
    return await content_service.create_service(store, data)

# --- Products ---

@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_products(store, pagination.page, pagination.limit)

@router.post("/products", status_code=201, response_model=ProductResponse)
async def create_product(data: ProductCreate, store: EntityStore = Depends(get_store)):
    return await content_service.create_product(store, data)
