from fastapi import APIRouter, Depends, HTTPException

from sitecms.dependencies import PaginationParams, get_store
from sitecms.exceptions import ConstraintViolation
from sitecms.schemas import BlogPostCreate, BlogPostResponse
from sitecms.services import content_service
from sitecms.store import EntityStore

router = APIRouter(prefix="/api/v1/blog-posts", tags=["blog"])

@router.get("", response_model=list[BlogPostResponse])
async def list_blog_posts(
    pagination: PaginationParams = Depends(),
    store: EntityStore = Depends(get_store),
):
    return await content_service.get_blog_posts(store, pagination.page, pagination.limit)

@router.get("/{slug}", response_model=BlogPostResponse)
async def get_blog_post(slug: str, store: EntityStore = Depends(get_store)):
    post = await content_service.get_blog_post_by_slug(store, slug)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post

@router.post("", status_code=201, response_model=BlogPostResponse)
async def create_blog_post(data: BlogPostCreate, store: EntityStore = Depends(get_store)):
    try:
        return await content_service.create_blog_post(store, data)
    except ConstraintViolation:
        raise HTTPException(status_code=409, detail="A blog post with this slug already exists")
