from fastapi import APIRouter, Depends, Query, Response
from app.dependencies import PaginationParams, get_blog_service, get_requesting_user
from app.schemas import (
    BlogCreate,
    BlogPage,
    BlogResponse,
    BlogSearchQuery,
    BlogUpdate,
    RequestingUser,
    SingleBlogEnvelope,
)
from app.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/blogs", tags=["blogs"])

@router.post("", status_code=201, response_model=BlogResponse)
async def create_blog(
    data: BlogCreate,
    user: RequestingUser = Depends(get_requesting_user),
    service: BlogService = Depends(get_blog_service),
):
    return await service.create_blog(data, user)

@router.get("", response_model=BlogPage)
async def list_blogs(
    pagination: PaginationParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    return await service.get_all_blogs(pagination.page, pagination.page_size)

# Declared before "/{blog_id}" so "search" is not captured as an id.
@router.get("/search", response_model=BlogPage)
async def search_blogs(
    author: str | None = Query(None),
    title: str | None = Query(None),
    content: str | None = Query(None),
    tags: str | None = Query(None),
    created_date: str | None = Query(None, description="ISO date; inclusive lower bound."),
    pagination: PaginationParams = Depends(),
    service: BlogService = Depends(get_blog_service),
):
    query = BlogSearchQuery(
        author=author,
        title=title,
        content=content,
        tags=tags,
        created_date=created_date,
        page=pagination.page,
        page_size=pagination.page_size,
    )
    return await service.search_blogs(query)

@router.get("/{blog_id}", response_model=SingleBlogEnvelope)
async def get_blog(
    blog_id: str,
    user: RequestingUser = Depends(get_requesting_user),
    service: BlogService = Depends(get_blog_service),
):
    return await service.get_single_blog(blog_id, user)

@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    data: BlogUpdate,
    user: RequestingUser = Depends(get_requesting_user),
    service: BlogService = Depends(get_blog_service),
):
    return await service.update_blog(blog_id, data, user)

@router.delete("/{blog_id}", status_code=204, dependencies=[Depends(get_requesting_user)])
async def delete_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
):
    await service.delete_blog_post(blog_id)
    return Response(status_code=204)
