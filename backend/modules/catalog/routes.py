"""
Course catalog endpoints.

Listing and lookup are public; create, update and delete require an
admin caller.
"""

from fastapi import APIRouter, Depends, Response, status

from api.middleware.auth import get_admin_user
from api.dependencies import get_catalog_service
from shared.models import CallerIdentity

from .service import CatalogService
from .models import Course, CourseCreate, CourseUpdate

router = APIRouter()


@router.get("", response_model=list[Course])
async def list_courses(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Course]:
    return await catalog.list_courses()


@router.get("/category/{category}", response_model=list[Course])
async def list_courses_by_category(
    category: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Course]:
    return await catalog.list_courses(category)


@router.get("/{course_id}", response_model=Course)
async def get_course(
    course_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Course:
    return await catalog.get_course(course_id)


@router.post("", response_model=Course, status_code=status.HTTP_201_CREATED)
async def create_course(
    request: CourseCreate,
    admin: CallerIdentity = Depends(get_admin_user),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Course:
    """Create a course. The slug is derived from the title."""
    return await catalog.create_course(request)


@router.put("/{course_id}", response_model=Course)
async def update_course(
    course_id: str,
    request: CourseUpdate,
    admin: CallerIdentity = Depends(get_admin_user),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Course:
    return await catalog.update_course(course_id, request)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(
    course_id: str,
    admin: CallerIdentity = Depends(get_admin_user),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    await catalog.delete_course(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
