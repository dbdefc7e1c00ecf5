"""Tests for the course catalog service and repository."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from modules.catalog.exceptions import CourseNotFoundError
from modules.catalog.models import CourseCreate, CourseUpdate
from modules.catalog.repository import CourseRepository
from modules.catalog.service import slugify


class TestSlugify:
    @pytest.mark.parametrize("title,slug", [
        ("Intro to No-Code", "intro-to-no-code"),
        ("Build Apps 101!", "build-apps-101-"),
        ("  AI  &  Automation  ", "-ai-automation-"),
        ("Bubble.io Basics", "bubble-io-basics"),
    ])
    def test_collapses_non_alphanumerics(self, title, slug):
        assert slugify(title) == slug


class TestCatalogService:
    @pytest.mark.asyncio
    async def test_create_derives_slug_and_timestamp(self, catalog):
        course = await catalog.create_course(CourseCreate(title="Intro to No-Code", category="basics", price=180000))

        assert course.slug == "intro-to-no-code"
        assert course.category == "basics"
        assert course.created_at is not None

    @pytest.mark.asyncio
    async def test_get_missing_course(self, catalog):
        with pytest.raises(CourseNotFoundError):
            await catalog.get_course("course-404")

    @pytest.mark.asyncio
    async def test_list_by_category(self, catalog):
        await catalog.create_course(CourseCreate(title="A", category="basics"))
        await catalog.create_course(CourseCreate(title="B", category="advanced"))

        assert [c.title for c in await catalog.list_courses("advanced")] == ["B"]
        assert len(await catalog.list_courses()) == 2

    @pytest.mark.asyncio
    async def test_update_retitles_and_reslugs(self, catalog):
        course = await catalog.create_course(CourseCreate(title="Old Title"))

        updated = await catalog.update_course(course.id, CourseUpdate(title="New Title"))

        assert updated.slug == "new-title"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, catalog):
        course = await catalog.create_course(CourseCreate(title="Keep Me", description="original"))

        updated = await catalog.update_course(course.id, CourseUpdate(price=5000))

        assert updated.description == "original"
        assert updated.slug == "keep-me"
        assert updated.price == 5000

    def test_update_rejects_null_title(self):
        with pytest.raises(PydanticValidationError, match="title cannot be null"):
            CourseUpdate.model_validate({"title": None})

    @pytest.mark.asyncio
    async def test_update_can_clear_optional_fields(self, catalog, repository):
        course = await catalog.create_course(CourseCreate(title="Keep Me", description="original"))

        updated = await catalog.update_course(
            course.id, CourseUpdate.model_validate({"description": None})
        )

        assert updated.description is None
        assert repository.rows[course.id]["title"] == "Keep Me"

    @pytest.mark.asyncio
    async def test_update_missing_course(self, catalog):
        with pytest.raises(CourseNotFoundError):
            await catalog.update_course("course-404", CourseUpdate(title="x"))

    @pytest.mark.asyncio
    async def test_delete(self, catalog, repository):
        course = await catalog.create_course(CourseCreate(title="Gone Soon"))
        await catalog.delete_course(course.id)
        assert repository.rows == {}

    @pytest.mark.asyncio
    async def test_delete_missing_course(self, catalog):
        with pytest.raises(CourseNotFoundError):
            await catalog.delete_course("course-404")


class TestCourseRepository:
    def test_list_filters_by_category(self):
        db = MagicMock()
        query = db.table.return_value.select.return_value
        query.eq.return_value.order.return_value.execute.return_value.data = [
            {"id": "c1", "title": "A", "slug": "a", "category": "basics"}
        ]

        courses = CourseRepository(db).list_courses("basics")

        query.eq.assert_called_once_with("category", "basics")
        assert courses[0].id == "c1"

    @pytest.mark.asyncio
    async def test_delete_reports_missing_row(self):
        db = MagicMock()
        db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = []

        assert CourseRepository(db).delete("c404") is False
