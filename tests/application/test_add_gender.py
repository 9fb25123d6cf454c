"""Integration tests for the AddGender and ListGenders use cases."""

from uuid import UUID, uuid4

import pytest

from registry.application.add_gender import AddGenderHandler
from registry.application.list_genders import ListGendersHandler
from registry.domain.exceptions import ValidationError
from registry.domain.model.gender import Gender
from tests.fakes import FakeGenderRepository


class TestAddGender:

    @pytest.mark.asyncio
    async def test_add_assigns_fresh_id(self):
        repo = FakeGenderRepository()
        dto = await AddGenderHandler(repo).handle("Female")

        assert dto.name == "Female"
        stored = await repo.get_by_id(UUID(dto.id))
        assert stored == Gender(id=UUID(dto.id), name="Female")

    @pytest.mark.asyncio
    async def test_name_is_trimmed(self):
        repo = FakeGenderRepository()
        dto = await AddGenderHandler(repo).handle("  Male ")
        assert dto.name == "Male"

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self):
        repo = FakeGenderRepository()
        with pytest.raises(ValidationError, match="required"):
            await AddGenderHandler(repo).handle("  ")

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self):
        repo = FakeGenderRepository([Gender(id=uuid4(), name="Female")])
        with pytest.raises(ValidationError, match="already exists"):
            await AddGenderHandler(repo).handle("female")


class TestListGenders:

    @pytest.mark.asyncio
    async def test_sorted_by_name(self):
        repo = FakeGenderRepository(
            [Gender(id=uuid4(), name="Male"), Gender(id=uuid4(), name="female")]
        )
        names = [g.name for g in await ListGendersHandler(repo).handle()]
        assert names == ["female", "Male"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await ListGendersHandler(FakeGenderRepository()).handle() == []
