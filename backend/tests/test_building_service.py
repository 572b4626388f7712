"""Unit tests for the building service with the repository patched out."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from campus_api.exceptions import InvalidInputError, ResourceNotFoundError
from campus_api.models import Building
from campus_api.schemas.building import BuildingCreate, BuildingUpdate
from campus_api.services import building as building_service
from tests.factories import make_building, make_campus, persisted


@pytest.fixture
def repo(building_repo: SimpleNamespace) -> SimpleNamespace:
    return building_repo


@pytest.fixture
def db() -> MagicMock:
    return MagicMock(name="session")


def _payload(**overrides: object) -> BuildingCreate:
    data: dict[str, object] = {
        "name": "Muma College of Business",
        "address": {"city": "Tampa", "state": "FL"},
        "building_owner_id": 1,
        "training_lead_id": 5,
    }
    data.update(overrides)
    return BuildingCreate.model_validate(data)


# ---------------------------------------------------------------------------
# save
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_save_returns_what_the_store_returns(repo: SimpleNamespace, db: MagicMock) -> None:
    stored = persisted(make_building(), 32)
    repo.save_building.return_value = stored

    result = await building_service.save(db, _payload())

    assert result is stored
    repo.save_building.assert_awaited_once()
    sent = repo.save_building.await_args.args[1]
    assert isinstance(sent, Building)
    assert sent.id is None
    assert sent.name == "Muma College of Business"
    assert sent.address["city"] == "Tampa"


@pytest.mark.asyncio
async def test_save_none_raises_invalid_input(repo: SimpleNamespace, db: MagicMock) -> None:
    with pytest.raises(InvalidInputError):
        await building_service.save(db, None)
    repo.save_building.assert_not_awaited()


# ---------------------------------------------------------------------------
# find_all
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_find_all_returns_every_building(repo: SimpleNamespace, db: MagicMock) -> None:
    buildings = [persisted(make_building(), 1), persisted(make_building(name="Annex"), 2)]
    repo.list_buildings.return_value = buildings

    assert await building_service.find_all(db) == buildings


@pytest.mark.asyncio
async def test_find_all_on_empty_store_returns_empty_list(
    repo: SimpleNamespace, db: MagicMock
) -> None:
    repo.list_buildings.return_value = []

    result = await building_service.find_all(db)

    assert result == []
    assert result is not None


# ---------------------------------------------------------------------------
# find_by_id
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_find_by_id_returns_match(repo: SimpleNamespace, db: MagicMock) -> None:
    stored = persisted(make_building(), 7)
    repo.get_building.return_value = stored

    assert await building_service.find_by_id(db, 7) is stored
    repo.get_building.assert_awaited_once_with(db, 7)


@pytest.mark.asyncio
async def test_find_by_id_not_found(repo: SimpleNamespace, db: MagicMock) -> None:
    repo.get_building.return_value = None

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await building_service.find_by_id(db, 21)

    assert exc_info.value.identifier == 21
    assert "21" in exc_info.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize("building_id", [0, -1, -500])
async def test_find_by_id_rejects_non_positive_ids(
    repo: SimpleNamespace, db: MagicMock, building_id: int
) -> None:
    with pytest.raises(InvalidInputError):
        await building_service.find_by_id(db, building_id)
    repo.get_building.assert_not_awaited()


# ---------------------------------------------------------------------------
# derived-field lookups
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_find_by_owner_id_passes_through(repo: SimpleNamespace, db: MagicMock) -> None:
    owned = [persisted(make_building(building_owner_id=9), 3)]
    repo.list_buildings_by_owner.return_value = owned

    assert await building_service.find_by_owner_id(db, 9) == owned
    repo.list_buildings_by_owner.assert_awaited_once_with(db, 9)


@pytest.mark.asyncio
async def test_find_by_owner_id_with_no_buildings(repo: SimpleNamespace, db: MagicMock) -> None:
    repo.list_buildings_by_owner.return_value = []

    assert await building_service.find_by_owner_id(db, 0) == []


@pytest.mark.asyncio
async def test_find_by_training_lead_id_returns_match(repo: SimpleNamespace, db: MagicMock) -> None:
    stored = persisted(make_building(training_lead_id=5), 4)
    repo.get_building_by_training_lead.return_value = stored

    assert await building_service.find_by_training_lead_id(db, 5) is stored


@pytest.mark.asyncio
async def test_find_by_training_lead_id_not_found(repo: SimpleNamespace, db: MagicMock) -> None:
    repo.get_building_by_training_lead.return_value = None

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await building_service.find_by_training_lead_id(db, 5)

    assert exc_info.value.field == "training lead id"


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_update_merges_without_existence_check(repo: SimpleNamespace, db: MagicMock) -> None:
    stored = persisted(make_building(name="Renamed"), 32)
    repo.merge_building.return_value = stored
    payload = BuildingUpdate.model_validate(
        {"id": 32, "name": "Renamed", "building_owner_id": 1, "training_lead_id": 5}
    )

    result = await building_service.update(db, payload)

    assert result is stored
    merged = repo.merge_building.await_args.args[1]
    assert merged.id == 32
    assert merged.name == "Renamed"
    repo.get_building.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_delete_with_valid_id(repo: SimpleNamespace, db: MagicMock) -> None:
    await building_service.delete(db, 32)

    repo.delete_building.assert_awaited_once_with(db, 32)


@pytest.mark.asyncio
@pytest.mark.parametrize("building_id", [0, -1])
async def test_delete_with_invalid_id(
    repo: SimpleNamespace, db: MagicMock, building_id: int
) -> None:
    with pytest.raises(InvalidInputError):
        await building_service.delete(db, building_id)

    repo.delete_building.assert_not_awaited()


# ---------------------------------------------------------------------------
# campus membership
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_save_with_known_campus(
    repo: SimpleNamespace, campus_repo: SimpleNamespace, db: MagicMock
) -> None:
    campus_repo.get_campus.return_value = persisted(make_campus(), 32)
    repo.save_building.return_value = persisted(make_building(campus_id=32), 1)

    result = await building_service.save(db, _payload(campus_id=32))

    assert result.campus_id == 32
    campus_repo.get_campus.assert_awaited_once_with(db, 32)


@pytest.mark.asyncio
async def test_save_with_unknown_campus_raises_invalid_input(
    repo: SimpleNamespace, campus_repo: SimpleNamespace, db: MagicMock
) -> None:
    campus_repo.get_campus.return_value = None

    with pytest.raises(InvalidInputError) as exc_info:
        await building_service.save(db, _payload(campus_id=999))

    assert "999" in exc_info.value.message
    repo.save_building.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_without_campus_skips_campus_lookup(
    repo: SimpleNamespace, campus_repo: SimpleNamespace, db: MagicMock
) -> None:
    repo.save_building.return_value = persisted(make_building(), 1)

    await building_service.save(db, _payload())

    campus_repo.get_campus.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_with_unknown_campus_raises_invalid_input(
    repo: SimpleNamespace, campus_repo: SimpleNamespace, db: MagicMock
) -> None:
    campus_repo.get_campus.return_value = None
    payload = BuildingUpdate.model_validate(
        {"id": 32, "name": "Annex", "building_owner_id": 1, "training_lead_id": 5, "campus_id": 999}
    )

    with pytest.raises(InvalidInputError):
        await building_service.update(db, payload)

    repo.merge_building.assert_not_awaited()
