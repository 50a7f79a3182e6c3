import uuid

import pytest

from assetlens.database.repositories.asset_repository import AssetRepository
from assetlens.records.models import AssetRecord


@pytest.mark.integration
class TestAssetRepository:
    def test_upsert_updates_existing_tag(self, integration_cleanup: list[tuple[str, str]]) -> None:
        tag = f"PC-{uuid.uuid4().hex[:8]}"
        integration_cleanup.append(("assets", tag))
        repo = AssetRepository()

        repo.upsert_many("user-1", [AssetRecord(asset_tag=tag, brand="Dell")])
        repo.upsert_many("user-1", [AssetRecord(asset_tag=tag, brand="HP")])

        stored = [r for r in repo.list_all() if r.asset_tag == tag]
        assert [r.brand for r in stored] == ["HP"]

    def test_delete(self, integration_cleanup: list[tuple[str, str]]) -> None:
        tag = f"PC-{uuid.uuid4().hex[:8]}"
        integration_cleanup.append(("assets", tag))
        repo = AssetRepository()
        repo.upsert_many("user-1", [AssetRecord(asset_tag=tag)])

        assert repo.delete(tag) is True
        assert repo.delete(tag) is False
