import pytest

from admissions.core.models import EntryRequirement
from admissions.core.repositories import (
    JsonRequirementRepository,
    JsonSymbolPointRepository,
    OrganizationLookupCache,
    OrganizationLookups,
    select_requirement,
)

REQUIREMENTS = [
    {"id": "r2", "trade_id": "electrical", "level": 2, "min_grade": 12},
    {"id": "r1a", "trade_id": "electrical", "level": 1, "min_grade": 10, "trades": {"name": "Electrical"}},
    {"id": "r1b", "trade_id": "electrical", "level": 1, "min_grade": 11},
    {"id": "r1x", "trade_id": "electrical", "level": 1, "min_grade": 9, "active": False},
    {"id": "w1", "trade_id": "welding", "level": 1},
]


def test_list_requirements_filters_and_orders_by_level():
    repo = JsonRequirementRepository(REQUIREMENTS)
    assert [r.id for r in repo.list_requirements()] == ["r1a", "r1b", "w1", "r2"]
    assert [r.id for r in repo.list_requirements(trade_id="electrical")] == ["r1a", "r1b", "r2"]
    assert [r.id for r in repo.list_requirements(level=2)] == ["r2"]


def test_find_requirement_first_match_wins():
    repo = JsonRequirementRepository(REQUIREMENTS)
    assert repo.find_requirement("electrical", 1).id == "r1a"
    assert repo.find_requirement("plumbing", 1) is None


def test_select_requirement_skips_inactive_and_other_pairs():
    rows = [
        EntryRequirement("electrical", 1, id="off", active=False),
        EntryRequirement("electrical", 2, id="other"),
        EntryRequirement("electrical", 1, id="on"),
    ]
    assert select_requirement(rows, "electrical", 1).id == "on"
    assert select_requirement([], "electrical", 1) is None


def test_bad_requirement_row_raises():
    repo = JsonRequirementRepository([{"level": 1}])
    with pytest.raises(ValueError):
        repo.list_requirements()


def test_symbol_points_ordered_by_level_then_points():
    repo = JsonSymbolPointRepository([
        {"exam_level": "NSSCO", "symbol": "C", "points": 4},
        {"exam_level": "IGCSE", "symbol": "B", "points": 5},
        {"exam_level": "NSSCO", "symbol": "A", "points": 6},
        {"exam_level": "IGCSE", "symbol": "U", "points": 0, "active": False},
    ])
    rows = repo.list_symbol_points()
    assert [(r.exam_level, r.symbol) for r in rows] == [("IGCSE", "B"), ("NSSCO", "A"), ("NSSCO", "C")]


class TestOrganizationLookupCache:
    @pytest.fixture
    def calls(self):
        return []

    @pytest.fixture
    def cache(self, calls):
        def loader(org):
            calls.append(org)
            return OrganizationLookups(org, JsonRequirementRepository(REQUIREMENTS), JsonSymbolPointRepository([]))
        return OrganizationLookupCache(loader)

    def test_loads_once_per_organization(self, cache, calls):
        first = cache.get("demo")
        assert cache.get("demo") is first
        cache.get("other")
        assert calls == ["demo", "other"]

    def test_invalidate_one(self, cache, calls):
        cache.get("demo")
        cache.get("other")
        cache.invalidate("demo")
        assert "demo" not in cache
        assert "other" in cache
        cache.get("demo")
        assert calls == ["demo", "other", "demo"]

    def test_invalidate_all(self, cache):
        cache.get("demo")
        cache.get("other")
        cache.invalidate()
        assert "demo" not in cache and "other" not in cache

    def test_separate_caches_do_not_share(self, calls):
        def loader(org):
            calls.append(org)
            return OrganizationLookups(org, JsonRequirementRepository([]), JsonSymbolPointRepository([]))
        OrganizationLookupCache(loader).get("demo")
        OrganizationLookupCache(loader).get("demo")
        assert calls == ["demo", "demo"]
