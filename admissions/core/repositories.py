import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from admissions.core.models import EntryRequirement, SymbolPointRule

logger = logging.getLogger(__name__)


class RequirementRepository(Protocol):
    def list_requirements(self, trade_id: Optional[str] = None, level: Optional[int] = None) -> List[EntryRequirement]:
        ...

    def find_requirement(self, trade_id: str, level: int) -> Optional[EntryRequirement]:
        ...


class SymbolPointRepository(Protocol):
    def list_symbol_points(self) -> List[SymbolPointRule]:
        ...


def select_requirement(
    requirements: Iterable[EntryRequirement],
    trade_id: str,
    level: int,
) -> Optional[EntryRequirement]:
    # one active row per (trade, level) is expected; with several, the first listed wins
    for req in requirements:
        if req.active and req.trade_id == trade_id and req.level == level:
            return req
    return None


class JsonRequirementRepository:
    """Active entry requirements of one organization, listed by level."""

    def __init__(self, requirements_json: Any):
        self.requirements_json = requirements_json or []

    def list_requirements(self, trade_id: Optional[str] = None, level: Optional[int] = None) -> List[EntryRequirement]:
        rows = [r if isinstance(r, EntryRequirement) else EntryRequirement.from_dict(r) for r in self.requirements_json]
        out = [
            r for r in rows
            if r.active
            and (trade_id is None or r.trade_id == trade_id)
            and (level is None or r.level == level)
        ]
        # stable: ties keep file order
        out.sort(key=lambda r: r.level)
        return out

    def find_requirement(self, trade_id: str, level: int) -> Optional[EntryRequirement]:
        return select_requirement(self.list_requirements(trade_id, level), trade_id, level)


class JsonSymbolPointRepository:
    """Active symbol-point rules of one organization, by exam level then highest points first."""

    def __init__(self, symbol_points_json: Any):
        self.symbol_points_json = symbol_points_json or []

    def list_symbol_points(self) -> List[SymbolPointRule]:
        rows = [r if isinstance(r, SymbolPointRule) else SymbolPointRule.from_dict(r) for r in self.symbol_points_json]
        out = [r for r in rows if r.active]
        out.sort(key=lambda r: r.points, reverse=True)
        out.sort(key=lambda r: r.exam_level)
        return out


@dataclass
class OrganizationLookups:
    organization_id: str
    requirements: RequirementRepository
    symbol_points: SymbolPointRepository


class OrganizationLookupCache:
    """
    Per-organization lookup data, loaded on first use and kept until
    invalidate() is called for that organization (or for all of them).
    """

    def __init__(self, loader: Callable[[str], OrganizationLookups]):
        self.loader = loader
        self._entries: Dict[str, OrganizationLookups] = {}
        self._lock = threading.Lock()

    def get(self, organization_id: str) -> OrganizationLookups:
        with self._lock:
            hit = self._entries.get(organization_id)
            if hit is not None:
                return hit
            logger.info("Loading lookups for organization %s", organization_id)
            entry = self.loader(organization_id)
            self._entries[organization_id] = entry
            return entry

    def invalidate(self, organization_id: Optional[str] = None) -> None:
        with self._lock:
            if organization_id is None:
                self._entries.clear()
            else:
                self._entries.pop(organization_id, None)
        logger.info("Invalidated lookups for %s", organization_id or "all organizations")

    def __contains__(self, organization_id: str) -> bool:
        return organization_id in self._entries
