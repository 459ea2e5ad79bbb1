import json
import logging
import os
from typing import Any, Dict, List

from admissions.core.repositories import (
    JsonRequirementRepository,
    JsonSymbolPointRepository,
    OrganizationLookups,
)

logger = logging.getLogger(__name__)


def _read(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_entry_requirements(root: str) -> List[Dict[str, Any]]:
    return _read(os.path.join(root, "entry_requirements.json"))


def load_symbol_points(root: str) -> List[Dict[str, Any]]:
    return _read(os.path.join(root, "symbol_points.json"))


def load_organization(root: str, organization_id: str) -> OrganizationLookups:
    requirements = load_entry_requirements(root)
    symbol_points = load_symbol_points(root)
    logger.info(
        "Loaded organization %s: %d entry requirements, %d symbol point rules",
        organization_id, len(requirements), len(symbol_points),
    )
    return OrganizationLookups(
        organization_id=organization_id,
        requirements=JsonRequirementRepository(requirements),
        symbol_points=JsonSymbolPointRepository(symbol_points),
    )
