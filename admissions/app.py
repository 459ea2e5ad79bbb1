import os
import re
from dataclasses import asdict
from datetime import date
from typing import List, Dict, Any, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from admissions.config import settings
from admissions.logger import logger
from admissions.core.models import Applicant, SchoolSubject
from admissions.core.engine import EligibilityEngine, qualification_status
from admissions.core.points import PointsCalculator
from admissions.core.progress import calculate_draft_progress
from admissions.core.repositories import OrganizationLookupCache, OrganizationLookups
from admissions.core.symbols import EXAM_LEVELS, symbols_for_level
from admissions.organizations.loaders import load_organization


PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ORG_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def data_root_for(organization_id: str) -> str:
    org = (organization_id or "").strip()
    if not _ORG_ID.match(org):
        raise HTTPException(status_code=400, detail=f"Invalid organization id: {organization_id!r}")
    data_dir = settings.data_dir
    if not os.path.isabs(data_dir):
        data_dir = os.path.join(PROJECT_ROOT, data_dir)
    root = os.path.join(data_dir, org)
    if not os.path.isdir(root):
        raise HTTPException(status_code=404, detail=f"Unknown organization: {org}")
    return root


def load_lookups(organization_id: str) -> OrganizationLookups:
    return load_organization(data_root_for(organization_id), organization_id)


app = FastAPI(title="Trainee Admissions")
app.state.lookup_cache = OrganizationLookupCache(load_lookups)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_lookup_cache(request: Request) -> OrganizationLookupCache:
    return request.app.state.lookup_cache


def get_lookups(organization_id: str, cache: OrganizationLookupCache = Depends(get_lookup_cache)) -> OrganizationLookups:
    return cache.get(organization_id)


def engine_for(lookups: OrganizationLookups) -> EligibilityEngine:
    points = PointsCalculator(lookups.symbol_points.list_symbol_points())
    return EligibilityEngine(repo=lookups.requirements, points=points)


# --------- Request models ----------
class SubjectInput(BaseModel):
    subject_name: str
    symbol: str
    exam_level: str

    def to_domain(self) -> SchoolSubject:
        return SchoolSubject(self.subject_name, self.symbol, self.exam_level)


class PointsRequest(BaseModel):
    subjects: List[SubjectInput] = Field(default_factory=list)


class QualificationRequest(BaseModel):
    trade_id: str
    level: int
    subjects: List[SubjectInput] = Field(default_factory=list)
    date_of_birth: Optional[str] = None
    highest_grade_passed: float = 0
    has_work_experience: bool = False
    years_of_experience: float = 0
    as_of: Optional[date] = None


class FormRequest(BaseModel):
    form_data: Dict[str, Any] = Field(default_factory=dict)
    as_of: Optional[date] = None


# --------- Endpoints ----------
@app.get("/")
def root() -> Dict[str, Any]:
    return {"service": "admissions", "default_organization": settings.default_organization}


@app.get("/exam-levels")
def exam_levels() -> List[Dict[str, Any]]:
    return [{**lvl, "symbols": symbols_for_level(lvl["value"])} for lvl in EXAM_LEVELS]


@app.get("/organizations/{organization_id}/entry-requirements")
def entry_requirements(
    trade_id: Optional[str] = Query(None),
    level: Optional[int] = Query(None),
    lookups: OrganizationLookups = Depends(get_lookups),
) -> List[Dict[str, Any]]:
    return [asdict(r) for r in lookups.requirements.list_requirements(trade_id, level)]


@app.get("/organizations/{organization_id}/symbol-points")
def symbol_points(lookups: OrganizationLookups = Depends(get_lookups)) -> List[Dict[str, Any]]:
    return [asdict(r) for r in lookups.symbol_points.list_symbol_points()]


@app.post("/organizations/{organization_id}/points")
def points(req: PointsRequest, lookups: OrganizationLookups = Depends(get_lookups)) -> Dict[str, Any]:
    calc = PointsCalculator(lookups.symbol_points.list_symbol_points())
    return {"calculated_points": calc.calculate([s.to_domain() for s in req.subjects])}


@app.post("/organizations/{organization_id}/qualification-check")
def qualification_check(req: QualificationRequest, lookups: OrganizationLookups = Depends(get_lookups)):
    try:
        applicant = Applicant(
            subjects=[s.to_domain() for s in req.subjects],
            date_of_birth=req.date_of_birth,
            highest_grade_passed=req.highest_grade_passed,
            has_work_experience=req.has_work_experience,
            years_of_experience=req.years_of_experience,
        )
        result = engine_for(lookups).evaluate(req.trade_id, req.level, applicant, today=req.as_of)
        return asdict(result)
    except Exception as e:
        logger.exception("Qualification check failed for %s", lookups.organization_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Qualification check failed", "details": str(e)},
        )


@app.post("/organizations/{organization_id}/applications/assess")
def assess_application(req: FormRequest, lookups: OrganizationLookups = Depends(get_lookups)):
    try:
        engine = engine_for(lookups)
        result = engine.evaluate_form(req.form_data, today=req.as_of)
        subjects = Applicant.from_form(req.form_data).subjects
        return {
            "auto_calculated_points": engine.points.calculate(subjects),
            "auto_qualification_status": qualification_status(result),
            "auto_qualification_reasons": result.reasons if result else [],
            "progress_percentage": calculate_draft_progress(req.form_data),
        }
    except Exception as e:
        logger.exception("Application assessment failed for %s", lookups.organization_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Assessment failed", "details": str(e)},
        )


@app.post("/draft-progress")
def draft_progress(req: FormRequest) -> Dict[str, int]:
    return {"progress_percentage": calculate_draft_progress(req.form_data)}


@app.post("/organizations/{organization_id}/cache/invalidate")
def invalidate_cache(organization_id: str, cache: OrganizationLookupCache = Depends(get_lookup_cache)) -> Dict[str, str]:
    cache.invalidate(organization_id)
    return {"invalidated": organization_id}


if __name__ == "__main__":
    uvicorn.run("admissions.app:app", host=settings.host, port=settings.port, reload=settings.environment == "dev")
