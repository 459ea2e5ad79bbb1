import logging
from datetime import date, datetime
from typing import Any, Iterable, Optional, Sequence, Union

from admissions.core.models import (
    Applicant,
    Assessment,
    EntryRequirement,
    QualificationResult,
    SchoolSubject,
    SymbolPointRule,
    leading_int,
    leading_number,
    read_field,
)
from admissions.core.points import PointsCalculator
from admissions.core.repositories import RequirementRepository
from admissions.core.rule_factory import RuleFactory

logger = logging.getLogger(__name__)

NO_REQUIREMENTS_REASON = "No entry requirements found for this trade and level"
QUALIFIED_REASON = "Meets all entry requirements"


def _parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        # ISO date, optionally followed by a time part
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning("Unparseable date of birth %r, treating age as 0", value)
        return None


def compute_age(date_of_birth: Union[str, date, datetime, None], today: Optional[date] = None) -> int:
    """Whole years between date_of_birth and today; 0 when the birth date is missing or invalid."""
    born = _parse_date(date_of_birth)
    if born is None:
        return 0
    today = _parse_date(today) or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def evaluate_requirement(
    requirement: Optional[EntryRequirement],
    applicant: Applicant,
    points: PointsCalculator,
    today: Optional[date] = None,
    factory: Optional[RuleFactory] = None,
) -> QualificationResult:
    age = compute_age(applicant.date_of_birth, today)
    assessment = Assessment(
        applicant=applicant,
        age_years=age,
        calculated_points=points.calculate(applicant.subjects),
    )
    result = QualificationResult(
        calculated_points=assessment.calculated_points,
        age_years=assessment.age_years,
        is_mature_age=assessment.is_mature_age,
    )

    if requirement is None:
        result.reasons.append(NO_REQUIREMENTS_REASON)
        return result

    for rule in (factory or RuleFactory()).from_requirement(requirement):
        rr = rule.evaluate(assessment)
        logger.debug("%s: %s", type(rule).__name__, rr.explanation)
        if rr.passed and rr.conclusive:
            result.qualified = True
            result.reasons.append(rr.explanation)
            return result
        if not rr.passed:
            result.reasons.append(rr.explanation)

    if not result.reasons:
        result.qualified = True
        result.reasons.append(QUALIFIED_REASON)
    return result


def evaluate_eligibility(
    trade_id: str,
    level: int,
    subjects: Sequence[Any],
    date_of_birth: Union[str, date, None],
    highest_grade_passed: float,
    has_work_experience: bool = False,
    years_of_experience: float = 0,
    requirement: Optional[EntryRequirement] = None,
    symbol_points: Optional[Iterable[SymbolPointRule]] = None,
    today: Optional[date] = None,
) -> QualificationResult:
    """
    Entry qualification verdict for one applicant against the requirement
    already resolved for (trade_id, level). Pass requirement=None when no
    requirement exists for the pair.
    """
    applicant = Applicant(
        subjects=[s if isinstance(s, SchoolSubject) else SchoolSubject.from_dict(s) for s in subjects],
        date_of_birth=date_of_birth,
        highest_grade_passed=leading_number(highest_grade_passed),
        has_work_experience=has_work_experience,
        years_of_experience=leading_number(years_of_experience),
    )
    result = evaluate_requirement(requirement, applicant, PointsCalculator(symbol_points), today)
    logger.debug("Eligibility trade=%s level=%s qualified=%s", trade_id, level, result.qualified)
    return result


def qualification_status(result: Optional[QualificationResult]) -> str:
    if result is None:
        return "pending"
    return "qualified" if result.qualified else "not_qualified"


class EligibilityEngine:
    def __init__(self, repo: RequirementRepository, points: PointsCalculator, factory: Optional[RuleFactory] = None):
        self.repo = repo
        self.points = points
        self.factory = factory or RuleFactory()

    def evaluate(
        self,
        trade_id: str,
        level: int,
        applicant: Applicant,
        today: Optional[date] = None,
    ) -> QualificationResult:
        requirement = self.repo.find_requirement(trade_id, level)
        result = evaluate_requirement(requirement, applicant, self.points, today, self.factory)
        logger.debug(
            "Eligibility trade=%s level=%s qualified=%s reasons=%d",
            trade_id, level, result.qualified, len(result.reasons),
        )
        return result

    def evaluate_form(self, form: Any, today: Optional[date] = None) -> Optional[QualificationResult]:
        """Verdict for an application draft; None until a trade has been chosen."""
        trade_id = read_field(form, "trade_id")
        if not trade_id:
            return None
        level = leading_int(read_field(form, "preferred_level"))
        return self.evaluate(trade_id, level, Applicant.from_form(form), today)
