from typing import Protocol, Optional, Sequence

from admissions.core.models import Assessment, RuleResult, MATURE_AGE_YEARS, leading_number
from admissions.core.symbols import find_subject_symbol, meets_or_exceeds


def fmt_number(value) -> str:
    # 5.0 -> "5", 2.5 -> "2.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class AdmissionRule(Protocol):
    def evaluate(self, assessment: Assessment) -> RuleResult: ...


class MatureAgeEntryRule:
    """
    Alternate admission track for older applicants with work experience.
    A pass is conclusive: the standard academic checks are skipped.
    Missing experience is reported but the standard checks still run.
    """

    def __init__(self, min_age: Optional[int] = None, min_experience_years: Optional[float] = None):
        self.min_age = MATURE_AGE_YEARS if min_age is None else min_age
        self.min_experience_years = 3 if min_experience_years is None else min_experience_years

    def evaluate(self, assessment: Assessment) -> RuleResult:
        if not assessment.is_mature_age:
            return RuleResult(True, f"Mature age entry n/a (age {assessment.age_years})")
        if assessment.age_years < self.min_age:
            return RuleResult(True, f"Mature age entry n/a (age {assessment.age_years} < {self.min_age})")

        applicant = assessment.applicant
        if applicant.has_work_experience and applicant.years_of_experience >= self.min_experience_years:
            return RuleResult(
                True,
                f"Qualified via Mature Age Entry ({assessment.age_years} years old, "
                f"{fmt_number(applicant.years_of_experience)} years experience)",
                conclusive=True,
            )
        return RuleResult(
            False,
            f"Mature age entry requires {fmt_number(self.min_experience_years)}+ years of relevant work experience",
        )


class PreviousLevelRule:
    # Enrollment history is not consulted; the reason is a reminder for the reviewer.
    def __init__(self, previous_level: Optional[int]):
        self.previous_level = previous_level

    def evaluate(self, assessment: Assessment) -> RuleResult:
        return RuleResult(False, f"Requires completion of Level {self.previous_level}")


class MinGradeRule:
    def __init__(self, min_grade: float):
        self.min_grade = leading_number(min_grade)

    def evaluate(self, assessment: Assessment) -> RuleResult:
        grade = leading_number(assessment.applicant.highest_grade_passed)
        if grade < self.min_grade:
            return RuleResult(
                False,
                f"Minimum Grade {fmt_number(self.min_grade)} required (you have Grade {fmt_number(grade)})",
            )
        return RuleResult(True, f"Grade {fmt_number(grade)} OK")


class MinPointsRule:
    def __init__(self, min_points: float):
        self.min_points = leading_number(min_points)

    def evaluate(self, assessment: Assessment) -> RuleResult:
        points = assessment.calculated_points
        if points < self.min_points:
            return RuleResult(
                False,
                f"Minimum {fmt_number(self.min_points)} points required (you have {fmt_number(points)})",
            )
        return RuleResult(True, f"Points {fmt_number(points)} OK")


class SubjectSymbolRule:
    def __init__(
        self,
        label: str,
        aliases: Sequence[str],
        min_symbol: str,
        required: bool = True,
    ):
        self.label = label
        self.aliases = tuple(aliases)
        self.min_symbol = min_symbol
        # when False, an absent subject is not flagged
        self.required = required

    def evaluate(self, assessment: Assessment) -> RuleResult:
        symbol = find_subject_symbol(assessment.applicant.subjects, self.aliases)
        if not symbol:
            if self.required:
                return RuleResult(False, f"{self.label} subject required with minimum symbol {self.min_symbol}")
            return RuleResult(True, f"{self.label}: not taken")
        if not meets_or_exceeds(self.min_symbol, symbol):
            return RuleResult(False, f"{self.label}: {self.min_symbol} or better required (you have {symbol})")
        return RuleResult(True, f"{self.label} OK ({symbol})")
