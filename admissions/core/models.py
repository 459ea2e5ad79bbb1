import re
from dataclasses import dataclass, field, fields
from typing import List, Optional, Dict, Any, Mapping

MATURE_AGE_YEARS = 23


def _known_fields(cls, row: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in row.items() if k in names}


def read_field(obj: Any, name: str, default: Any = None) -> Any:
    # forms arrive either as JSON objects or as attribute objects
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def leading_int(value: Any) -> int:
    """'5 years' -> 5, '' / None / 'n/a' -> 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    m = re.match(r"\s*([+-]?\d+)", str(value))
    return int(m.group(1)) if m else 0


def leading_number(value: Any) -> float:
    """'12' -> 12, '10.5' -> 10.5, 'Grade 12' / None / True -> 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    m = re.match(r"\s*([+-]?\d+(?:\.\d+)?)", str(value))
    if not m:
        return 0
    n = float(m.group(1))
    return int(n) if n.is_integer() else n


@dataclass(frozen=True)
class SchoolSubject:
    subject_name: str
    symbol: str
    exam_level: str

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "SchoolSubject":
        return cls(
            subject_name=str(row.get("subject_name") or ""),
            symbol=str(row.get("symbol") or ""),
            exam_level=str(row.get("exam_level") or ""),
        )


@dataclass(frozen=True)
class SymbolPointRule:
    exam_level: str
    symbol: str
    points: float
    active: bool = True

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "SymbolPointRule":
        try:
            return cls(
                exam_level=str(row["exam_level"]),
                symbol=str(row["symbol"]),
                points=leading_number(row["points"]),
                active=bool(row.get("active", True)),
            )
        except KeyError as e:
            raise ValueError(f"Symbol point row missing {e.args[0]!r}: {dict(row)!r}") from None


@dataclass
class EntryRequirement:
    trade_id: str
    level: int
    requirement_name: str = ""
    min_grade: Optional[float] = None
    min_points: Optional[float] = None
    english_symbol: Optional[str] = None
    maths_symbol: Optional[str] = None
    science_symbol: Optional[str] = None
    prevocational_symbol: Optional[str] = None
    requires_previous_level: bool = False
    previous_level_required: Optional[int] = None
    mature_age_entry: bool = False
    mature_min_age: Optional[int] = None
    mature_min_experience_years: Optional[float] = None
    additional_requirements: Optional[str] = None
    active: bool = True
    organization_id: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "EntryRequirement":
        if "trade_id" not in row or "level" not in row:
            raise ValueError(f"Entry requirement needs trade_id and level: {dict(row)!r}")
        return cls(**_known_fields(cls, row))


@dataclass
class Applicant:
    subjects: List[SchoolSubject] = field(default_factory=list)
    date_of_birth: Optional[str] = None
    highest_grade_passed: float = 0
    has_work_experience: bool = False
    years_of_experience: float = 0

    @classmethod
    def from_form(cls, form: Any) -> "Applicant":
        """Evaluator inputs as the application screen derives them from a draft."""
        subjects = [
            s if isinstance(s, SchoolSubject) else SchoolSubject.from_dict(s)
            for s in (read_field(form, "school_subjects") or [])
            if isinstance(s, (SchoolSubject, Mapping))
        ]
        return cls(
            subjects=subjects,
            date_of_birth=read_field(form, "date_of_birth") or None,
            highest_grade_passed=leading_number(read_field(form, "highest_grade_passed")),
            has_work_experience=bool(read_field(form, "employer_name")),
            years_of_experience=leading_int(read_field(form, "employer_duration")),
        )


@dataclass(frozen=True)
class Assessment:
    """Facts derived once per evaluation and shared by every rule."""
    applicant: Applicant
    age_years: int
    calculated_points: float

    @property
    def is_mature_age(self) -> bool:
        return self.age_years >= MATURE_AGE_YEARS


@dataclass
class RuleResult:
    passed: bool
    explanation: str
    # a passing conclusive result ends the evaluation as qualified
    conclusive: bool = False


@dataclass
class QualificationResult:
    qualified: bool = False
    calculated_points: float = 0
    reasons: List[str] = field(default_factory=list)
    age_years: int = 0
    is_mature_age: bool = False
