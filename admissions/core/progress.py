import math
from dataclasses import dataclass
from typing import Any, Tuple

from admissions.core.models import read_field


@dataclass(frozen=True)
class ProgressSection:
    name: str
    weight: int
    fields: Tuple[str, ...] = ()
    array_fields: Tuple[str, ...] = ()
    boolean_fields: Tuple[str, ...] = ()

    @property
    def total_fields(self) -> int:
        return len(self.fields) + len(self.array_fields) + len(self.boolean_fields)


# weights sum to 100
DRAFT_SECTIONS: Tuple[ProgressSection, ...] = (
    ProgressSection(
        "personal", 25,
        fields=("first_name", "last_name", "date_of_birth", "gender", "national_id", "phone", "address", "region"),
    ),
    ProgressSection(
        "emergency", 15,
        fields=("emergency_contact_name", "emergency_contact_phone",
                "emergency_contact_relationship", "emergency_contact_town"),
    ),
    ProgressSection(
        "training", 20,
        fields=("trade_id", "preferred_training_mode", "preferred_level", "intake", "academic_year"),
    ),
    ProgressSection(
        "education", 15,
        fields=("highest_grade_passed",),
        array_fields=("school_subjects",),
    ),
    ProgressSection(
        "health", 10,
        boolean_fields=("has_disability", "has_special_needs", "has_chronic_diseases"),
    ),
    ProgressSection(
        "declaration", 15,
        boolean_fields=("declaration_accepted",),
    ),
)


def _scalar_filled(value: Any) -> bool:
    return bool(value) and value != "" and value != 0


def _array_filled(value: Any) -> bool:
    return value is not None and hasattr(value, "__len__") and len(value) > 0


def section_score(form_data: Any, section: ProgressSection) -> float:
    if section.total_fields == 0:
        return 0.0
    filled = sum(1 for f in section.fields if _scalar_filled(read_field(form_data, f)))
    filled += sum(1 for f in section.array_fields if _array_filled(read_field(form_data, f)))
    # only an explicit True counts; False reads as unanswered
    filled += sum(1 for f in section.boolean_fields if read_field(form_data, f) is True)
    return filled / section.total_fields * section.weight


def calculate_draft_progress(form_data: Any) -> int:
    """Completion percentage (0-100) of an application draft, rounded half up."""
    total = sum(section_score(form_data, s) for s in DRAFT_SECTIONS)
    return int(math.floor(total + 0.5))
