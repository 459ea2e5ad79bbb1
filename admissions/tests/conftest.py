from datetime import date

import pytest

from admissions.core.models import EntryRequirement, SchoolSubject, SymbolPointRule

TODAY = date(2025, 6, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def symbol_points():
    return [
        SymbolPointRule("IGCSE", "A*", 8),
        SymbolPointRule("IGCSE", "A", 7),
        SymbolPointRule("IGCSE", "B", 5),
        SymbolPointRule("IGCSE", "C", 4),
        SymbolPointRule("NSSCO", "B", 5),
        SymbolPointRule("NSSCO", "C", 4),
        SymbolPointRule("NSSCO", "D", 3),
    ]


@pytest.fixture
def subjects():
    return [
        SchoolSubject("English Second Language", "B", "NSSCO"),
        SchoolSubject("Mathematics", "C", "NSSCO"),
        SchoolSubject("Physical Science", "D", "NSSCO"),
    ]


@pytest.fixture
def make_requirement():
    def _make(**kwargs):
        kwargs.setdefault("trade_id", "electrical")
        kwargs.setdefault("level", 1)
        return EntryRequirement(**kwargs)
    return _make


@pytest.fixture
def full_form():
    return {
        "first_name": "Ndapewa",
        "last_name": "Shikongo",
        "date_of_birth": "2006-02-11",
        "gender": "Female",
        "national_id": "06021100123",
        "phone": "+264811234567",
        "address": "Erf 12, Katutura",
        "region": "Khomas",
        "emergency_contact_name": "Selma Shikongo",
        "emergency_contact_phone": "+264817654321",
        "emergency_contact_relationship": "Mother",
        "emergency_contact_town": "Windhoek",
        "trade_id": "electrical",
        "preferred_training_mode": "Full-time",
        "preferred_level": 1,
        "intake": "January",
        "academic_year": "2026",
        "highest_grade_passed": 12,
        "school_subjects": [
            {"subject_name": "English Second Language", "symbol": "B", "exam_level": "NSSCO"},
            {"subject_name": "Mathematics", "symbol": "C", "exam_level": "NSSCO"},
        ],
        "has_disability": True,
        "has_special_needs": True,
        "has_chronic_diseases": True,
        "declaration_accepted": True,
    }
