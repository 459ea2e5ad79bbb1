from typing import Dict, List, Optional, Sequence, Tuple, Any

from admissions.core.models import read_field

# best to worst
SYMBOL_ORDER: Tuple[str, ...] = ("A*", "A", "B", "C", "D", "E", "F", "G", "U")

ENGLISH_ALIASES = ("english", "english language", "english first", "english second")
MATHS_ALIASES = ("mathematics", "maths", "math", "core mathematics")
SCIENCE_ALIASES = ("physical science", "science", "physics", "chemistry", "biology")
PREVOCATIONAL_ALIASES = ("prevocational", "pre-vocational", "technical")

EXAM_LEVELS: List[Dict[str, str]] = [
    {"value": "GCE_A_LEVEL", "label": "GCE A-Level"},
    {"value": "GCE_AS", "label": "GCE AS Level"},
    {"value": "GCE_O_LEVEL", "label": "GCE O-Level"},
    {"value": "IB_HL", "label": "IB Higher Level (HL)"},
    {"value": "IB_SL", "label": "IB Standard Level (SL)"},
    {"value": "NSSC_AS", "label": "NSSC AS (Advanced Subsidiary)"},
    {"value": "NSSCH", "label": "NSSC Higher (NSSCH)"},
    {"value": "NSSCO", "label": "NSSC Ordinary (NSSCO)"},
    {"value": "HIGCSE", "label": "HIGCSE (Higher IGCSE)"},
    {"value": "IGCSE", "label": "IGCSE (Cambridge)"},
    {"value": "NSC_HG", "label": "NSC Higher Grade (HG)"},
    {"value": "NSC_SG", "label": "NSC Standard Grade (SG)"},
]

_NSC_SYMBOLS = ["A [80-100]", "B [70-79]", "C [60-69]", "D [50-59]", "E [40-49]", "F [33.3-39]"]

SYMBOLS_BY_LEVEL: Dict[str, List[str]] = {
    "GCE_A_LEVEL": ["A", "B", "C", "D", "E", "U"],
    "GCE_AS": ["a", "b", "c", "d", "e", "u"],
    "GCE_O_LEVEL": ["A/1", "B/2", "C/3", "D/4", "E/5", "F/6", "G/7", "U"],
    "IB_HL": ["7", "6", "5", "4", "3", "2", "1"],
    "IB_SL": ["7", "6", "5", "4", "3", "2", "1"],
    "NSSC_AS": ["a", "b", "c", "d", "e", "f"],
    "NSSCH": ["1", "2", "3", "4", "5", "6", "7"],
    "NSSCO": ["A", "B", "C", "D", "E", "F", "G"],
    "HIGCSE": ["1", "2", "3", "4", "5", "6", "7"],
    "IGCSE": list(SYMBOL_ORDER),
    "NSC_HG": _NSC_SYMBOLS,
    "NSC_SG": _NSC_SYMBOLS,
}


def symbols_for_level(exam_level: str) -> List[str]:
    return list(SYMBOLS_BY_LEVEL.get(exam_level, SYMBOL_ORDER))


def meets_or_exceeds(required: str, actual: str) -> bool:
    """True when `actual` ranks equal to or better than `required`.
    Symbols outside SYMBOL_ORDER never satisfy a requirement."""
    if required not in SYMBOL_ORDER or actual not in SYMBOL_ORDER:
        return False
    return SYMBOL_ORDER.index(actual) <= SYMBOL_ORDER.index(required)


def find_subject_symbol(subjects: Sequence[Any], aliases: Sequence[str]) -> Optional[str]:
    # alias order takes priority over subject order
    for alias in aliases:
        needle = alias.lower()
        for s in subjects:
            name = read_field(s, "subject_name") or ""
            if needle in str(name).lower():
                return read_field(s, "symbol")
    return None
