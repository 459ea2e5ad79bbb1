from typing import List

from admissions.core.models import EntryRequirement
from admissions.core.rules import (
    AdmissionRule,
    MatureAgeEntryRule,
    PreviousLevelRule,
    MinGradeRule,
    MinPointsRule,
    SubjectSymbolRule,
)
from admissions.core.symbols import (
    ENGLISH_ALIASES,
    MATHS_ALIASES,
    SCIENCE_ALIASES,
    PREVOCATIONAL_ALIASES,
)


class RuleFactory:
    """
    Build the ordered rule list for one entry requirement.
    The order here is the order reasons are reported in.
    Unset criteria (None, empty, zero) produce no rule.
    """

    def from_requirement(self, req: EntryRequirement) -> List[AdmissionRule]:
        rules: List[AdmissionRule] = []

        # 1) mature age track, may end evaluation early
        if req.mature_age_entry:
            rules.append(MatureAgeEntryRule(req.mature_min_age, req.mature_min_experience_years))

        # 2) previous level, grade and points
        if req.requires_previous_level:
            rules.append(PreviousLevelRule(req.previous_level_required))
        if req.min_grade:
            rules.append(MinGradeRule(req.min_grade))
        if req.min_points:
            rules.append(MinPointsRule(req.min_points))

        # 3) subject symbols
        if req.english_symbol:
            rules.append(SubjectSymbolRule("English", ENGLISH_ALIASES, req.english_symbol))
        if req.maths_symbol:
            rules.append(SubjectSymbolRule("Mathematics", MATHS_ALIASES, req.maths_symbol))
        if req.science_symbol:
            rules.append(SubjectSymbolRule("Science", SCIENCE_ALIASES, req.science_symbol))
        if req.prevocational_symbol:
            rules.append(SubjectSymbolRule(
                "Pre-vocational", PREVOCATIONAL_ALIASES, req.prevocational_symbol, required=False,
            ))

        return rules
