from types import SimpleNamespace

from admissions.core.progress import DRAFT_SECTIONS, calculate_draft_progress, section_score


def test_weights_sum_to_100():
    assert sum(s.weight for s in DRAFT_SECTIONS) == 100


def test_empty_form_scores_zero():
    assert calculate_draft_progress({}) == 0


def test_full_form_scores_100(full_form):
    assert calculate_draft_progress(full_form) == 100


def test_declined_declaration_counts_as_unanswered(full_form):
    full_form["declaration_accepted"] = False
    declined = calculate_draft_progress(full_form)
    del full_form["declaration_accepted"]
    absent = calculate_draft_progress(full_form)
    assert declined == absent == 85


def test_health_answers_only_count_when_true(full_form):
    full_form["has_disability"] = False
    full_form["has_special_needs"] = None
    # 1 of 3 answered: 10 / 3 = 3.33
    assert calculate_draft_progress(full_form) == 93


def test_zero_and_empty_scalars_are_unfilled(full_form):
    full_form["highest_grade_passed"] = 0
    full_form["school_subjects"] = []
    assert calculate_draft_progress(full_form) == 85


def test_partial_personal_section():
    form = {"first_name": "Ndapewa", "last_name": "Shikongo", "region": ""}
    # 2 of 8 personal fields: 25 * 2 / 8 = 6.25
    assert calculate_draft_progress(form) == 6


def test_rounds_half_up():
    # 1 of 8 personal fields (3.125) + 1 of 4 emergency fields (3.75) = 6.875 -> 7
    form = {"first_name": "A", "emergency_contact_name": "B"}
    assert calculate_draft_progress(form) == 7
    # 1 of 4 emergency fields (3.75) + 1 of 3 health (3.333) + 3 of 8 personal (9.375) = 16.458
    form = {"emergency_contact_name": "B", "has_disability": True,
            "first_name": "A", "last_name": "B", "phone": "1"}
    assert calculate_draft_progress(form) == 16
    # 2 of 4 emergency fields = 7.5 -> 8
    assert calculate_draft_progress({"emergency_contact_name": "B", "emergency_contact_town": "C"}) == 8


def test_attribute_objects_are_read(full_form):
    assert calculate_draft_progress(SimpleNamespace(**full_form)) == 100


def test_section_score():
    education = next(s for s in DRAFT_SECTIONS if s.name == "education")
    assert section_score({"school_subjects": [{"subject_name": "English"}]}, education) == 7.5
