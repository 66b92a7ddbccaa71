"""Tests for the ranked employee search."""
from hr_directory.services.search import fuzzy_threshold, rank, title_initials

from conftest import Person


def ids(people):
    return [p.id for p in people]


def test_blank_query_returns_input_unchanged(staff):
    assert rank(staff, "") == staff
    assert rank(staff, "   ", exact=True) == staff


def test_exact_mode_is_plain_substring_filter(staff):
    # Michael Chen only matches through the "Engineering" department
    assert ids(rank(staff, "ENGINEER", exact=True)) == [2, 5, 6, 7]


def test_acronym_hits_come_first(staff):
    other_ceo = Person(20, "Zed Zimmer", "Chief Executive Officer, EU", "Executive", "zed@company.com", 1)
    ranked = rank(staff + [other_ceo], "CEO")
    assert ids(ranked)[:2] == [1, 20]


def test_multiword_acronym(staff):
    vp = Person(30, "Nina Brooks", "Vice President", "Engineering", "nina.brooks@company.com", 1)
    ranked = rank(staff + [vp], "VP ENG")
    assert ranked[0].id == 30


def test_title_initialism(staff):
    assert title_initials("Director of Human Resources") == "dohr"
    assert rank(staff, "dohr")[0].id == 4


def test_title_and_name_hits_precede_department_hits(staff):
    assert ids(rank(staff, "engineer"))[:4] == [5, 6, 7, 2]


def test_fuzzy_match_tolerates_typos(staff):
    ranked = rank(staff, "Jesica")
    assert ranked[0].id == 7


def test_results_are_unique(staff):
    ranked = rank(staff, "eng")
    assert len(ids(ranked)) == len(set(ids(ranked)))


def test_injected_acronyms_replace_defaults(staff):
    ranked = rank(staff, "BOSS", acronyms={"BOSS": ["Chief Executive Officer"]})
    assert ranked[0].id == 1
    assert rank(staff, "CEO", acronyms={})[0].id == 1  # still found by initials


def test_input_is_not_mutated(staff):
    before = list(staff)
    rank(staff, "manager")
    assert staff == before


def test_short_queries_use_relaxed_threshold():
    assert fuzzy_threshold("abc") == 0.6
    assert fuzzy_threshold("abcd") == 0.4
