"""Role and department abbreviations used to widen directory search."""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

AcronymMap = Mapping[str, Sequence[str]]

DEFAULT_ACRONYMS: dict[str, list[str]] = {
    "SWE": ["Software Engineer", "Senior Software Engineer"],
    "SE": ["Software Engineer", "Senior Software Engineer"],
    "SSE": ["Senior Software Engineer"],
    "PM": ["Product Manager", "Project Manager"],
    "CEO": ["Chief Executive Officer"],
    "CTO": ["Chief Technology Officer"],
    "CFO": ["Chief Financial Officer"],
    "COO": ["Chief Operating Officer"],
    "HR": ["Human Resources", "HR Specialist", "Director of Human Resources"],
    "EM": ["Engineering Manager"],
    "ENG": ["Engineering", "Engineering Manager"],
    "FIN": ["Finance", "Finance Manager", "Financial"],
    "FM": ["Finance Manager"],
    "FA": ["Financial Analyst"],
    "DEV": ["Developer", "Software Developer"],
    "QA": ["Quality Assurance", "QA Engineer"],
    "UX": ["UX Designer", "User Experience Designer"],
    "UI": ["UI Designer", "User Interface Designer"],
    "DS": ["Data Scientist"],
    "ML": ["Machine Learning Engineer"],
    "SRE": ["Site Reliability Engineer"],
    "DBA": ["Database Administrator"],
    "SA": ["System Administrator"],
    "BA": ["Business Analyst"],
    "SM": ["Scrum Master"],
    "PO": ["Product Owner"],
    "VP": ["Vice President"],
    "DIR": ["Director"],
    "MGR": ["Manager", "Engineering Manager", "Finance Manager", "Product Manager", "Project Manager"],
    "LEAD": ["Lead", "Team Lead", "Tech Lead"],
    "ARCH": ["Architect", "Software Architect", "Solution Architect"],
    "CONS": ["Consultant", "Senior Consultant"],
    "SPEC": ["Specialist"],
    "COORD": ["Coordinator"],
    "SUPER": ["Supervisor"],
    "EXEC": ["Executive"],
    "ADMIN": ["Administrator"],
    "ANALYST": ["Analyst"],
    "DESIGNER": ["Designer"],
    "WRITER": ["Writer", "Technical Writer"],
    "SUPPORT": ["Support", "Customer Support"],
    "SALES": ["Sales", "Sales Manager", "Account Manager"],
    "MARKETING": ["Marketing", "Marketing Manager"],
    "OPS": ["Operations", "Operations Manager"],
    "SEC": ["Security", "Security Engineer"],
    "COMPLIANCE": ["Compliance", "Compliance Officer"],
    "LEGAL": ["Legal", "Legal Counsel"],
    "COMMS": ["Communications", "Communications Manager"],
    "PR": ["Public Relations", "PR Manager"],
}


def normalize_acronyms(raw: Mapping[str, Sequence[str] | str]) -> dict[str, list[str]]:
    """Upper-case the tokens and coerce single phrases into lists."""

    normalized: dict[str, list[str]] = {}
    for token, phrases in raw.items():
        key = str(token).strip().upper()
        if not key:
            continue
        if isinstance(phrases, str):
            phrases = [phrases]
        normalized[key] = [str(phrase) for phrase in phrases if str(phrase).strip()]
    return normalized


def load_acronyms(path: str | Path | None = None) -> dict[str, list[str]]:
    """
    Return the acronym dictionary.

    With no path the bundled defaults are used. A JSON file must hold an
    object mapping each token to a phrase or a list of phrases; it replaces
    the defaults entirely.
    """

    if path is None:
        return normalize_acronyms(DEFAULT_ACRONYMS)

    with Path(path).open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Acronym file {path} must contain a JSON object")
    return normalize_acronyms(data)
