"""Tests for loading the acronym dictionary."""
import json

import pytest

from hr_directory.services.acronyms import DEFAULT_ACRONYMS, load_acronyms


def test_defaults_are_used_without_a_path():
    table = load_acronyms()
    assert table["CEO"] == ["Chief Executive Officer"]
    assert table.keys() == DEFAULT_ACRONYMS.keys()


def test_file_replaces_defaults_and_normalizes(tmp_path):
    path = tmp_path / "acronyms.json"
    path.write_text(json.dumps({"boss": "Chief Executive Officer", "swe": ["Engineer"]}))
    table = load_acronyms(path)
    assert table == {"BOSS": ["Chief Executive Officer"], "SWE": ["Engineer"]}


def test_file_must_hold_an_object(tmp_path):
    path = tmp_path / "acronyms.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_acronyms(path)
