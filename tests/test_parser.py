import json
import logging

import pytest

from core.errors import MalformedResponseError
from core.parser import Other, Sequence, SingleObject, classify, parse

BREAKFAST = {"Date": "17/03/2025", "Time": "08:30", "Food": "- Oatmeal", "Drinks": "- Coffee"}
LUNCH = {"Date": "17/03/2025", "Time": "12:15", "Food": "- Soup", "BristolForm": 4}
DINNER = {"Date": "17/03/2025", "Time": "20:00", "Food": "- Pasta", "Comments": None}


# ── shape dispatch ──────────────────────────────────────────────────
def test_classify_shapes():
    assert isinstance(classify([]), Sequence)
    assert isinstance(classify([BREAKFAST]), Sequence)
    assert isinstance(classify(BREAKFAST), SingleObject)
    assert isinstance(classify({"date": "01/01/2025"}), SingleObject)
    for value in ({}, None, 3, "text", {"Food": "no date"}, {"Date": ""}):
        assert isinstance(classify(value), Other)


# ── parse ───────────────────────────────────────────────────────────
def test_array_keeps_length_and_order():
    entries = parse(json.dumps([DINNER, BREAKFAST, LUNCH]))
    assert [e.time for e in entries] == ["20:00", "08:30", "12:15"]
    assert [e.food for e in entries] == ["- Pasta", "- Oatmeal", "- Soup"]


def test_single_object_becomes_one_entry():
    entries = parse(json.dumps(LUNCH))
    assert len(entries) == 1
    e = entries[0]
    assert (e.date, e.time, e.food, e.bristol_form) == ("17/03/2025", "12:15", "- Soup", 4)
    assert e.drinks is None and e.key_ingredients is None


@pytest.mark.parametrize("raw", ["{}", "null", "[]", '"nothing to log"', '{"Food": "x"}'])
def test_empty_shapes(raw):
    assert parse(raw) == []


def test_missing_optional_fields_default():
    (e,) = parse('[{"Date": "01/01/2025", "Time": "12:15"}]')
    assert e.food is None
    assert e.bowel_count is None
    assert e.to_row()[2:] == [""] * 10


def test_array_elements_without_date_are_kept():
    # the pipeline, not the parser, decides what is complete
    entries = parse('[{"Food": "- Apple"}, {"Date": "01/01/2025", "Time": "08:30"}]')
    assert len(entries) == 2
    assert not entries[0].is_complete
    assert entries[1].is_complete


def test_non_object_elements_keep_their_slot(caplog):
    with caplog.at_level(logging.WARNING):
        entries = parse(json.dumps([BREAKFAST, "oops", 7, LUNCH]))
    assert len(entries) == 4
    assert [e.time for e in entries] == ["08:30", None, None, "12:15"]
    assert [e.is_complete for e in entries] == [True, False, False, True]
    assert "expected an object" in caplog.text


def test_null_element_counts_toward_length():
    entries = parse('[{"Date":"01/01/2025","Time":"08:30"}, null]')
    assert len(entries) == 2
    assert entries[1].to_row() == [""] * 12


def test_non_finite_scores_become_empty_cells():
    (e,) = parse('[{"Date":"01/01/2025","Time":"08:30","BristolForm":NaN,"BowelCount":Infinity}]')
    assert e.bristol_form is None
    assert e.bowel_count is None
    assert e.to_row()[5:7] == ["", ""]


@pytest.mark.parametrize("raw", ['[{"Date": "01/01/2025", "Time": "08', "not json", ""])
def test_malformed_raises_with_raw(raw):
    with pytest.raises(MalformedResponseError) as info:
        parse(raw)
    assert info.value.raw == raw


def test_out_of_range_scores_pass_through():
    (e,) = parse('[{"Date": "01/01/2025", "Time": "08:30", "BristolForm": 9, "BowelUrgency": "3"}]')
    assert e.bristol_form == 9
    assert e.bowel_urgency == "3"
