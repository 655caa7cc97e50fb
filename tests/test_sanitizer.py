import pytest

from core.sanitizer import sanitize

BODY = '[{"Date":"01/01/2025","Time":"12:15","Food":"Soup"}]'


@pytest.mark.parametrize(
    "raw",
    [
        f"```json\n{BODY}\n```",
        f"```JSON\n{BODY}\n```",
        f"```\n{BODY}\n```",
        f"  \n```json\n  {BODY}  \n```\n\n",
        f"```json {BODY}```",
        f"```{BODY}```",
    ],
)
def test_strips_fences(raw):
    assert sanitize(raw) == BODY


@pytest.mark.parametrize("interior", ["42", "null", "true", "abc"])
def test_unlabeled_one_line_fence_keeps_interior(interior):
    assert sanitize(f"```{interior}```") == interior


def test_nested_fences_fully_removed():
    assert sanitize("```\n```json\n{}\n```\n```") == "{}"


def test_plain_text_only_trimmed():
    assert sanitize(f"\n\t {BODY}  \n") == BODY
    assert sanitize("not json at all") == "not json at all"


def test_interior_preserved():
    body = '{\n  "Food": "- Eggs\\n- Toast"\n}'
    assert sanitize(f"```json\n{body}\n```") == body


def test_missing_closing_fence():
    assert sanitize(f"```json\n{BODY}") == BODY


def test_none_and_empty():
    assert sanitize(None) == ""
    assert sanitize("   ") == ""


@pytest.mark.parametrize(
    "raw",
    [
        f"```json\n{BODY}\n```",
        BODY,
        "  {}  ",
        "",
        "```\n```",
        "plain",
        "```\n```json\n{}\n```\n```",
        "```42```",
    ],
)
def test_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once
