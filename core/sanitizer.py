"""
core/sanitizer.py
────────────────────────────────────────────────────────────────────────
Models like to wrap JSON in markdown fences even when told not to:

    ```json
    [{"Date": "01/01/2025", ...}]
    ```

`sanitize()` peels those fences off, layer by layer, until the text no
longer starts with one. It is purely textual and never looks at whether
the interior is valid JSON.
"""
from __future__ import annotations

import re

# leading fence; a word right after it is a language tag (json, JSON,
# jsonc …) only when whitespace follows, so "```42```" keeps its 42
_OPEN_FENCE = re.compile(r"^```(?:[A-Za-z0-9_+-]+(?=\s))?[ \t]*\r?\n?")
_CLOSE_FENCE = re.compile(r"\r?\n?```$")


def sanitize(raw: str | None) -> str:
    text = (raw or "").strip()
    # each pass removes at least the opening ```, so this terminates
    while text.startswith("```"):
        text = _OPEN_FENCE.sub("", text, count=1)
        text = _CLOSE_FENCE.sub("", text, count=1)
        text = text.strip()
    return text
