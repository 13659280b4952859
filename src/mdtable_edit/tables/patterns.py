"""Compiled regex patterns for pipe-table detection.

The separator pattern is deliberately simple: it only checks the character
set of the line, not column counts or dash runs.
"""

import re

# ─── Table Patterns ───────────────────────────────────────────────────────────

# Separator row such as "| --- | :-: |" or "|---|---|"
SEPARATOR_ROW_RE = re.compile(r"^\s*(?=[^|]*\|)[\s|:\-]+$")

# Document line terminators (CRLF or LF)
LINE_SPLIT_RE = re.compile(r"\r?\n")

# Everything that is not an ASCII letter; stripped when deriving identifiers
NON_LETTER_RE = re.compile(r"[^a-zA-Z]")

# Line terminators kept as separate fields when splitting (CRLF or LF)
LINE_TERMINATOR_RE = re.compile(r"(\r?\n)")
