# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Formatting helpers for tokenizer error messages.

Characters are shown in single quotes and strings in double quotes, so a
message such as `Expected string, found '='` or
`Unclosed string at end-of-input (left: "''", expected right: "''")` stays
unambiguous even when the offending text is itself a quote.
"""
import json


def quote_char(char: str) -> str:
    """Render a single character in single quotes, escaping as needed."""
    if char in ("'", "\\"):
        return f"'\\{char}'"
    if not char.isprintable():
        return f"'{char.encode('unicode_escape').decode('ascii')}'"
    return f"'{char}'"


def quote_str(text: str) -> str:
    """Render a string in double quotes with JSON-style escaping."""
    return json.dumps(text, ensure_ascii=False)
