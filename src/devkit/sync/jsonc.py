"""Reader for JSON with comments, the format editors use for settings files.

Accepts `//` line comments, `/* */` block comments and trailing commas before
a closing brace or bracket. Parsing only; writing goes through line edits so
that comments and layout are never reformatted.
"""

from __future__ import annotations

import json

__all__ = ["loads", "root_member_lines", "strip_comments", "strip_trailing_commas"]


def loads(text: str) -> object:
    """Parse JSONC text. Raises ValueError (json.JSONDecodeError included) on malformed input."""
    return json.loads(strip_trailing_commas(strip_comments(text)))


def root_member_lines(text: str, name: str) -> list[int]:
    """Zero-based line numbers on which a member called `name` of the root object starts.

    Members of nested objects and anything inside strings or comments are
    skipped. A well-formed document yields at most one line unless the name is
    duplicated.
    """
    found: list[int] = []
    open_brackets: list[str] = []
    i, n = 0, len(text)
    while i < n:
        char = text[i]
        if char == '"':
            end = _string_end(text, i)
            if open_brackets == ["{"] and _next_significant(text, end) == ":" and _decode(text[i:end]) == name:
                found.append(text.count("\n", 0, i))
            i = end
            continue
        comment_end = _comment_end(text, i)
        if comment_end > i:
            i = comment_end
            continue
        if char in "{[":
            open_brackets.append(char)
        elif char in "}]" and open_brackets:
            open_brackets.pop()
        i += 1
    return found


def strip_comments(text: str) -> str:
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        if text[i] == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
            continue
        comment_end = _comment_end(text, i)
        if comment_end > i:
            # newlines kept so decode errors report the original line numbers
            out.append("\n" * text.count("\n", i, comment_end))
            i = comment_end
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        char = text[i]
        if char == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
            continue
        if char == ",":
            j = i + 1
            while j < n and text[j].isspace():
                j += 1
            if j < n and text[j] in "}]":
                i += 1
                continue
        out.append(char)
        i += 1
    return "".join(out)


def _string_end(text: str, start: int) -> int:
    """Index just past the string literal opening at `start`, or len(text) if unterminated."""
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
        elif text[i] == '"':
            return i + 1
        else:
            i += 1
    return len(text)


def _comment_end(text: str, start: int) -> int:
    """Index just past the comment opening at `start`, or `start` when none opens there.

    A line comment ends before its newline.
    """
    if text.startswith("//", start):
        end = text.find("\n", start)
        return len(text) if end == -1 else end
    if text.startswith("/*", start):
        end = text.find("*/", start + 2)
        if end == -1:
            raise ValueError(f"Unterminated block comment at offset {start}")
        return end + 2
    return start


def _next_significant(text: str, start: int) -> str:
    """First character at or after `start` that is neither whitespace nor comment, or ''."""
    i = start
    while i < len(text):
        if text[i].isspace():
            i += 1
            continue
        comment_end = _comment_end(text, i)
        if comment_end == i:
            return text[i]
        i = comment_end
    return ""


def _decode(literal: str) -> str | None:
    try:
        value = json.loads(literal)
    except ValueError:
        return None
    return value if isinstance(value, str) else None
