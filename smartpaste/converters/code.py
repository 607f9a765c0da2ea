"""Fenced code blocks with a best-effort language tag."""

from __future__ import annotations

FENCE = "```"


def detect_code_language(text: str) -> str:
    """Guess a Markdown info string for *text*; ``""`` when unsure.

    Checks run in a fixed order and the first hit wins, so a Java snippet
    containing ``function `` in a comment is reported as javascript.
    """
    if "#!/usr/bin/env python" in text or ("def " in text and ":\n" in text):
        return "python"
    if "import " in text and " from " in text:
        return "python"
    if "console.log" in text or "function " in text or "=>" in text:
        return "javascript"
    if "#include" in text or "int main" in text:
        return "c"
    if "public static void main" in text:
        return "java"
    if "struct " in text and "{" in text:
        return "swift"
    return ""


def to_fenced_code_block(text: str, language: str | None = None) -> str:
    """Wrap *text* in triple-backtick fences.

    Tabs become two spaces and the body always ends with exactly one newline
    before the closing fence.
    """
    lang = detect_code_language(text) if language is None else language
    body = text.replace("\t", "  ").rstrip("\r\n") + "\n"
    return f"{FENCE}{lang}\n{body}{FENCE}"
