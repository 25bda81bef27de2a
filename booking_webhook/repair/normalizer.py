"""
Normalizer that turns Python-literal booking payloads into strict JSON

Partner systems forward some booking fields as the ``repr()`` of a Python
dict or list: single-quoted strings, True/False/None and ``\\xNN`` escapes,
with HTML snippets as string values. Each pass below is a plain function
from text to text; ``normalize`` chains them and ``repair`` parses the
result.

Quote characters whose role is not known yet are parked behind placeholder
tokens and resolved in ``convert_delimiters``.
"""
import json
import logging
import re
from typing import Any, Optional

from .exceptions import RepairError, UnparseableError

logger = logging.getLogger(__name__)

# Placeholders are built from NUL, which strict JSON rejects inside strings,
# so no payload that would otherwise parse can contain them.
APOSTROPHE_STANDBY = "\x00SQ\x00"
ESCAPED_QUOTE_STANDBY = "\x00EQ\x00"
DOUBLE_QUOTE_STANDBY = "\x00DQ\x00"
DELIMITER_STANDBY = "\x00DL\x00"

LITERAL_TOKENS = {"True": "true", "False": "false", "None": "null"}

# A quoted string, or a literal token outside any string. Inside '...' an
# apostrophe with a word character on both sides is content.
_LITERAL_OR_STRING_RE = re.compile(
    r"'(?:\\.|(?<=\w)'(?=\w)|[^'\\])*'"
    r'|"(?:\\.|[^"\\])*"'
    r"|\b(True|False|None)\b"
)

# An odd number of backslashes means the final one starts an escape
_HEX_ESCAPE_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\x[0-9A-Fa-f]{2}")
_ESCAPED_APOSTROPHE_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\'")
_ESCAPED_QUOTE_RE = re.compile(r'(?<!\\)((?:\\\\)*)\\"')

# Contractions and possessives: O'Brien, Guest's
_CONTRACTION_RE = re.compile(r"(?<=\w)'(?=\w)")

# Runs after content apostrophes are parked, so a '...' span holds none
_QUOTED_SPAN_RE = re.compile(r"'[^']*'|\"[^\"]*\"")


def _substitute_literal(match: "re.Match[str]") -> str:
    token = match.group(1)
    return LITERAL_TOKENS[token] if token else match.group(0)


def substitute_literals(text: str) -> str:
    """Rewrite True/False/None outside strings to JSON and drop \\xNN escape sequences"""
    text = _HEX_ESCAPE_RE.sub(r"\1", text)
    return _LITERAL_OR_STRING_RE.sub(_substitute_literal, text)


def protect_apostrophes(text: str) -> str:
    """Park apostrophes that are string content rather than delimiters.

    Covers Python's escaped apostrophe and any apostrophe with a word
    character directly on both sides.
    """
    text = _ESCAPED_APOSTROPHE_RE.sub(lambda m: m.group(1) + APOSTROPHE_STANDBY, text)
    return _CONTRACTION_RE.sub(APOSTROPHE_STANDBY, text)


def _resolve_quoted_span(match: "re.Match[str]") -> str:
    span = match.group(0)
    if span[0] == "'":
        return span.replace('"', DOUBLE_QUOTE_STANDBY)
    # Python only double-quotes a string when it holds an apostrophe
    content = span[1:-1].replace("'", APOSTROPHE_STANDBY)
    return f"{DELIMITER_STANDBY}{content}{DELIMITER_STANDBY}"


def protect_double_quotes(text: str) -> str:
    """Decide the role of every double quote.

    Already escaped quotes get their own placeholder so they are not
    escaped twice. Double quotes inside a single-quoted string are content,
    including attribute values such as ``class="highlight"``. A double-quoted
    span outside any single-quoted string is a Python string, so its quotes
    become delimiters. Unpaired quotes left over stay content.
    """
    text = _ESCAPED_QUOTE_RE.sub(lambda m: m.group(1) + ESCAPED_QUOTE_STANDBY, text)
    text = _QUOTED_SPAN_RE.sub(_resolve_quoted_span, text)
    return text.replace('"', DOUBLE_QUOTE_STANDBY)


def convert_delimiters(text: str) -> str:
    """Swap the remaining single quotes for JSON delimiters and resolve placeholders"""
    text = text.replace("'", '"')
    text = text.replace(APOSTROPHE_STANDBY, "'")
    text = text.replace(DELIMITER_STANDBY, '"')
    text = text.replace(ESCAPED_QUOTE_STANDBY, '\\"')
    return text.replace(DOUBLE_QUOTE_STANDBY, '\\"')


def strict_parse(text: str) -> Any:
    """Parse text as strict JSON, raising UnparseableError on failure"""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise UnparseableError(
            reason=e.msg,
            position=e.pos,
            lineno=e.lineno,
            colno=e.colno,
            text=text,
        ) from e


def normalize(text: str, log: Optional[logging.Logger] = None) -> str:
    """Run the rewrite passes and return text that should be strict JSON"""
    log = log or logger

    if "\x00" in text:
        raise UnparseableError(
            reason="NUL character in payload",
            position=text.index("\x00"),
            text=text,
        )

    text = substitute_literals(text)
    log.debug("Step 1 (Python literals and hex escapes)")

    text = protect_apostrophes(text)
    log.debug("Step 2 (Content apostrophes to placeholder)")

    text = protect_double_quotes(text)
    log.debug("Step 3 (Double quotes to placeholder or delimiter)")

    text = convert_delimiters(text)
    log.debug("Step 4 (Single quotes to double quotes, placeholders resolved)")

    return text


def repair(text: str, log: Optional[logging.Logger] = None) -> Any:
    """
    Repair a quasi-JSON payload and parse it.

    Text that already parses as strict JSON is returned untouched.

    Args:
        text: Python-literal style dict or list, possibly holding HTML strings
        log: Logger for step diagnostics, defaults to this module's logger

    Returns:
        The parsed value (dict, list, str, number, bool or None)

    Raises:
        UnparseableError: If the rewritten text is still not valid JSON
    """
    log = log or logger

    if not isinstance(text, str):
        raise TypeError(f"repair() expects a string, got {type(text).__name__}")
    if not text.strip():
        raise UnparseableError(reason="Empty payload", position=0, text=text)

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        log.debug("Payload is not strict JSON, running repair passes")

    rewritten = normalize(text, log=log)
    try:
        return strict_parse(rewritten)
    except UnparseableError as e:
        log.debug(f"Strict parse failed after repair: {e.message}")
        raise


def clean_data(text: str, log: Optional[logging.Logger] = None) -> Any:
    """Repair a payload, logging the failure and returning None if it cannot be parsed"""
    log = log or logger
    try:
        return repair(text, log=log)
    except RepairError as e:
        log.error(f"Parsing error: {e.message}")
        log.error(f"Current state of string when error occurred: {e.details.get('preview', '')}")
        return None
