"""YAML scalar escaping for front matter values."""

import re

YAML_SPECIAL_CHARS = re.compile(r"[\[\]{}:>|*&!%@,]")
LINE_BREAKS = re.compile(r"\r?\n")


def escape_yaml_value(value: str) -> str:
    """Escape a value for use as ``key: <value>`` in front matter.

    Line breaks become single spaces and the result is trimmed. Values
    containing YAML indicator characters are double-quoted with backslashes
    and double quotes escaped; anything else is returned unquoted.
    """
    flattened = LINE_BREAKS.sub(" ", value).strip()

    if YAML_SPECIAL_CHARS.search(flattened):
        escaped = flattened.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return flattened
