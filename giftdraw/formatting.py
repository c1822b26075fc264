import re

# Numeric list prefixes people paste along with names: "1. ", "(2) ", "3 - ", "4: ", "05) - "
_NUMERIC_PREFIX = re.compile(r"^\s*[(\[]?\s*\d+\s*[)\]]?\s*[:.\-–—)]*\s*")


def format_display_name(name: str) -> str:
    if not name:
        return ""
    return _NUMERIC_PREFIX.sub("", name, count=1).strip()
