"""Token detector — finds credential-shaped substrings in message text."""

import re
from typing import List

# 24 alphanumerics, 6 and 27 word characters, dot separated.
TOKEN_RE = re.compile(r"[A-Za-z\d]{24}\.[\w-]{6}\.[\w-]{27}", re.ASCII)


def find_tokens(text: str) -> List[str]:
    """Return every non-overlapping token match, left to right.

    Duplicates are kept. An empty list means there is nothing to report.
    """
    if not text:
        return []
    return TOKEN_RE.findall(text)
