"""Tag locator: finds `//marker(...)` occurrences in arbitrary source text."""

import re
from typing import Iterator

from codizer.parser.base import RawTag


def tag_pattern(marker: str) -> re.Pattern:
    """Compile the pattern for one marker family.

    The body ends at the first `)`: tag bodies may contain brackets and
    braces but never parentheses.
    """
    return re.compile(rf"//{re.escape(marker)}\((.*?)\)", re.DOTALL)


def locate_tags(text: str, marker: str) -> Iterator[RawTag]:
    """Yield every tag for `marker` in order of appearance.

    An occurrence without a closing `)` is not a tag and is skipped.
    """
    for match in tag_pattern(marker).finditer(text):
        yield RawTag(
            name=marker,
            body=match.group(1),
            start_offset=match.start(),
            end_offset=match.end(),
        )
