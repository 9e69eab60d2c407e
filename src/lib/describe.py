"""
One-line module description from POD

Looks in the NAME section first ("Module::Name - what it does"), then the
first paragraph of DESCRIPTION, and otherwise falls back to a fixed default.
"""

import re
from typing import Optional

from ..config import appsettings
from .log import logger
from .segmenter import section_find


# "DBI - Database independent interface": name token, dash, description
NAME_DASH_PATTERN = re.compile(r'^\s*\S+\s*-\s*(.+)$', re.MULTILINE)


def nameSection_describe(markup: str) -> Optional[str]:
    """Description taken from the NAME section, if it has one"""
    section = section_find(markup, 'NAME')
    if section is None:
        return None

    content = section.text.strip()
    dashed = NAME_DASH_PATTERN.search(content)
    if dashed:
        return dashed.group(1).strip()

    # First line that is more than the bare module name
    for line in content.split('\n'):
        trimmed = line.strip()
        if trimmed and len(trimmed.split()) > 1:
            return trimmed
    return None


def descriptionSection_describe(markup: str) -> Optional[str]:
    """First paragraph of the DESCRIPTION section with whitespace collapsed"""
    section = section_find(markup, 'DESCRIPTION')
    if section is None:
        return None

    paragraph = re.split(r'\n[ \t]*\n', section.text.strip(), maxsplit=1)[0]
    collapsed = ' '.join(paragraph.split())
    return collapsed or None


def description_extract(markup: Optional[str]) -> str:
    """
    Derive a one-line description of the documented module

    Args:
        markup: Raw POD text (None is treated as empty)

    Returns:
        Description text; the configured default when nothing fits or on
        internal failure

    Example:
        >>> description_extract("=head1 NAME\\n\\nDBI - Database independent interface\\n")
        'Database independent interface'
    """
    if not markup:
        return appsettings.module_description_default

    try:
        description = nameSection_describe(markup) or descriptionSection_describe(markup)
    except Exception as e:
        logger.warning(f"Failed to extract module description: {e}")
        return appsettings.module_description_default

    return description or appsettings.module_description_default
