"""
Title and description inference for code blocks

Pure helpers shared by the EXAMPLES pass and the whole-document pass of the
extractor. They only look at the context string and the block's offsets
within it.
"""

from typing import List, Optional

from ..config import appsettings
from ..models.blocks import Directive, Heading, PlainLine
from .segmenter import line_classify


def lines_before(context: str, start: int, window: int) -> List[str]:
    """
    Whole lines inside the window of characters preceding start

    A line cut in half by the window edge is dropped.
    """
    window_start = max(0, start - window)
    lines = context[window_start:start].split('\n')
    if window_start > 0 and context[window_start - 1] != '\n':
        lines = lines[1:]
    return [line.rstrip('\r') for line in lines]


def title_infer(context: str, start: int) -> Optional[str]:
    """
    Infer a title for the code block starting at offset start

    The nearest heading inside the look-behind window wins when it is
    =head2..=head4; the search stops at the first heading of any level.
    Without a sub-heading, the closest non-blank line before the block is used when
    it is plain text shorter than the configured maximum; directive lines
    are skipped on the way up.

    Args:
        context: Section body or whole document the block was found in
        start: Offset of the block's first line within context

    Returns:
        Title text, or None when the context offers nothing usable
    """
    lines = lines_before(context, start, appsettings.title_window)

    for line in reversed(lines):
        block = line_classify(line)
        if isinstance(block, Heading):
            # A nearer =head1 hides any sub-heading above it
            if block.level >= 2:
                return block.text
            break

    for line in reversed(lines):
        if not line.strip():
            continue
        block = line_classify(line)
        if isinstance(block, Directive):
            continue
        if isinstance(block, PlainLine) and not block.text.startswith('='):
            text = block.text.strip()
            if len(text) < appsettings.title_max_length:
                return text
        return None

    return None


def description_infer(context: str, end: int) -> Optional[str]:
    """
    Infer a description from the prose that follows a code block

    Plain lines after the block are trimmed and joined with single spaces.
    Blank lines before any text are skipped; the first blank line after
    some text, any =command line, or a new code line ends the description.
    Accumulation stops once the text grows past the configured maximum.

    Args:
        context: Section body or whole document the block was found in
        end: Offset just past the block's last line within context

    Returns:
        Description text, or None if it is too short to be useful
    """
    after = context[end:end + appsettings.description_window]
    description = ''

    for line in after.split('\n'):
        block = line_classify(line.rstrip('\r'))
        if isinstance(block, PlainLine) and not block.text.strip():
            if description:
                break
            continue
        if not isinstance(block, PlainLine) or block.text.startswith('='):
            break

        trimmed = block.text.strip()
        description = f"{description} {trimmed}" if description else trimmed
        if len(description) > appsettings.description_max_length:
            break

    if len(description) <= appsettings.description_min_length:
        return None
    return description
