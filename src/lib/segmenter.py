"""
Line segmenter for POD markup

Classifies raw POD text line by line into typed blocks, locates named
sections and groups indented lines into code blocks. pod_isolate cuts the POD out of
a Perl source file before any of that happens.

Every function re-scans the text it is given; nothing is cached between
calls and nothing here raises on malformed input. Odd input simply yields
fewer or smaller results.

Example:
    >>> section = section_find("=head1 SYNOPSIS\\n\\n  use DBI;\\n", "synopsis")
    >>> [block.text for block in codeblocks_extract(section.text)]
    ['use DBI;']
"""

import re
import textwrap
from typing import Iterator, List, Optional, Tuple

from ..models.blocks import Block, CodeBlock, CodeLine, Directive, Heading, PlainLine, Section
from ..models.directives import DirectiveKind, directive_lookup


HEADING_PATTERN = re.compile(r'^=head([1-4])\s+(\S.*?)\s*$')
COMMAND_PATTERN = re.compile(r'^=([a-z]+)\b[ \t]*(.*?)\s*$')
# Two or more leading spaces or tabs, then something that is not whitespace
CODE_PATTERN = re.compile(r'^[ \t]{2,}(?=\S)')
# Any =command at the left margin opens a POD block in a Perl source file
POD_OPEN_PATTERN = re.compile(r'^=[a-zA-Z]')


def lines_iterate(text: str) -> Iterator[Tuple[int, int, str]]:
    """
    Yield (line_number, offset, line) for every line of text

    Offsets point at the first character of each line in text. A trailing
    carriage return is dropped from the yielded line but still counted in
    the offsets.
    """
    offset = 0
    for line_number, line in enumerate(text.split('\n'), start=1):
        yield line_number, offset, line.rstrip('\r')
        offset += len(line) + 1


def line_classify(line: str, line_number: int = 0, offset: int = 0) -> Block:
    """
    Classify a single line of POD

    Args:
        line: One line of text without its newline
        line_number: 1-based line number, carried into the block
        offset: Character offset of the line, carried into the block

    Returns:
        Heading for =head1..=head4 with text, Directive for a bare
        =pod/=cut/=over/=back/=item command, CodeLine for an indented
        non-blank line,
        PlainLine for everything else (blank lines and unknown =commands
        included)

    Example:
        >>> line_classify("=head2 Basic usage")
        Heading(level=2, text='Basic usage', line_number=0, offset=0)
        >>> line_classify("=over 4").kind
        <DirectiveKind.LIST_OPEN: 'over'>
    """
    heading = HEADING_PATTERN.match(line)
    if heading:
        return Heading(
            level=int(heading.group(1)),
            text=heading.group(2),
            line_number=line_number,
            offset=offset,
        )

    command = COMMAND_PATTERN.match(line)
    if command:
        spec = directive_lookup(command.group(1))
        if spec is not None:
            return Directive(
                kind=spec.kind,
                argument=command.group(2),
                line_number=line_number,
                offset=offset,
            )

    if CODE_PATTERN.match(line):
        return CodeLine(text=line, line_number=line_number, offset=offset)

    return PlainLine(text=line, line_number=line_number, offset=offset)


def blocks_segment(markup: Optional[str]) -> List[Block]:
    """
    Split markup into an ordered list of typed line blocks

    Absent or empty markup yields an empty list.
    """
    if not markup:
        return []
    return [line_classify(line, number, offset) for number, offset, line in lines_iterate(markup)]


def section_find(markup: Optional[str], name: str) -> Optional[Section]:
    """
    Locate a named section by its heading text

    Matches a heading of any level whose text equals name, ignoring case.
    The section body runs from the line after the heading up to the next
    heading of the same or a shallower level, a =cut directive, or the end
    of the document, whichever comes first. Deeper sub-headings stay inside
    the section.

    Args:
        markup: Raw POD text (None is treated as empty)
        name: Section heading to look for (e.g. "SYNOPSIS")

    Returns:
        Section with the body text and its offset, or None if no heading
        matches
    """
    if not markup:
        return None

    target = name.strip().casefold()
    heading: Optional[Heading] = None
    body_start = 0

    for block in blocks_segment(markup):
        if heading is None:
            if isinstance(block, Heading) and block.text.casefold() == target:
                heading = block
                newline = markup.find('\n', block.offset)
                body_start = len(markup) if newline == -1 else newline + 1
            continue

        if isinstance(block, Heading) and block.level <= heading.level:
            return Section(name=heading.text, text=markup[body_start:block.offset], offset=body_start)
        if isinstance(block, Directive) and block.kind is DirectiveKind.CUT:
            return Section(name=heading.text, text=markup[body_start:block.offset], offset=body_start)

    if heading is None:
        return None
    return Section(name=heading.text, text=markup[body_start:], offset=body_start)


def codeblock_close(run: List[Tuple[int, str]]) -> Optional[CodeBlock]:
    """
    Turn a run of (offset, line) code lines into a CodeBlock

    Strips the indentation the lines share. Returns None for an empty run.
    """
    if not run:
        return None
    code = textwrap.dedent('\n'.join(line for _, line in run))
    last_offset, last_line = run[-1]
    return CodeBlock(text=code, start=run[0][0], end=last_offset + len(last_line))


def codeblocks_extract(text: Optional[str]) -> List[CodeBlock]:
    """
    Collect every indentation-delimited code block in text

    A non-blank line indented by two or more columns opens or extends the
    current run; any other line, a blank or whitespace-only one included,
    closes it.

    Args:
        text: Document or section body to scan

    Returns:
        CodeBlocks in document order
    """
    blocks: List[CodeBlock] = []
    if not text:
        return blocks

    run: List[Tuple[int, str]] = []
    for _, offset, line in lines_iterate(text):
        if CODE_PATTERN.match(line):
            run.append((offset, line))
            continue
        block = codeblock_close(run)
        if block is not None:
            blocks.append(block)
        run = []

    block = codeblock_close(run)
    if block is not None:
        blocks.append(block)
    return blocks


def pod_isolate(source: Optional[str]) -> str:
    """
    Keep only the POD blocks of a Perl source file

    A block opens at any =command line at the left margin and runs up to
    and including the next =cut. Perl code between blocks (package
    statements, sub bodies, anything before or after __END__) is dropped.

    Example:
        >>> pod_isolate("package Foo;\\n1;\\n__END__\\n=head1 NAME\\n\\nFoo\\n=cut\\n")
        '=head1 NAME\\n\\nFoo\\n=cut'
    """
    if not source:
        return ''

    kept: List[str] = []
    inside = False
    for line_number, offset, line in lines_iterate(source):
        block = line_classify(line, line_number, offset)
        is_cut = isinstance(block, Directive) and block.kind is DirectiveKind.CUT

        if not inside:
            if is_cut or not POD_OPEN_PATTERN.match(line):
                continue
            inside = True

        kept.append(line)
        if is_cut:
            inside = False

    return '\n'.join(kept)
