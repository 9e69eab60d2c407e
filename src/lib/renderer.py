"""
Renderer for POD markup

Transforms a POD document into normalized Markdown:

- =head1..=head4 become #..#### headings
- I<>, B<>, C<> become *italic*, **bold** and `code`; L<> is unwrapped
- indented runs become fenced ```perl blocks
- bare =pod, =cut, =over, =back and =item lines are dropped
  (the text of an =item line is kept)
- three or more blank lines in a row collapse to one

Rendering is best effort: any internal failure is logged and an empty
string is returned instead of partial output.

Example:
    >>> pod_renderer.render("=head1 NAME\\n\\nB<DBI> - databases\\n")
    '# NAME\\n\\n**DBI** - databases'
"""

import re
import textwrap
from typing import Callable, Dict, List, Optional, Pattern

from ..config import appsettings
from ..models.blocks import CodeLine, Directive, Heading
from ..models.directives import directive_lookup
from .log import LOG, logger
from .segmenter import blocks_segment


# Formatting code letter -> Markdown template
INLINE_TEMPLATES: Dict[str, str] = {
    'I': '*{}*',
    'B': '**{}**',
    'C': '`{}`',
    'L': '{}',
}

# C<< $obj->method >> style spans; longest delimiters first
DOUBLE_ANGLE_PATTERNS: List[Pattern[str]] = [
    re.compile(rf'\b([IBCL]){"<" * n}\s+(.+?)\s+{">" * n}')
    for n in (4, 3, 2)
]

# Innermost single-angle span; nested spans resolve over repeated passes
SINGLE_ANGLE_PATTERN = re.compile(r'\b([IBCL])<([^<>]+)>')

# Upper bound on nesting depth resolved for single-angle spans
INLINE_MAX_PASSES = 8

MIN_COLLAPSED_RUN = 3


def inline_substitute(match: 're.Match[str]') -> str:
    """Replace one formatting span with its Markdown equivalent"""
    return INLINE_TEMPLATES[match.group(1)].format(match.group(2))


def inline_render(text: str) -> str:
    """
    Translate POD formatting codes in a line of text

    Example:
        >>> inline_render("Use C<< $dbh->do >> or B<I<never>>")
        'Use `$dbh->do` or ***never***'
    """
    for pattern in DOUBLE_ANGLE_PATTERNS:
        text = pattern.sub(inline_substitute, text)

    for _ in range(INLINE_MAX_PASSES):
        rendered = SINGLE_ANGLE_PATTERN.sub(inline_substitute, text)
        if rendered == text:
            break
        text = rendered
    return text


def blanklines_collapse(text: str) -> str:
    """
    Collapse every run of three or more blank lines into a single blank line

    Runs of one or two blank lines are kept as they are. Applying this
    twice gives the same result as applying it once.
    """
    result: List[str] = []
    blanks: List[str] = []

    def blanks_flush() -> None:
        result.extend([''] if len(blanks) >= MIN_COLLAPSED_RUN else blanks)
        blanks.clear()

    for line in text.split('\n'):
        if not line.strip():
            blanks.append(line)
            continue
        blanks_flush()
        result.append(line)
    blanks_flush()

    return '\n'.join(result)


class Renderer:
    """
    Renders POD markup as Markdown

    Holds no state; a single shared instance (``pod_renderer``) is safe to use
    from any thread.
    """

    def __init__(self, inline: Callable[[str], str] = inline_render) -> None:
        """
        Args:
            inline: Line-level formatting translator applied to every line
        """
        self.inline = inline

    def render(self, markup: Optional[str]) -> str:
        """
        Render a POD document as Markdown

        Args:
            markup: Raw POD text (None is treated as empty)

        Returns:
            Normalized Markdown with surrounding whitespace trimmed, or an
            empty string for empty input or on internal failure
        """
        if not markup:
            return ''

        try:
            lines = self.lines_render(markup)
            rendered = blanklines_collapse('\n'.join(lines)).strip()
        except Exception as e:
            logger.warning(f"Failed to render POD: {e}")
            return ''

        LOG(f"Rendered {len(markup)} characters of POD to {len(rendered)} characters of Markdown", level=2)
        return rendered

    def lines_render(self, markup: str) -> List[str]:
        """Render every segmented block to output lines, fencing code runs"""
        lines: List[str] = []
        run: List[str] = []

        for block in blocks_segment(markup):
            if isinstance(block, CodeLine):
                run.append(block.text)
                continue

            lines.extend(self.codeblock_fence(run))
            run = []

            if isinstance(block, Heading):
                lines.append(f"{'#' * block.level} {self.inline(block.text)}")
            elif isinstance(block, Directive):
                # Only =item carries content; other arguments are list indents or ignored text
                spec = directive_lookup(block.kind.value)
                if spec is not None and spec.keeps_text and block.argument:
                    lines.append(self.inline(block.argument))
            elif block.text.strip():
                lines.append(self.inline(block.text))
            else:
                lines.append('')

        # Document ended inside a code run
        lines.extend(self.codeblock_fence(run))
        return lines

    def codeblock_fence(self, run: List[str]) -> List[str]:
        """
        Wrap a run of indented lines in a fenced code block

        The shared indentation is stripped.
        """
        if not run:
            return []

        fenced = [appsettings.fence_open()]
        fenced.extend(self.inline(line) for line in textwrap.dedent('\n'.join(run)).split('\n'))
        fenced.append('```')
        return fenced


# Singleton instance - holds no state
pod_renderer = Renderer()


def pod_render(markup: Optional[str]) -> str:
    """Render POD markup with the shared Renderer"""
    return pod_renderer.render(markup)
