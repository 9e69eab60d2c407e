"""
Usage example extraction from POD

Runs three independent passes over the raw markup and concatenates their
results in this order:

1. SYNOPSIS section: every code block, titled "Synopsis"
2. EXAMPLES (or EXAMPLE) section: every code block, titled from context
3. Whole document: every code block that looks like Perl

Passes do not deduplicate against each other, so a SYNOPSIS snippet that
also looks like Perl is reported by pass 1 and again by pass 3.

Example:
    >>> pod = "=head1 SYNOPSIS\\n\\n  use DBI;\\n  my $dbh = DBI->connect($dsn);\\n"
    >>> [example.title for example in example_extractor.extract(pod)]
    ['Synopsis', 'Code Example']
"""

from typing import List, Optional

from ..config import appsettings
from ..models.examples import UsageExample
from .classifier import source_looksLike, signatures_match
from .context import description_infer, title_infer
from .log import LOG, logger
from .segmenter import codeblocks_extract, section_find


class Extractor:
    """
    Extracts UsageExample records from POD markup

    Holds no state; a single shared instance (``example_extractor``) is safe to use
    from any thread.
    """

    def extract(self, markup: Optional[str]) -> List[UsageExample]:
        """
        Extract every usage example from a POD document

        Args:
            markup: Raw POD text (None is treated as empty)

        Returns:
            Examples from the synopsis, examples and whole-document passes,
            in that order. Any internal failure is logged and yields an
            empty list.
        """
        if not markup:
            return []

        try:
            examples: List[UsageExample] = []
            examples.extend(self.synopsis_extract(markup))
            examples.extend(self.examplesSection_extract(markup))
            examples.extend(self.document_scan(markup))
        except Exception as e:
            logger.warning(f"Failed to parse usage examples: {e}")
            return []

        LOG(f"Parsed {len(examples)} usage examples from POD", level=2)
        return examples

    def synopsis_extract(self, markup: str) -> List[UsageExample]:
        """Every code block in the SYNOPSIS section, with a fixed title and description"""
        section = section_find(markup, 'SYNOPSIS')
        if section is None:
            return []

        return [
            UsageExample(
                title=appsettings.synopsis_title,
                code=block.text.strip(),
                language=appsettings.language_tag,
                description=appsettings.synopsis_description,
            )
            for block in codeblocks_extract(section.text)
            if block.text.strip()
        ]

    def examplesSection_extract(self, markup: str) -> List[UsageExample]:
        """
        Every code block in the EXAMPLES (or EXAMPLE) section

        Titles come from the nearest sub-heading or label line inside the
        section, falling back to "Example N" by position in this pass.
        """
        section = section_find(markup, 'EXAMPLES') or section_find(markup, 'EXAMPLE')
        if section is None:
            return []

        examples: List[UsageExample] = []
        for index, block in enumerate(codeblocks_extract(section.text), start=1):
            code = block.text.strip()
            if not code:
                continue
            title = title_infer(section.text, block.start) or f"Example {index}"
            examples.append(
                UsageExample(
                    title=title,
                    code=code,
                    language=appsettings.language_tag,
                    description=description_infer(section.text, block.end),
                )
            )
        return examples

    def document_scan(self, markup: str) -> List[UsageExample]:
        """
        Every code block anywhere in the document that looks like Perl

        Blocks of the configured minimum length or shorter are ignored.
        """
        examples: List[UsageExample] = []
        for block in codeblocks_extract(markup):
            code = block.text.strip()
            if len(code) <= appsettings.code_min_length or not source_looksLike(code):
                continue
            LOG(f"Code block at offset {block.start} matched {signatures_match(code)}", level=3)
            examples.append(
                UsageExample(
                    title=title_infer(markup, block.start) or appsettings.document_fallback_title,
                    code=code,
                    language=appsettings.language_tag,
                    description=description_infer(markup, block.end),
                )
            )
        return examples


# Singleton instance - holds no state
example_extractor = Extractor()


def examples_extract(markup: Optional[str]) -> List[UsageExample]:
    """Extract usage examples with the shared Extractor"""
    return example_extractor.extract(markup)
