"""
Segmenter tests

Tests line classification, section lookup and indented code block
extraction.
"""

import pytest

from poddown.lib.segmenter import (
    blocks_segment,
    codeblocks_extract,
    line_classify,
    pod_isolate,
    section_find,
)
from poddown.models import CodeLine, Directive, DirectiveKind, Heading, PlainLine


class TestLineClassify:
    """Test classification of single lines"""

    @pytest.mark.parametrize("level", [1, 2, 3, 4])
    def test_heading_levels(self, level):
        """=head1..=head4 become headings with their level"""
        block = line_classify(f"=head{level} Some Title")
        assert isinstance(block, Heading)
        assert block.level == level
        assert block.text == "Some Title"

    def test_heading_text_is_trimmed(self):
        block = line_classify("=head2   Basic Usage   ")
        assert block.text == "Basic Usage"

    def test_head5_is_not_a_heading(self):
        """Only four heading levels exist"""
        assert isinstance(line_classify("=head5 Too Deep"), PlainLine)

    def test_heading_without_text_is_plain(self):
        assert isinstance(line_classify("=head1"), PlainLine)

    @pytest.mark.parametrize(
        "line, kind",
        [
            ("=pod", DirectiveKind.POD_START),
            ("=cut", DirectiveKind.CUT),
            ("=over 4", DirectiveKind.LIST_OPEN),
            ("=back", DirectiveKind.LIST_CLOSE),
            ("=item * First", DirectiveKind.LIST_ITEM),
        ],
    )
    def test_directives(self, line, kind):
        block = line_classify(line)
        assert isinstance(block, Directive)
        assert block.kind is kind

    def test_directive_argument(self):
        """Text after the command word is kept as the argument"""
        assert line_classify("=over 4").argument == "4"
        assert line_classify("=item * First item").argument == "* First item"
        assert line_classify("=cut").argument == ""

    def test_directive_needs_whole_command_word(self):
        """=items or =cutting are not directives"""
        assert isinstance(line_classify("=items"), PlainLine)
        assert isinstance(line_classify("=cutting"), PlainLine)

    def test_unknown_command_is_plain(self):
        assert isinstance(line_classify("=begin html"), PlainLine)

    def test_indented_line_is_code(self):
        block = line_classify("  my $x = 1;")
        assert isinstance(block, CodeLine)
        assert block.text == "  my $x = 1;"

    def test_tab_indented_line_is_code(self):
        assert isinstance(line_classify("\t\tprint $x;"), CodeLine)
        assert isinstance(line_classify(" \tprint $x;"), CodeLine)

    def test_single_tab_is_plain(self):
        """One tab is a single leading whitespace character, like one space"""
        assert isinstance(line_classify("\tprint $x;"), PlainLine)

    @pytest.mark.parametrize("line", ["  ", "    ", "\t\t", "  \t "])
    def test_whitespace_only_line_is_plain(self, line):
        assert isinstance(line_classify(line), PlainLine)

    def test_single_space_is_plain(self):
        assert isinstance(line_classify(" not code"), PlainLine)

    def test_indented_directive_is_code(self):
        """Commands only count at the left margin"""
        assert isinstance(line_classify("  =cut"), CodeLine)

    def test_blank_line_is_plain(self):
        assert isinstance(line_classify(""), PlainLine)


class TestBlocksSegment:
    """Test whole-document segmentation"""

    def test_empty_and_absent(self):
        assert blocks_segment("") == []
        assert blocks_segment(None) == []

    def test_order_and_positions(self):
        source = "=head1 NAME\n\nFoo\n  code();\n=cut"
        blocks = blocks_segment(source)

        assert [type(block) for block in blocks] == [Heading, PlainLine, PlainLine, CodeLine, Directive]
        assert [block.line_number for block in blocks] == [1, 2, 3, 4, 5]
        for block in blocks:
            assert source[block.offset:].startswith(source.split('\n')[block.line_number - 1])

    def test_carriage_returns_are_ignored(self):
        blocks = blocks_segment("=head1 NAME\r\n\r\nFoo\r\n")
        assert isinstance(blocks[0], Heading)
        assert blocks[0].text == "NAME"
        assert blocks[2].text == "Foo"


class TestSectionFind:
    """Test named section lookup"""

    DOCUMENT = (
        "=head1 NAME\n"
        "\n"
        "Foo - Does things\n"
        "\n"
        "=head1 SYNOPSIS\n"
        "\n"
        "  use Foo;\n"
        "\n"
        "=head1 DESCRIPTION\n"
        "\n"
        "Text\n"
    )

    def test_finds_section_body(self):
        section = section_find(self.DOCUMENT, "SYNOPSIS")
        assert section is not None
        assert section.name == "SYNOPSIS"
        assert section.text == "\n  use Foo;\n\n"
        assert self.DOCUMENT[section.offset:].startswith(section.text)

    def test_case_insensitive(self):
        assert section_find(self.DOCUMENT, "synopsis").text == "\n  use Foo;\n\n"

    def test_last_section_runs_to_end(self):
        assert section_find(self.DOCUMENT, "DESCRIPTION").text == "\nText\n"

    def test_absent_section(self):
        assert section_find(self.DOCUMENT, "EXAMPLES") is None

    def test_empty_and_absent_markup(self):
        assert section_find("", "NAME") is None
        assert section_find(None, "NAME") is None

    def test_partial_name_does_not_match(self):
        assert section_find("=head1 SYNOPSIS AND MORE\n\n  x();\n", "SYNOPSIS") is None

    def test_subheadings_stay_inside(self):
        """Deeper headings belong to the section, same-level ones end it"""
        source = (
            "=head1 EXAMPLES\n\n"
            "=head2 One\n\n  one();\n\n"
            "=head2 Two\n\n  two();\n\n"
            "=head1 AUTHOR\n\nSomebody\n"
        )
        section = section_find(source, "EXAMPLES")
        assert "=head2 One" in section.text
        assert "=head2 Two" in section.text
        assert "AUTHOR" not in section.text

    def test_nested_section_ends_at_shallower_heading(self):
        source = "=head2 Usage\n\nA\n\n=head3 Deeper\n\nB\n\n=head1 Other\n\nC\n"
        section = section_find(source, "Usage")
        assert "Deeper" in section.text
        assert "Other" not in section.text

    def test_cut_ends_section(self):
        source = "=head1 SYNOPSIS\n\n  use Foo;\n\n=cut\n\nsub foo { 1 }\n"
        assert section_find(source, "SYNOPSIS").text == "\n  use Foo;\n\n"

    def test_heading_at_end_of_document(self):
        section = section_find("Intro\n=head1 SYNOPSIS", "SYNOPSIS")
        assert section is not None
        assert section.text == ""


class TestCodeblocksExtract:
    """Test indented code block extraction"""

    def test_single_block(self):
        source = "Intro\n\n  use DBI;\n  my $x = 1;\n\nOutro\n"
        blocks = codeblocks_extract(source)

        assert len(blocks) == 1
        assert blocks[0].text == "use DBI;\nmy $x = 1;"
        assert source[blocks[0].start:blocks[0].end] == "  use DBI;\n  my $x = 1;"

    def test_relative_indentation_kept(self):
        source = "  if ($x) {\n      print;\n  }\n"
        assert codeblocks_extract(source)[0].text == "if ($x) {\n    print;\n}"

    def test_blank_line_splits_blocks(self):
        blocks = codeblocks_extract("  one();\n\n  two();\n")
        assert [block.text for block in blocks] == ["one();", "two();"]

    def test_whitespace_only_line_splits_blocks(self):
        """An indented whitespace-only line ends the run like an empty one"""
        blocks = codeblocks_extract("  one();\n  \n  two();\n")
        assert [block.text for block in blocks] == ["one();", "two();"]

    def test_trailing_whitespace_lines_trimmed(self):
        assert [block.text for block in codeblocks_extract("  one();\n    \n")] == ["one();"]

    def test_whitespace_only_run_dropped(self):
        assert codeblocks_extract("   \n  \nText\n") == []

    def test_block_at_end_of_text(self):
        assert [block.text for block in codeblocks_extract("Text\n  last();")] == ["last();"]

    def test_prose_block_is_still_a_block(self):
        """The segmenter does not judge content"""
        blocks = codeblocks_extract("  This line of prose is indented but is just words.\n")
        assert len(blocks) == 1

    def test_empty_and_absent(self):
        assert codeblocks_extract("") == []
        assert codeblocks_extract(None) == []

    def test_no_code(self):
        assert codeblocks_extract("=head1 NAME\n\nJust text\n") == []

    def test_idempotent(self):
        source = "A\n\n  a();\n  b();\n\nB\n\n    c();\n"
        assert codeblocks_extract(source) == codeblocks_extract(source)


class TestPodIsolate:
    """Test POD extraction from Perl source files"""

    MODULE = (
        "package Foo;\n"
        "use strict;\n"
        "\n"
        "=head1 NAME\n"
        "\n"
        "Foo - Foo things\n"
        "\n"
        "=cut\n"
        "\n"
        "sub new {\n"
        "    my ($class, %args) = @_;\n"
        "    return bless {%args}, $class;\n"
        "}\n"
        "\n"
        "1;\n"
        "__END__\n"
        "\n"
        "=head1 SYNOPSIS\n"
        "\n"
        "  my $foo = Foo->new;\n"
    )

    def test_code_outside_pod_dropped(self):
        isolated = pod_isolate(self.MODULE)

        assert "package Foo;" not in isolated
        assert "sub new" not in isolated
        assert "bless" not in isolated
        assert "__END__" not in isolated
        assert isolated == (
            "=head1 NAME\n\nFoo - Foo things\n\n=cut\n"
            "=head1 SYNOPSIS\n\n  my $foo = Foo->new;\n"
        )

    def test_cut_still_ends_sections(self):
        section = section_find(pod_isolate(self.MODULE), "NAME")
        assert section.text == "\nFoo - Foo things\n\n"

    def test_pure_pod_unchanged(self):
        source = "=head1 NAME\n\nFoo - Foo things\n"
        assert pod_isolate(source) == source

    def test_stray_cut_does_not_open_pod(self):
        assert pod_isolate("my $x = 1;\n=cut\nmy $y = 2;\n") == ""

    def test_no_pod(self):
        assert pod_isolate("package Foo;\n1;\n") == ""

    def test_empty_and_absent(self):
        assert pod_isolate("") == ""
        assert pod_isolate(None) == ""
