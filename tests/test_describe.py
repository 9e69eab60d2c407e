"""
Module description tests
"""

import poddown.lib.describe as describe_module
from poddown.lib.describe import description_extract


class TestNameSection:
    """Test descriptions taken from NAME"""

    def test_dash_format(self):
        source = """
=head1 NAME

DBI - Database independent interface for Perl

=head1 SYNOPSIS

Some synopsis here.
"""
        assert description_extract(source) == "Database independent interface for Perl"

    def test_splits_at_first_dash(self):
        source = "=head1 NAME\n\nDBI - Database independent interface\n"
        assert description_extract(source) == "Database independent interface"

    def test_without_dash(self):
        source = """
=head1 NAME

DBI

Database independent interface for Perl

=head1 SYNOPSIS

Some synopsis here.
"""
        assert description_extract(source) == "Database independent interface for Perl"


class TestDescriptionSection:
    """Test fallback to the first DESCRIPTION paragraph"""

    def test_first_paragraph(self):
        source = """
=head1 NAME

DBI

=head1 DESCRIPTION

This is a database interface module that provides
a standard way to access databases.

More details here.

=head1 SYNOPSIS

Some synopsis here.
"""
        assert description_extract(source) == (
            "This is a database interface module that provides a standard way to access databases."
        )


class TestDefault:
    """Test the fixed default"""

    def test_no_usable_section(self):
        assert description_extract("=head1 SYNOPSIS\n\nSome synopsis here.\n") == "Perl module"

    def test_empty_and_absent(self):
        assert description_extract("") == "Perl module"
        assert description_extract(None) == "Perl module"

    def test_failure_returns_default(self, monkeypatch):
        def broken_section_find(markup, name):
            raise RuntimeError("boom")

        monkeypatch.setattr(describe_module, "section_find", broken_section_find)
        assert description_extract("=head1 NAME\n\nFoo - bar baz\n") == "Perl module"
