"""
Unit Tests for Markup Corrector
===============================

Tests for the rewrite passes that turn captured markup into a static document.
"""

import warnings
import pytest

from static_prerender.core.exceptions import CorrectionNoOpWarning
from static_prerender.core.rendering.markup_corrector import (
    MarkupCorrector,
    correct_markup,
    relativize_urls,
    strip_chunk_scripts,
    strip_style_injections,
)

CAPTURED = (
    "<!doctype html><html><head>"
    '<link rel="icon" href="http://localhost:9999/favicon-ff00.png">'
    '<script src="http://localhost:9999/chunk-3f2a1b.js" async=""></script>'
    "<style>body{}</style>"
    "</head><body>"
    '<script src="http://localhost:9999/bootstrap-ab12.js" defer=""></script>'
    '<script>a.styleInject("body{color:red}");bundle123.styleInject(\'.x{}\');run();</script>'
    "</body></html>"
)


class TestRelativizeUrls:
    """Test the absolute to relative URL pass."""

    def test_rewrites_local_origin(self):
        markup, count = relativize_urls('<script src="http://localhost:9999/foo.js">', 9999)
        assert markup == '<script src="./foo.js">'
        assert count == 1

    def test_only_rewrites_matching_port(self):
        source = '<a href="http://localhost:8080/x">'
        markup, count = relativize_urls(source, 9999)
        assert markup == source
        assert count == 0

    def test_port_prefix_is_not_a_match(self):
        source = "http://localhost:99990/x"
        assert relativize_urls(source, 9999) == (source, 0)

    def test_other_hosts_untouched(self):
        source = "https://proxx.app/social-cover.jpg"
        assert relativize_urls(source, 9999) == (source, 0)


class TestStripChunkScripts:
    """Test removal of chunk loader script tags."""

    def test_removes_chunk_script(self):
        markup, count = strip_chunk_scripts('<b></b><script src="./chunk-3f2a.js" async=""></script>')
        assert markup == "<b></b>"
        assert count == 1

    def test_keeps_non_chunk_scripts(self):
        source = '<script src="./bootstrap-ab12.js" defer=""></script>'
        assert strip_chunk_scripts(source) == (source, 0)

    def test_keeps_chunk_script_without_further_attributes(self):
        source = '<script src="./chunk-3f2a.js"></script>'
        assert strip_chunk_scripts(source) == (source, 0)

    def test_idempotent(self):
        once, _ = strip_chunk_scripts(correct_markup(CAPTURED, 9999))
        twice, count = strip_chunk_scripts(once)
        assert twice == once
        assert count == 0


class TestStripStyleInjections:
    """Test removal of styleInject calls."""

    def test_removes_calls_with_any_identifier(self):
        markup, count = strip_style_injections('a.styleInject("x");bundle123.styleInject("y");')
        assert markup == ""
        assert count == 2

    def test_single_quoted_literal(self):
        assert strip_style_injections("m.styleInject('.a{}');") == ("", 1)

    def test_mismatched_quotes_are_left_alone(self):
        source = "m.styleInject(\"x');"
        assert strip_style_injections(source) == (source, 0)

    def test_surrounding_code_is_kept(self):
        markup, _ = strip_style_injections('init();s.styleInject(".a{}");start();')
        assert markup == "init();start();"

    def test_idempotent(self):
        once, _ = strip_style_injections(CAPTURED)
        assert strip_style_injections(once) == (once, 0)


class TestMarkupCorrector:
    """Test the combined corrector."""

    def test_correct_markup(self):
        markup = correct_markup(CAPTURED, 9999)

        assert "http://localhost:9999/" not in markup
        assert 'href="./favicon-ff00.png"' in markup
        assert '<script src="./bootstrap-ab12.js" defer=""></script>' in markup
        assert "chunk-3f2a1b" not in markup
        assert "styleInject" not in markup
        assert "<script>run();</script>" in markup

    def test_round_trip_example(self):
        markup = correct_markup("<script src=\"http://localhost:9999/foo.js\"></script>", 9999)
        assert "./foo.js" in markup
        assert "http://localhost:9999/" not in markup

    def test_reports_counts(self):
        result = MarkupCorrector().correct(CAPTURED, 9999)

        assert result.absolute_references == 3
        assert result.chunk_scripts == 1
        assert result.style_injections == 2

    def test_input_is_not_mutated(self):
        original = str(CAPTURED)
        correct_markup(CAPTURED, 9999)
        assert CAPTURED == original

    def test_warns_when_port_rewrite_matches_nothing(self):
        with pytest.warns(CorrectionNoOpWarning, match="localhost:1234"):
            result = MarkupCorrector().correct(CAPTURED, 1234)

        assert result.absolute_references == 0
        assert "http://localhost:9999/" in result.markup

    def test_no_warning_when_references_rewritten(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", CorrectionNoOpWarning)
            MarkupCorrector().correct(CAPTURED, 9999)
