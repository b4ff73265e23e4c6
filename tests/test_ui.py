"""
Tests for the Dictionary Summary UI
===================================
Tests for xkcdpwd/ui.py.
"""

import pytest
import sys
from io import StringIO
from pathlib import Path

from rich.console import Console

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from xkcdpwd.dictionary import Dictionary
from xkcdpwd.ui import DictionarySummary, SummaryUI


@pytest.fixture
def dictionary():
    d = Dictionary(["%04d" % i for i in range(1024)] + ["longword"])
    d.set_max_word_length(4)
    d.set_capitalize("first")
    return d


class TestDictionarySummary:
    """Tests for summary numbers."""

    def test_from_dictionary(self, dictionary):
        s = DictionarySummary.from_dictionary(dictionary, words=4, language="en")
        assert s.total_words == 1025
        assert s.active_words == 1024
        assert s.max_length == 4
        assert s.capitalize == "first"
        assert s.entropy == pytest.approx(40.0)
        assert s.sufficient
        assert s.words_needed == 3

    def test_insufficient(self):
        d = Dictionary(["a", "b"])
        s = DictionarySummary.from_dictionary(d, words=4, language="en")
        assert not s.sufficient
        assert s.words_needed == 30

    def test_unreachable(self):
        d = Dictionary(["a"])
        s = DictionarySummary.from_dictionary(d, words=4, language="en")
        rows = dict(SummaryUI(Console(file=StringIO())).rows(s))
        assert rows["Words needed"] == "unreachable"


class TestSummaryUI:
    """Tests for rendering."""

    def test_plain_output(self, dictionary):
        buf = StringIO()
        ui = SummaryUI(Console(file=buf))
        ui.show(DictionarySummary.from_dictionary(dictionary, words=4, language="en"))
        text = buf.getvalue()
        assert "Language:" in text
        assert "Words in range:" in text
        assert "40.0 bits (minimum 30)" in text
        assert "min 4, max 4" in text

    def test_no_limit_label(self):
        d = Dictionary(["able"] * 10)
        d.set_min_word_length(0)
        d.set_max_word_length(0)
        rows = dict(SummaryUI(Console(file=StringIO())).rows(
            DictionarySummary.from_dictionary(d, words=4, language="en")))
        assert rows["Length limits"] == "min none, max none"

    def test_rich_output(self, dictionary):
        buf = StringIO()
        ui = SummaryUI(Console(file=buf, force_terminal=True, width=100))
        ui.show(DictionarySummary.from_dictionary(dictionary, words=4, language="en"))
        text = buf.getvalue()
        assert "xkcdpwd dictionary" in text
        assert "Words in range" in text
