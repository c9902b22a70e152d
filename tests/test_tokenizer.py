"""Unit tests for the tokenizer.

WHY: Every later stage assumes tokens are non-empty and whitespace-free.
A stray empty token would flash a blank frame and skew progress counts.

RULES:
- Token text must come back verbatim, punctuation included.
"""

from rsvp_pacer.core.tokenizer import tokenize, word_count


class TestTokenize:

    def test_trims_and_collapses_whitespace(self):
        assert tokenize("  hello   world  ") == ("hello", "world")

    def test_empty_text(self):
        assert tokenize("") == ()

    def test_whitespace_only(self):
        assert tokenize(" \t\n  \r\n ") == ()

    def test_newlines_and_tabs_split(self):
        assert tokenize("one\ntwo\tthree\r\nfour") == ("one", "two", "three", "four")

    def test_punctuation_preserved(self):
        assert tokenize("Wait, what?! (Really.)") == ("Wait,", "what?!", "(Really.)")

    def test_unicode_whitespace(self):
        # No-break space and ideographic space both separate words.
        assert tokenize("a\u00a0b\u3000c") == ("a", "b", "c")

    def test_returns_tuple(self):
        assert isinstance(tokenize("a b"), tuple)

    def test_no_empty_tokens(self):
        tokens = tokenize("  a  \n\n  b \t ")
        assert all(len(t) >= 1 for t in tokens)
        assert all(not any(ch.isspace() for ch in t) for t in tokens)


class TestWordCount:

    def test_counts_tokens(self):
        assert word_count("La vida és bella.") == 4

    def test_empty(self):
        assert word_count("   ") == 0
