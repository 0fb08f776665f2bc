"""
Accept-Language negotiation tests
"""

from edge_i18n.i18n.accept_header import match_language


class TestMatchLanguage:
    def test_exact_match(self):
        assert match_language("fr", ["en", "fr", "de"]) == "fr"

    def test_quality_ordering(self):
        assert match_language("de;q=0.9,fr;q=0.8,en;q=0.7", ["en", "fr", "de"]) == "de"

    def test_case_insensitive_returns_configured_spelling(self):
        assert match_language("NL-nl", ["en", "nl-NL"]) == "nl-NL"

    def test_regional_locale_answers_for_language_prefix(self):
        assert match_language("en", ["fr", "en-US"]) == "en-US"

    def test_prefix_configured_on_its_own_wins(self):
        assert match_language("en", ["en-US", "en"]) == "en"

    def test_regional_header_does_not_fall_back_to_base(self):
        assert match_language("fr-CA", ["en", "fr"]) is None

    def test_no_match(self):
        assert match_language("ja", ["en", "fr"]) is None

    def test_empty_and_missing_header(self):
        assert match_language("", ["en", "fr"]) is None
        assert match_language(None, ["en", "fr"]) is None

    def test_no_supported_locales(self):
        assert match_language("en", []) is None

    def test_q_zero_is_refused(self):
        assert match_language("fr;q=0,en;q=0.5", ["fr", "en"]) == "en"

    def test_equal_quality_uses_configured_order(self):
        assert match_language("fr,en", ["en", "fr"]) == "en"

    def test_unconfigured_entries_keep_header_order(self):
        assert match_language("ja,fr", ["en", "fr"]) == "fr"

    def test_wildcard_expands_to_unnamed_locale(self):
        assert match_language("de;q=0.9,*;q=0.5", ["en", "fr"]) == "en"

    def test_wildcard_skips_refused_locales(self):
        assert match_language("en;q=0,*", ["en", "fr"]) == "fr"

    def test_whitespace_is_ignored(self):
        assert match_language(" fr ; q=0.4 , en ; q=0.8 ", ["en", "fr"]) == "en"

    def test_malformed_entries_are_skipped(self):
        assert match_language("en;x=1,fr;q=0.5;level=1,de", ["en", "fr", "de"]) == "de"

    def test_out_of_range_quality_defaults_to_one(self):
        assert match_language("fr;q=5,en;q=0.9", ["en", "fr"]) == "fr"
