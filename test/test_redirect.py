"""
Redirect decision tests: domain canonicalisation first, then locale
canonicalisation, and the exact shape of the redirect answer.
"""

import io

import pytest

from edge_i18n.i18n.routing import handle_locale_redirect
from edge_i18n.schemas.event import InternalResult
from edge_i18n.schemas.i18n import I18nConfig


class TestRedirectPreconditions:
    def test_no_config(self, event_factory):
        assert handle_locale_redirect(event_factory(accept_language="fr"), None) is False

    def test_detection_disabled(self, event_factory):
        i18n = I18nConfig(locales=("en", "fr"), default_locale="en", locale_detection=False)
        assert handle_locale_redirect(event_factory(accept_language="fr"), i18n) is False

    @pytest.mark.parametrize("path", ["/about", "/fr", "/FR/", "/en/about"])
    def test_only_root_is_redirected(self, basic_i18n, event_factory, path):
        assert handle_locale_redirect(event_factory(raw_path=path, accept_language="fr"), basic_i18n) is False

    def test_default_locale_is_not_redirected(self, basic_i18n, event_factory):
        assert handle_locale_redirect(event_factory(accept_language="en"), basic_i18n) is False

    def test_cookie_in_other_case_resolves_to_default(self, event_factory):
        i18n = I18nConfig(locales=("en-US", "fr"), default_locale="en-US")
        assert handle_locale_redirect(event_factory(cookies={"NEXT_LOCALE": "EN-us"}), i18n) is False


class TestLocaleCanonicalisation:
    def test_scenario_a_domain_default_matches(self, domain_i18n, event_factory):
        event = event_factory(host="fr.example.com")
        assert handle_locale_redirect(event, domain_i18n) is False

    def test_scenario_b_header_locale_on_unknown_host(self, domain_i18n, event_factory):
        event = event_factory(host="en.example.com", accept_language="fr")
        result = handle_locale_redirect(event, domain_i18n)
        assert isinstance(result, InternalResult)
        assert result.status_code == 307
        assert result.headers == {"Location": "https://en.example.com/fr"}

    def test_cookie_locale_redirect(self, basic_i18n, event_factory):
        result = handle_locale_redirect(event_factory(cookies={"NEXT_LOCALE": "fr"}), basic_i18n)
        assert result.location == "https://localhost/fr"

    def test_query_string_is_preserved(self, basic_i18n, event_factory):
        event = event_factory(accept_language="fr", url="http://localhost:3000/?utm=a&b=c")
        assert handle_locale_redirect(event, basic_i18n).location == "http://localhost:3000/fr?utm=a&b=c"

    def test_relative_url(self, basic_i18n, event_factory):
        event = event_factory(accept_language="fr", url="/")
        assert handle_locale_redirect(event, basic_i18n).location == "/fr"

    def test_base_path_is_kept(self, basic_i18n, event_factory):
        event = event_factory(accept_language="fr", url="https://localhost/docs")
        assert handle_locale_redirect(event, basic_i18n, base_path="/docs").location == "https://localhost/docs/fr"


class TestDomainCanonicalisation:
    def test_scenario_c_preferred_locale_owned_by_other_domain(self, multi_domain_i18n, event_factory):
        event = event_factory(host="a.com", accept_language="fr")
        result = handle_locale_redirect(event, multi_domain_i18n)
        assert result.status_code == 307
        assert result.location == "https://b.com/"

    def test_same_domain_non_default_locale_keeps_segment(self, event_factory):
        i18n = I18nConfig.model_validate(
            {
                "locales": ["en", "fr", "fr-BE"],
                "defaultLocale": "en",
                "domains": [
                    {"domain": "a.com", "defaultLocale": "en"},
                    {"domain": "b.com", "defaultLocale": "fr", "locales": ["fr-BE"]},
                ],
            }
        )
        result = handle_locale_redirect(event_factory(host="b.com", accept_language="fr-BE"), i18n)
        assert result.location == "https://b.com/fr-BE"

    def test_http_domain(self, event_factory):
        i18n = I18nConfig.model_validate(
            {
                "locales": ["en", "fr"],
                "defaultLocale": "en",
                "domains": [
                    {"domain": "a.com", "defaultLocale": "en"},
                    {"domain": "b.local:8080", "defaultLocale": "fr", "http": True},
                ],
            }
        )
        result = handle_locale_redirect(event_factory(host="a.com", accept_language="fr"), i18n)
        assert result.location == "http://b.local:8080/"

    def test_preferred_domain_is_current_domain(self, multi_domain_i18n, event_factory):
        event = event_factory(host="b.com", accept_language="fr")
        assert handle_locale_redirect(event, multi_domain_i18n) is False

    def test_unknown_host_skips_domain_branch(self, multi_domain_i18n, event_factory):
        event = event_factory(host="c.com", accept_language="fr")
        assert handle_locale_redirect(event, multi_domain_i18n).location == "https://c.com/fr"

    def test_domain_branch_ignores_cookie(self, multi_domain_i18n, event_factory):
        # Cookie asks for French but the header prefers English: a.com owns en.
        event = event_factory(host="a.com", accept_language="en", cookies={"NEXT_LOCALE": "fr"})
        assert handle_locale_redirect(event, multi_domain_i18n) is False

    def test_domain_branch_precedes_locale_branch(self, multi_domain_i18n, event_factory):
        event = event_factory(host="a.com", accept_language="fr", url="https://a.com/?x=1")
        assert handle_locale_redirect(event, multi_domain_i18n).location == "https://b.com/"


class TestRedirectShape:
    def test_wire_format(self, basic_i18n, event_factory):
        result = handle_locale_redirect(event_factory(accept_language="fr"), basic_i18n)
        wire = result.to_wire()
        assert set(wire) == {"type", "statusCode", "headers", "body", "isBase64Encoded"}
        assert wire["type"] == "core"
        assert wire["statusCode"] == 307
        assert wire["headers"] == {"Location": "https://localhost/fr"}
        assert wire["isBase64Encoded"] is False
        assert isinstance(wire["body"], io.BytesIO)
        assert wire["body"].read() == b""

    def test_each_redirect_gets_its_own_body(self, basic_i18n, event_factory):
        first = handle_locale_redirect(event_factory(accept_language="fr"), basic_i18n)
        second = handle_locale_redirect(event_factory(accept_language="fr"), basic_i18n)
        assert first.body is not second.body
