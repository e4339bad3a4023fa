"""Tests for header parsing and the security-header checklist."""
from playground.analyzers.headers import RECOMMENDED_HEADERS, SecurityHeaderChecklist
from playground.parsers.header_parser import HeaderParser

ALL_HEADERS = """\
Content-Security-Policy: default-src 'self'
X-Frame-Options: DENY
Strict-Transport-Security: max-age=31536000; includeSubDomains
X-Content-Type-Options: nosniff
Referrer-Policy: strict-origin-when-cross-origin
Permissions-Policy: geolocation=()
X-XSS-Protection: 1; mode=block
"""


class TestHeaderParser:

    def test_lowercases_names_and_trims(self):
        headers = HeaderParser.parse("  Content-Type :  text/html  \r\n")
        assert headers == {"content-type": "text/html"}

    def test_splits_on_first_colon(self):
        assert HeaderParser.parse("Location: https://a.test:8443/x") == {
            "location": "https://a.test:8443/x"
        }

    def test_skips_malformed_lines(self):
        raw = "HTTP/1.1 200 OK\n: no-name\nEmpty:\nServer: nginx"
        assert HeaderParser.parse(raw) == {"server": "nginx"}

    def test_later_duplicates_win(self):
        assert HeaderParser.parse("Server: a\nserver: b") == {"server": "b"}


class TestSecurityHeaderChecklist:

    def test_seven_recommended_headers(self):
        assert len(RECOMMENDED_HEADERS) == 7
        assert RECOMMENDED_HEADERS[0].name == "Content-Security-Policy"

    def test_all_present(self):
        result = SecurityHeaderChecklist().analyze(ALL_HEADERS)
        assert result.score == 100
        assert result.missing == []
        assert [h.name for h in result.present] == [h.name for h in RECOMMENDED_HEADERS]

    def test_partial(self):
        result = SecurityHeaderChecklist().analyze("x-frame-options: SAMEORIGIN\nServer: nginx")
        assert result.score == 14
        assert result.present[0].name == "X-Frame-Options"
        assert result.present[0].value == "SAMEORIGIN"
        assert len(result.missing) == 6
        assert result.headers["server"] == "nginx"

    def test_empty_input(self):
        result = SecurityHeaderChecklist().analyze("")
        assert result.score == 0
        assert result.missing[1].recommendation.startswith("Add X-Frame-Options")
