from word_scout.parser.html_parser import parse_html

BASE = "http://example.com/dir/page.html"


def test_visible_text_only():
    html = (
        "<html><head><title>T</title><style>.gamma{}</style></head>"
        "<body><p>Hello   <b>World</b></p><script>gamma()</script>"
        "<noscript>gamma</noscript><template>gamma</template></body></html>"
    )
    parsed = parse_html(html, BASE)
    assert parsed.text == "T Hello World"
    assert parsed.url == BASE


def test_links_resolved_in_document_order():
    html = (
        '<a href="other.html">1</a>'
        '<a href="/root">2</a>'
        '<a href="https://elsewhere.test/x#frag">3</a>'
        '<a href="?q=1">4</a>'
    )
    assert parse_html(html, BASE).links == [
        "http://example.com/dir/other.html",
        "http://example.com/root",
        "https://elsewhere.test/x#frag",
        "http://example.com/dir/page.html?q=1",
    ]


def test_duplicate_links_kept():
    html = '<a href="/a">1</a><a href="/a">2</a>'
    assert parse_html(html, BASE).links == ["http://example.com/a", "http://example.com/a"]


def test_non_http_links_skipped():
    html = (
        '<a href="mailto:me@example.com">m</a>'
        '<a href="JavaScript:void(0)">j</a>'
        '<a href="tel:123">t</a>'
        '<a href="ftp://files.test/x">f</a>'
        '<a href="   ">blank</a>'
        "<a>no href</a>"
        '<a href=" /kept ">k</a>'
    )
    assert parse_html(html, BASE).links == ["http://example.com/kept"]


def test_empty_document():
    parsed = parse_html("", BASE)
    assert parsed.text == ""
    assert parsed.links == []


def test_malformed_link_skipped_without_dropping_others():
    html = '<a href="http://[::1">bad</a><a href="/b">B</a><a href="http://[::1]:8080/ok">ok</a>'
    assert parse_html(html, BASE).links == [
        "http://example.com/b",
        "http://[::1]:8080/ok",
    ]
