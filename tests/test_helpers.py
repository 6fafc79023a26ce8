from datetime import datetime, timedelta

import pytest
from markupsafe import Markup
from starlette.requests import Request

from webtoolbox.forms import error_messages_for, listed_form
from webtoolbox.helpers import extensions, views
from webtoolbox.helpers.placeholder import pbs, ph, phf, phu, placeholder, placeholder_or_list
from webtoolbox.testing import yield_with

from .conftest import bound


def request_with_session(session=None):
    scope = {"type": "http", "headers": []}
    if session is not None:
        scope["session"] = session
    return Request(scope)


class TestErrorMessagesFor:
    def test_nothing_without_errors(self):
        assert error_messages_for(bound(), None) == ""

    def test_header_counts_errors(self):
        post = bound()
        post.errors.add("title", "kan niet ontbreken")

        assert error_messages_for(post) == (
            '<div id="errors" class="errors"><h3>Er heeft zich 1 fout voorgedaan.</h3></div>'
        )

    def test_base_errors_are_listed(self):
        post, comment = bound(), bound()
        post.errors.add("title", "kan niet ontbreken")
        comment.errors.add_to_base("Reacties zijn gesloten")

        html = error_messages_for(post, comment)

        assert "<h3>Er hebben zich 2 fouten voorgedaan.</h3>" in html
        assert "<p>De volgende problemen moeten opgelost worden</p>" in html
        assert "<ul><li>Reacties zijn gesloten</li></ul>" in html

    def test_custom_header_and_container(self):
        post = bound()
        post.errors.add("title", "kan niet ontbreken")
        html = error_messages_for(post, header_message="Oeps", header_tag="h2", id_=None, class_="problems")
        assert html == '<div class="problems"><h2>Oeps</h2></div>'

    def test_container_id(self):
        post = bound()
        post.errors.add("title", "kan niet ontbreken")
        assert error_messages_for(post, id_="post_errors").startswith('<div id="post_errors" class="errors">')


def test_listed_form_binds_object():
    post = bound(title="Hallo")
    f = listed_form("post", post)
    assert f.object is post
    assert f.object_name == "post"


class TestExtensions:
    @pytest.mark.parametrize("text, expected", [
        ("Bed & Breakfast", "bed-and-breakfast"),
        ('"Quoted" title!', "quoted-title"),
        ("Prijs: 5 €", "prijs-5-EUR"),
    ])
    def test_to_url(self, text, expected):
        assert extensions.to_url(text) == expected

    def test_humanize(self):
        assert extensions.humanize("post_title") == "Post title"
        assert extensions.humanize("author_id") == "Author"

    def test_to_sentence(self):
        assert extensions.to_sentence([]) == ""
        assert extensions.to_sentence(["a"]) == "a"
        assert extensions.to_sentence(["a", "b"], connector="en") == "a en b"
        assert extensions.to_sentence(["a", "b", "c"]) == "a, b and c"
        assert extensions.to_sentence(["a", "b", "c"], skip_last_comma=False) == "a, b, and c"

    def test_to_html_list(self):
        assert extensions.to_html_list(["a", "<b>"], type="ul", id="x") == (
            '<ul id="x">\n\t<li>a</li>\n\t<li>&lt;b&gt;</li>\n</ul>\n'
        )
        assert extensions.to_html_list([]) is None
        with pytest.raises(ValueError):
            extensions.to_html_list(["a"], type=None)

    def test_dict_to_html_list(self):
        assert extensions.dict_to_html_list({"a": 1}, class_="h") == '<dl class="h">\n\t<dt>a</dt>\n\t<dd>1</dd>\n</dl>\n'
        assert extensions.dict_to_html_list({}) is None

    def test_collections(self):
        mapping = {"a": 1, "b": 2, "c": 3}
        assert extensions.except_keys(mapping, "a") == {"b": 2, "c": 3}
        assert extensions.only_keys(mapping, "a", "c") == {"a": 1, "c": 3}
        assert extensions.except_items([1, 2, 3, 2], 2) == [1, 3]
        assert extensions.to_select_options({1: "b", 0: "a"}) == [("a", 0), ("b", 1)]
        assert extensions.in_range(5, range(1, 10))
        assert not extensions.in_range(10, range(1, 10))

    def test_time(self):
        now = datetime(2024, 3, 5, 12, 0)
        assert extensions.is_future(now + timedelta(hours=1), now=now)
        assert extensions.is_past(now - timedelta(hours=1), now=now)
        assert extensions.days_ago(now - timedelta(days=2), now=now) == 2
        assert extensions.days_ago(now + timedelta(days=2), now=now) == 0

    @pytest.mark.parametrize("address, valid", [
        ("mickey+stuff@mouse.com", True),
        ("mickey@[127.0.0.1]", True),
        ("mickey.disney", False),
        ("mickey@disney@mouse.com", False),
    ])
    def test_email_pattern(self, address, valid):
        assert bool(extensions.EMAIL.match(address)) is valid

    def test_url_and_username_patterns(self):
        assert extensions.URL.match("http://example.com/path?x=1")
        assert extensions.URL.match("https://sub.example.co.uk:8080")
        assert not extensions.URL.match("htt:/example.com")
        assert extensions.USERNAME.match("john_doe")
        assert not extensions.USERNAME.match("jo")
        assert not extensions.USERNAME.match("a" * 17)
        assert not extensions.USERNAME.match("jöhn")


class TestViews:
    def test_number_to_currency(self):
        assert views.number_to_currency(1234.5) == "$1,234.50"
        assert views.number_to_currency(-5) == "$-5.00"
        assert views.number_to_currency(1234.567, precision=0) == "$1,235"
        assert views.number_to_currency("0.005") == "$0.01"

    def test_in_euros(self):
        assert views.in_euros(123456.9) == "&euro;123.456,90"
        assert views.in_euros("12") == "&euro;12,00"
        assert isinstance(views.in_euros(1), Markup)

    @pytest.mark.parametrize("value", ["abc", None, float("nan")])
    def test_currency_refuses_non_numbers(self, value):
        with pytest.raises(ValueError):
            views.number_to_currency(value)

    def test_logged_in(self):
        assert views.logged_in(request_with_session({"user_id": 5}))
        assert not views.logged_in(request_with_session({}))
        assert not views.logged_in(request_with_session())

    def test_logged_in_only_and_public_only(self):
        member = request_with_session({"user_id": 5})
        visitor = request_with_session({})

        assert views.logged_in_only(member, lambda: "geheim") == "geheim"
        assert views.logged_in_only(visitor, lambda: "geheim") == ""
        assert views.public_only(visitor, lambda: "welkom") == "welkom"
        assert views.public_only(member, lambda: "welkom") == ""

    def test_logged_in_only_yields_for_members(self, expect):
        expect(views).to(yield_with("logged_in_only").with_args(request_with_session({"user_id": 5})))
        expect(views).not_to(yield_with("logged_in_only").with_args(request_with_session({})))


class TestPlaceholder:
    def test_placeholder(self):
        assert placeholder() == '<div class="placeholder">Er is niets om weer te geven.</div>'
        assert placeholder("bla") == '<div class="placeholder">bla</div>'
        assert ph("bla", "span") == '<span class="placeholder">bla</span>'
        assert placeholder("bla", id="leeg") == '<div class="placeholder" id="leeg">bla</div>'

    def test_placeholder_for(self):
        assert phf("my string") == "my string"
        assert phf("<b>") == "&lt;b&gt;"
        assert phf("") == '<span class="placeholder">Niet opgegeven</span>'
        assert phf("   ") == '<span class="placeholder">Niet opgegeven</span>'
        assert phf(None, "custom") == '<span class="placeholder">custom</span>'
        assert phf(0) == "0"

    def test_placeholder_unless(self):
        assert phu(True, lambda: "hoeaap") == "hoeaap"
        assert phu(False, lambda: "hoeaap") == placeholder()
        assert phu(False, lambda: "hoeaap", "bla", "span") == '<span class="placeholder">bla</span>'

    def test_blank_slate(self):
        assert pbs(True, "posts", lambda: "lijst") == "lijst"
        assert pbs(False, "posts", lambda: "lijst") == (
            '<img src="/images/blank-slate-posts.png" alt="Voorbeeld van posts" />'
        )

    def test_placeholder_or_list(self):
        assert placeholder_or_list([]) == '<div class="placeholder">Nothing found.</div>'
        assert placeholder_or_list(None, placeholder_label="Leeg", tag="p") == '<p class="placeholder">Leeg</p>'
        assert placeholder_or_list(["a", "b"]) == "<ol>\n<li>a</li>\n<li>b</li>\n</ol>\n"

    def test_placeholder_or_list_with_renderer(self):
        html = placeholder_or_list(
            ["x"],
            lambda item: Markup("<li class='item'>{}</li>").format(item),
            list_tag="ul",
            html_attributes={"id": "posts"},
        )
        assert html == "<ul id=\"posts\">\n<li class='item'>x</li></ul>\n"
