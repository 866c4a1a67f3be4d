"""Tests for class token collection."""

import pytest

from breeze.collect import CollectionOption, collect_tokens
from breeze.model import Position


class TestCollectHtml:
    def test_tokens_and_positions(self):
        text = '<div>\n  <p class="mt-4  px-2">hi</p>\n</div>'
        tokens = collect_tokens(text, CollectionOption.HTML, source="index.html")
        assert [t.token for t in tokens] == ["mt-4", "px-2"]
        assert tokens[0].position == Position(2, 13)
        assert tokens[1].position == Position(2, 19)
        assert tokens[0].source == "index.html"

    def test_single_quotes_and_multiline(self):
        text = "<a class='p-1\n   m-2'></a>"
        tokens = collect_tokens(text, CollectionOption.HTML)
        assert [(t.token, t.position) for t in tokens] == [
            ("p-1", Position(1, 11)),
            ("m-2", Position(2, 4)),
        ]

    def test_ignores_text_outside_attributes(self):
        assert collect_tokens("<p>mt-4</p>", CollectionOption.HTML) == []

    def test_classname_not_html(self):
        assert collect_tokens('<p className="mt-4"/>', CollectionOption.HTML) == []

    def test_data_class_ignored(self):
        text = '<p data-class="not classes" class="mt-4">x</p>'
        assert [t.token for t in collect_tokens(text, CollectionOption.HTML)] == ["mt-4"]

    def test_vue_bound_class_ignored(self):
        text = """<p :class="{ 'mt-4': on }" v-bind:class="p-2">x</p>"""
        assert collect_tokens(text, CollectionOption.HTML) == []


class TestCollectJsx:
    def test_class_name(self):
        tokens = collect_tokens('<p className="mt-4 p-2"/>', CollectionOption.JSX)
        assert [t.token for t in tokens] == ["mt-4", "p-2"]

    def test_braced_string(self):
        tokens = collect_tokens("<p className={'w-1/2'}/>", CollectionOption.JSX)
        assert [t.token for t in tokens] == ["w-1/2"]

    def test_data_class_name_ignored(self):
        tokens = collect_tokens('<p data-className="x" className="p-2"/>', CollectionOption.JSX)
        assert [t.token for t in tokens] == ["p-2"]


class TestCollectString:
    def test_every_word(self):
        tokens = collect_tokens("mt-4\n p-2", CollectionOption.STRING)
        assert [(t.token, t.position) for t in tokens] == [
            ("mt-4", Position(1, 1)),
            ("p-2", Position(2, 2)),
        ]


class TestForExtension:
    @pytest.mark.parametrize(
        "ext,option",
        [
            (".html", CollectionOption.HTML),
            ("HTM", CollectionOption.HTML),
            ("tsx", CollectionOption.JSX),
            ("rs", CollectionOption.STRING),
        ],
    )
    def test_defaults(self, ext, option):
        assert CollectionOption.for_extension(ext) is option

    def test_override(self):
        overrides = {"rs": CollectionOption.HTML}
        assert CollectionOption.for_extension(".rs", overrides) is CollectionOption.HTML
