"""Tests for the resolution engine."""

from breeze.collect import CollectionOption
from breeze.engine import Source, parse_to_string, resolve_sources
from breeze.model import ClassNotFound, InvalidArg, Position
from breeze.stylesheet import preflight_css


def _html(body, name):
    return Source(text=body, option=CollectionOption.HTML, name=name)


class TestParseToString:
    def test_css_and_warnings(self, registry):
        warnings = []
        css = parse_to_string(
            [_html('<p class="mt-4 nope p-13">', "a.html")], warnings, registry=registry
        )
        assert ".mt-4 {\n  margin-top: 1rem;\n}" in css
        assert [w.class_name for w in warnings] == ["nope", "p-13"]
        assert warnings[0].warning_type == ClassNotFound()
        assert isinstance(warnings[1].warning_type, InvalidArg)

    def test_warnings_appended(self, registry):
        warnings = ["existing"]
        parse_to_string([Source("bogus")], warnings, registry=registry)
        assert warnings[0] == "existing"
        assert len(warnings) == 2

    def test_no_sources(self):
        warnings = []
        assert parse_to_string([], warnings) == ""
        assert warnings == []

    def test_preflight_off_by_default(self, registry):
        css = parse_to_string([Source("mt-4")], [], registry=registry)
        assert css.startswith(".mt-4 {")
        assert "box-sizing" not in css

    def test_preflight_comes_first(self, registry):
        css = parse_to_string([Source("mt-4")], [], registry=registry, include_preflight=True)
        assert css.startswith(preflight_css())
        assert css.endswith(".mt-4 {\n  margin-top: 1rem;\n}\n")
        assert css[len(preflight_css()):].startswith("\n.mt-4 {")

    def test_preflight_without_classes(self):
        assert parse_to_string([], [], include_preflight=True) == preflight_css()


class TestResolveSources:
    def test_input_order_kept(self, registry):
        sources = [_html(f'<p class="bad-{i} m-{i}">', f"{i}.html") for i in range(12)]
        report = resolve_sources(sources, registry=registry, max_workers=4)
        assert [w.source for w in report.warnings] == [f"{i}.html" for i in range(12)]
        assert [c.token for c in report.classes] == [f"m-{i}" for i in range(12)]

    def test_classes_deduplicated_across_sources(self, registry):
        sources = [Source("mt-4 p-2", name="a"), Source("p-2 mt-4", name="b")]
        report = resolve_sources(sources, registry=registry)
        assert [c.token for c in report.classes] == ["mt-4", "p-2"]

    def test_warning_positions_per_source(self, registry):
        sources = [Source("nope", name="a"), Source("x\n  nope", name="b")]
        report = resolve_sources(sources, registry=registry)
        assert [w.position for w in report.warnings] == [Position(1, 1), Position(1, 1), Position(2, 3)]


class TestSourceFromPath:
    def test_extension_picks_option(self, tmp_path):
        path = tmp_path / "page.jsx"
        path.write_text('<p className="mt-4"/>', encoding="utf-8")
        source = Source.from_path(path)
        assert source.option is CollectionOption.JSX
        assert source.name == str(path)

    def test_override(self, tmp_path):
        path = tmp_path / "view.rs"
        path.write_text('html! { <p class="mt-4"/> }', encoding="utf-8")
        source = Source.from_path(path, {"rs": CollectionOption.HTML})
        assert source.option is CollectionOption.HTML
