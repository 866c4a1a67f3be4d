"""Tests for config loading and content discovery."""

import json
import logging

import pytest

from breeze.collect import CollectionOption
from breeze.config import BreezeConfig, ConfigError, default_config_json, load_config
from breeze.content import expand_braces, find_content


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_full(self, tmp_path):
        path = tmp_path / "breeze.config.json"
        path.write_text(
            json.dumps(
                {
                    "content": ["*.{html,rs}"],
                    "extend_collection_options": {"rs": "HTML"},
                    "output": "out.css",
                }
            )
        )
        config = load_config(path)
        assert config.content == ("*.{html,rs}",)
        assert config.output == "out.css"
        assert config.collection_overrides() == {"rs": CollectionOption.HTML}

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_config(tmp_path / "missing.json")
        assert config == BreezeConfig()
        assert "Using default config" in caplog.text

    def test_bad_json_uses_defaults(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{not json")
        assert load_config(path) == BreezeConfig()

    def test_partial(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"output": "x.css"}')
        config = load_config(path)
        assert config.output == "x.css"
        assert config.content == ("index.html",)

    def test_unknown_option(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"extend_collection_options": {"rs": "xml"}}')
        with pytest.raises(ConfigError) as info:
            load_config(path)
        assert info.value.field == "extend_collection_options"

    def test_bad_content(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"content": 3}')
        with pytest.raises(ConfigError):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("[]")
        with pytest.raises(ConfigError):
            load_config(path)


class TestDefaultConfigJson:
    def test_round_trips_through_loader(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(default_config_json())
        assert load_config(path) == BreezeConfig()


# ---------------------------------------------------------------------------
# Content discovery
# ---------------------------------------------------------------------------


class TestExpandBraces:
    def test_none(self):
        assert expand_braces("*.html") == ["*.html"]

    def test_alternatives(self):
        assert expand_braces("src/*.{html,jsx}") == ["src/*.html", "src/*.jsx"]


class TestFindContent:
    def test_glob_and_braces(self, tmp_path):
        (tmp_path / "a.html").write_text("")
        (tmp_path / "b.jsx").write_text("")
        (tmp_path / "c.txt").write_text("")
        found = find_content(["*.{html,jsx}"], root=tmp_path)
        assert [p.name for p in found] == ["a.html", "b.jsx"]

    def test_directory(self, tmp_path):
        pages = tmp_path / "pages"
        (pages / "nested").mkdir(parents=True)
        (pages / "one.html").write_text("")
        (pages / "nested" / "two.html").write_text("")
        found = find_content(["pages"], root=tmp_path)
        assert [p.name for p in found] == ["one.html"]

    def test_recursive_glob(self, tmp_path):
        (tmp_path / "x" / "y").mkdir(parents=True)
        (tmp_path / "x" / "y" / "deep.html").write_text("")
        found = find_content(["**/*.html"], root=tmp_path)
        assert [p.name for p in found] == ["deep.html"]

    def test_no_duplicates(self, tmp_path):
        (tmp_path / "a.html").write_text("")
        found = find_content(["a.html", "*.html"], root=tmp_path)
        assert len(found) == 1

    def test_no_match_logged(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            assert find_content(["*.vue"], root=tmp_path) == []
        assert "matched no files" in caplog.text
