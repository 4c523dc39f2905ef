"""Tests for process configuration loading."""

import json
import os
import sys
import tempfile

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from webminify.config import ProcessConfig


class TestProcessConfig:
    def test_empty(self):
        config = ProcessConfig()
        assert len(config) == 0
        assert config.get("js_compress") is None

    def test_unknown_keys_dropped(self):
        config = ProcessConfig({"js_compress": "clean", "plugins": {"x": 1}})
        assert config.to_dict() == {"js_compress": "clean"}

    def test_none_values_dropped(self):
        config = ProcessConfig({"html5": None, "remove_comments": False})
        assert "html5" not in config
        assert config["remove_comments"] is False

    def test_read_only(self):
        config = ProcessConfig({"css_compress": "pretty"})
        with pytest.raises(TypeError):
            config["css_compress"] = "minify"

    def test_source_mapping_changes_do_not_leak(self):
        source = {"css_compress": "pretty"}
        config = ProcessConfig(source)
        source["css_compress"] = "minify"
        assert config["css_compress"] == "pretty"

    def test_mapping_equality(self):
        assert ProcessConfig({"html5": True}) == {"html5": True}


class TestLoad:
    def setup_method(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, "config.json")

    def teardown_method(self):
        if os.path.exists(self.path):
            os.remove(self.path)
        os.rmdir(self.tmp_dir)

    def _write(self, data):
        with open(self.path, "w") as f:
            f.write(data if isinstance(data, str) else json.dumps(data))

    def test_missing_file(self):
        config = ProcessConfig.load(self.path, environ={})
        assert config.to_dict() == {}

    def test_file_values(self):
        self._write({"js_compress": "clean", "remove_newlines": False, "other": 1})
        config = ProcessConfig.load(self.path, environ={})
        assert config.to_dict() == {"js_compress": "clean", "remove_newlines": False}

    def test_env_overrides_file(self):
        self._write({"js_compress": "clean"})
        config = ProcessConfig.load(self.path, environ={"WEBMINIFY_JS_COMPRESS": "shrink"})
        assert config["js_compress"] == "shrink"

    def test_env_booleans(self):
        environ = {
            "WEBMINIFY_REMOVE_COMMENTS": "false",
            "WEBMINIFY_REMOVE_NEWLINES": "YES",
            "WEBMINIFY_HTML5": "0",
        }
        config = ProcessConfig.load(self.path, environ=environ)
        assert config["remove_comments"] is False
        assert config["remove_newlines"] is True
        assert config["html5"] is False

    def test_env_strings_kept(self):
        config = ProcessConfig.load(self.path, environ={"WEBMINIFY_CSS_COMPRESS": "pretty"})
        assert config["css_compress"] == "pretty"

    def test_unrelated_env_ignored(self):
        config = ProcessConfig.load(self.path, environ={"WEBMINIFY_DEBUG": "1", "HOME": "/x"})
        assert config.to_dict() == {}

    def test_malformed_file_ignored(self):
        self._write("{not json")
        config = ProcessConfig.load(self.path, environ={"WEBMINIFY_HTML5": "true"})
        assert config.to_dict() == {"html5": True}

    def test_non_object_file_ignored(self):
        self._write(["js_compress"])
        config = ProcessConfig.load(self.path, environ={})
        assert config.to_dict() == {}
