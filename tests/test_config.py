"""Tests for configuration schema and loader."""

import json

import pytest

from nanogit import InvalidArgument
from nanogit.config import Config, load_config


class TestConfigSchema:
    
    def test_defaults(self):
        config = Config()
        
        assert config.author.name == "nanogit"
        assert config.log.max_commits == 50
        assert config.log.oneline is False
        assert config.logging.level == "WARNING"
    
    def test_level_is_normalized(self):
        assert Config(logging={"level": "debug"}).logging.level == "DEBUG"
    
    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            Config(logging={"level": "LOUD"})
    
    def test_rejects_non_positive_max_commits(self):
        with pytest.raises(ValueError):
            Config(log={"max_commits": 0})
    
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NANOGIT_AUTHOR__NAME", "Env Person")
        
        assert Config().author.name == "Env Person"


class TestLoadConfig:
    
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.json")
        
        assert config.log.max_commits == 50
    
    def test_reads_camel_case(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "author": {"name": "Jane", "email": "jane@example.com"},
            "log": {"maxCommits": 5, "oneline": True},
        }))
        
        config = load_config(path)
        
        assert config.author.email == "jane@example.com"
        assert config.log.max_commits == 5
        assert config.log.oneline is True
    
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        
        with pytest.raises(InvalidArgument):
            load_config(path)
    
    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log": {"maxCommits": -1}}))
        
        with pytest.raises(InvalidArgument):
            load_config(path)
    
    def test_non_object_root(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]")
        
        with pytest.raises(InvalidArgument):
            load_config(path)
