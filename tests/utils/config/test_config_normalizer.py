"""
Tests for ConfigNormalizer class.
"""

import pytest
from configparser import ConfigParser

from utils.config.config_normalizer import ConfigNormalizer


class TestConfigNormalizer:
    """Test cases for ConfigNormalizer functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.normalizer = ConfigNormalizer()

    def test_normalize_config_basic(self):
        """Section and key names are lowercased, values are preserved."""
        raw_config = {
            'Hashing': {'Algorithm': 'SHA-256', 'chunk_size_mb': '8'},
            'LOGGING': {'logfile': 'logs/out.log'},
        }

        normalized = self.normalizer.normalize_config(raw_config)

        assert normalized == {
            'hashing': {'algorithm': 'SHA-256', 'chunk_size_mb': '8'},
            'logging': {'logfile': 'logs/out.log'},
        }

    def test_normalize_config_duplicate_sections(self):
        """Lowercase section wins conflicts; other keys are merged."""
        raw_config = {
            'Hashing': {'algorithm': 'md5', 'progress': 'false'},
            'hashing': {'algorithm': 'sha1'},
            'HASHING': {'chunk_size_mb': '2'},
        }

        normalized = self.normalizer.normalize_config(raw_config)

        assert list(normalized) == ['hashing']
        assert normalized['hashing'] == {'algorithm': 'sha1', 'progress': 'false', 'chunk_size_mb': '2'}

    def test_normalize_config_alias_section(self):
        """The [hash] alias maps onto [hashing]."""
        normalized = self.normalizer.normalize_config({'Hash': {'algorithm': 'sha512'}})
        assert normalized == {'hashing': {'algorithm': 'sha512'}}

    def test_normalize_config_configparser_input(self):
        parser = ConfigParser()
        parser.add_section('Hashing')
        parser.set('Hashing', 'algorithm', 'sha256')

        normalized = self.normalizer.normalize_config(parser)

        assert normalized['hashing']['algorithm'] == 'sha256'

    def test_normalize_config_unknown_sections(self):
        normalized = self.normalizer.normalize_config({'CustomSection': {'Key1': 'value1'}})
        assert normalized == {'customsection': {'key1': 'value1'}}

    @pytest.mark.parametrize("env_var,section,key", [
        ('HASHCULATE_ALGORITHM', 'hashing', 'algorithm'),
        ('HASHCULATE_CHUNK_SIZE_MB', 'hashing', 'chunk_size_mb'),
        ('HASHCULATE_PROGRESS', 'hashing', 'progress'),
        ('HASHCULATE_LOGFILE', 'logging', 'logfile'),
    ])
    def test_apply_env_overrides(self, monkeypatch, env_var, section, key):
        monkeypatch.setenv(env_var, 'from-env')
        config = {'hashing': {'algorithm': 'md5'}}

        overridden = self.normalizer.apply_env_overrides(config)

        assert overridden[section][key] == 'from-env'
        # Input is not mutated
        assert config == {'hashing': {'algorithm': 'md5'}}

    def test_apply_env_overrides_without_env(self):
        config = {'hashing': {'algorithm': 'md5'}}
        assert self.normalizer.apply_env_overrides(config) == config

    def test_normalize_and_override(self, monkeypatch):
        monkeypatch.setenv('HASHCULATE_ALGORITHM', 'sha1')
        result = self.normalizer.normalize_and_override({'HASHING': {'Algorithm': 'md5', 'progress': 'no'}})
        assert result == {'hashing': {'algorithm': 'sha1', 'progress': 'no'}}

    def test_canonical_section(self):
        assert self.normalizer.canonical_section('HASH') == 'hashing'
        assert self.normalizer.canonical_section('Logging') == 'logging'
        assert self.normalizer.canonical_section('Other') == 'other'

    def test_get_supported_env_vars_returns_copy(self):
        env_vars = self.normalizer.get_supported_env_vars()
        env_vars.clear()
        assert 'HASHCULATE_ALGORITHM' in self.normalizer.get_supported_env_vars()
