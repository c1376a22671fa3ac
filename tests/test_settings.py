"""Tests for settings loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from maptiler_cloud.domain.errors import ConfigurationError
from maptiler_cloud.settings import (
    ClientSettings,
    api_key_from_env,
    load_settings,
    read_settings_file,
    require_api_key,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'maptiler.toml'
    path.write_text(
        '[maptiler]\n'
        'api_key = "file-key"\n'
        '\n'
        '[logging]\n'
        'level = "debug"\n'
        '\n'
        '[output]\n'
        'dir = "tiles"\n',
        encoding='utf-8',
    )
    return path


class TestClientSettings:
    """Tests for the pydantic model."""

    def test_defaults(self):
        s = ClientSettings()
        assert s.api_key is None
        assert s.log_level == 'INFO'
        assert s.output_dir == Path()

    def test_blank_key_is_none(self):
        assert ClientSettings(api_key='   ').api_key is None

    def test_log_level_normalized(self):
        assert ClientSettings(log_level='warning').log_level == 'WARNING'

    def test_bad_log_level(self):
        with pytest.raises(ValueError):
            ClientSettings(log_level='loud')


class TestReadSettingsFile:
    """Tests for the TOML reader."""

    def test_sections_flattened(self, config_file):
        assert read_settings_file(config_file) == {
            'api_key': 'file-key',
            'log_level': 'debug',
            'output_dir': 'tiles',
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match='Cannot read'):
            read_settings_file(tmp_path / 'nope.toml')

    def test_malformed_file(self, tmp_path):
        path = tmp_path / 'bad.toml'
        path.write_text('[maptiler\napi_key = ', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='Malformed'):
            read_settings_file(path)

    def test_scalar_section(self, tmp_path):
        path = tmp_path / 'scalar.toml'
        path.write_text('logging = 5\n', encoding='utf-8')
        with pytest.raises(ConfigurationError, match=r'Section \[logging\] .* must be a table'):
            read_settings_file(path)

    def test_string_section(self, tmp_path):
        path = tmp_path / 'string.toml'
        path.write_text('maptiler = "api_key"\n', encoding='utf-8')
        with pytest.raises(ConfigurationError, match=r'Section \[maptiler\]'):
            load_settings(path, env_dir=tmp_path)


class TestLoadSettings:
    """Tests for merging file, secrets and environment."""

    def test_from_file(self, config_file, tmp_path):
        s = load_settings(config_file, env_dir=tmp_path)
        assert s.api_key == 'file-key'
        assert s.log_level == 'DEBUG'
        assert s.output_dir == Path('tiles')

    def test_env_overrides_file(self, config_file, tmp_path, monkeypatch):
        monkeypatch.setenv('MAPTILER_KEY', 'env-key')
        assert load_settings(config_file, env_dir=tmp_path).api_key == 'env-key'

    def test_api_key_fallback_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv('API_KEY', 'generic-key')
        assert load_settings(env_dir=tmp_path).api_key == 'generic-key'

    def test_secrets_env_file(self, tmp_path):
        (tmp_path / '.secrets.env').write_text('MAPTILER_KEY=secret-key\n', encoding='utf-8')
        # load_dotenv writes to os.environ; patch.dict restores it afterwards
        with patch.dict('os.environ', {}):
            s = load_settings(env_dir=tmp_path)
        assert s.api_key == 'secret-key'

    def test_secrets_do_not_override_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv('MAPTILER_KEY', 'env-key')
        (tmp_path / '.env').write_text('MAPTILER_KEY=file-key\n', encoding='utf-8')
        assert load_settings(env_dir=tmp_path).api_key == 'env-key'

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / 'c.toml'
        path.write_text('[logging]\nlevel = "loud"\n', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='Invalid settings'):
            load_settings(path, env_dir=tmp_path)

    def test_nothing_configured(self, tmp_path):
        assert load_settings(env_dir=tmp_path).api_key is None


class TestRequireApiKey:
    """Tests for require_api_key."""

    def test_present(self):
        assert require_api_key(ClientSettings(api_key='k')) == 'k'

    def test_missing(self):
        with pytest.raises(ConfigurationError, match='API key not found'):
            require_api_key(ClientSettings())

    def test_env_helper_empty(self):
        assert api_key_from_env() is None
