"""
Unit tests for ghactivity.config module
"""
import unittest
import tempfile
import os
import shutil
import json
import logging
from pathlib import Path
from unittest.mock import patch

import yaml

from ghactivity.config import (
    load_config,
    get_default_config,
    get_config_path,
    merge_configs,
    apply_env_overrides,
    configure_logging,
    logger,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up an isolated HOME and a clean environment"""
        self.temp_dir = tempfile.mkdtemp()
        self.env = patch.dict(os.environ, {'HOME': self.temp_dir}, clear=False)
        self.env.start()
        for key in list(os.environ):
            if key.startswith('GHACTIVITY_') or key == 'GITHUB_TOKEN':
                del os.environ[key]
        self.config_dir = Path(self.temp_dir) / '.ghactivity'

    def tearDown(self):
        """Clean up test environment"""
        self.env.stop()
        shutil.rmtree(self.temp_dir)

    def write(self, filename, content):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.config_dir / filename
        path.write_text(content)
        return path

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertEqual(config['github']['api_base'], 'https://api.github.com')
        self.assertTrue(config['github']['user_agent'])
        self.assertEqual(config['github']['token'], '')
        self.assertEqual(config['logging']['level'], 'INFO')

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        config = load_config()
        self.assertEqual(config, get_default_config())

    def test_default_config_path(self):
        self.assertEqual(get_config_path(), self.config_dir / 'config.json')

    def test_load_json_config(self):
        self.write('config.json', json.dumps({'github': {'timeout_seconds': 5}}))

        config = load_config()

        self.assertEqual(config['github']['timeout_seconds'], 5)
        self.assertEqual(config['github']['api_base'], 'https://api.github.com')

    def test_load_yaml_config(self):
        self.write('config.yaml', yaml.safe_dump({'github': {'user_agent': 'me/1.0'}}))

        config = load_config()

        self.assertEqual(config['github']['user_agent'], 'me/1.0')

    def test_load_toml_config(self):
        self.write('config.toml', '[logging]\nlevel = "DEBUG"\n')

        config = load_config()

        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_config_env_path(self):
        path = Path(self.temp_dir) / 'elsewhere.json'
        path.write_text(json.dumps({'github': {'token': 'from-file'}}))
        os.environ['GHACTIVITY_CONFIG'] = str(path)

        self.assertEqual(get_config_path(), path)
        self.assertEqual(load_config()['github']['token'], 'from-file')

    def test_invalid_file_falls_back_to_defaults(self):
        self.write('config.json', '{not json')

        with self.assertLogs('ghactivity', level='ERROR'):
            config = load_config()

        self.assertEqual(config, get_default_config())

    def test_non_mapping_file_ignored(self):
        self.write('config.json', '[1, 2]')

        with self.assertLogs('ghactivity', level='ERROR'):
            config = load_config()

        self.assertEqual(config, get_default_config())

    def test_null_section_falls_back_to_defaults(self):
        self.write('config.yaml', 'github:\nlogging:\n')

        with self.assertLogs('ghactivity', level='ERROR') as logs:
            config = load_config()

        self.assertEqual(config, get_default_config())
        self.assertIn("section 'github'", "\n".join(logs.output))

    def test_wrong_typed_values_reset(self):
        self.write('config.json', json.dumps({
            'github': {'timeout_seconds': 'soon', 'api_base': 5, 'user_agent': 'me/2.0'},
        }))

        with self.assertLogs('ghactivity', level='ERROR'):
            config = load_config()

        self.assertEqual(config['github']['timeout_seconds'], 30)
        self.assertEqual(config['github']['api_base'], 'https://api.github.com')
        self.assertEqual(config['github']['user_agent'], 'me/2.0')

    def test_env_cannot_replace_section(self):
        os.environ['GHACTIVITY_GITHUB'] = 'oops'

        with self.assertLogs('ghactivity', level='ERROR'):
            config = load_config()

        self.assertEqual(config['github'], get_default_config()['github'])

    def test_env_override(self):
        os.environ['GHACTIVITY_GITHUB_TIMEOUT_SECONDS'] = '7'
        os.environ['GHACTIVITY_GITHUB_USER_AGENT'] = 'env-agent'

        config = load_config()

        self.assertEqual(config['github']['timeout_seconds'], 7)
        self.assertEqual(config['github']['user_agent'], 'env-agent')

    def test_github_token_fallback(self):
        os.environ['GITHUB_TOKEN'] = 'ghp_fallback'

        self.assertEqual(load_config()['github']['token'], 'ghp_fallback')

    def test_configured_token_wins(self):
        os.environ['GITHUB_TOKEN'] = 'ghp_fallback'
        os.environ['GHACTIVITY_GITHUB_TOKEN'] = 'ghp_explicit'

        self.assertEqual(load_config()['github']['token'], 'ghp_explicit')


class TestMergeAndOverrides(unittest.TestCase):
    """Test merge and environment helpers"""

    def test_merge_nested(self):
        merged = merge_configs({'a': {'x': 1, 'y': 2}, 'b': 1}, {'a': {'y': 3}, 'c': 4})
        self.assertEqual(merged, {'a': {'x': 1, 'y': 3}, 'b': 1, 'c': 4})

    def test_override_unknown_key_ignored(self):
        with patch.dict(os.environ, {'GHACTIVITY_NOPE_KEY': 'x'}):
            config = apply_env_overrides(get_default_config())
        self.assertNotIn('nope', config)

    def test_override_boolean(self):
        with patch.dict(os.environ, {'GHACTIVITY_FLAG': 'false'}):
            config = apply_env_overrides({'flag': True})
        self.assertIs(config['flag'], False)


class TestConfigureLogging(unittest.TestCase):
    """Test log level selection"""

    def setUp(self):
        self.original_level = logger.level

    def tearDown(self):
        logger.setLevel(self.original_level)

    def test_verbose_is_debug(self):
        configure_logging(get_default_config(), verbose=True)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_configured_level(self):
        configure_logging({'logging': {'level': 'warning'}})
        self.assertEqual(logger.level, logging.WARNING)

    def test_unknown_level_defaults_to_info(self):
        with self.assertLogs('ghactivity', level='WARNING'):
            configure_logging({'logging': {'level': 'CHATTY'}})
            self.assertEqual(logger.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
