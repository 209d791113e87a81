"""
Configuration Tests

Run with: python -m pytest deskfs/tests -v
"""

import json
import os
import tempfile
import unittest

from deskfs.core import ConfigLoader, ConfigValidationError, get_config
from deskfs.exceptions import TreeException


class TestConfigLoader(unittest.TestCase):
    """Test configuration loading and access."""

    def setUp(self):
        self.loader = ConfigLoader()
        self.loader.reset()

    def tearDown(self):
        self.loader.reset()

    def write_config(self, data):
        handle, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(handle, 'w', encoding='utf-8') as f:
            f.write(data if isinstance(data, str) else json.dumps(data))
        self.addCleanup(os.remove, path)
        return path

    def test_singleton(self):
        """Every ConfigLoader() is the same object."""
        self.assertIs(ConfigLoader(), self.loader)
        self.assertIs(get_config(), self.loader.config)

    def test_defaults(self):
        """Defaults match the terminal's layout."""
        config = self.loader.config
        self.assertEqual(config.app.name, 'DeskFS')
        self.assertTrue(config.filesystem.seed_sample_tree)
        self.assertEqual(config.logging.level, 'INFO')
        self.assertEqual(config.shell.terminal_width, 71)
        self.assertEqual(config.shell.column_padding, 5)

    def test_load_file(self):
        """Values from a file override defaults section by section."""
        path = self.write_config({
            'shell': {'prompt': '% ', 'terminal_width': 40},
            'filesystem': {'seed_sample_tree': False},
        })

        config = self.loader.load(path)

        self.assertEqual(config.shell.prompt, '% ')
        self.assertEqual(config.shell.terminal_width, 40)
        self.assertEqual(config.shell.history_size, 1000)
        self.assertFalse(config.filesystem.seed_sample_tree)
        self.assertIs(get_config(), config)

    def test_load_errors(self):
        """Missing files, bad JSON and unknown keys are rejected."""
        with self.assertRaises(ConfigValidationError):
            self.loader.load('/nonexistent/deskfs.json')

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self.write_config('{not json'))

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self.write_config({'network': {}}))

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self.write_config({'shell': {'colour': 'red'}}))

        with self.assertRaises(ConfigValidationError):
            self.loader.load(self.write_config({'shell': 5}))

    def test_error_is_tree_exception(self):
        """Configuration errors share the package's base exception."""
        with self.assertRaises(TreeException) as ctx:
            ConfigLoader.parse([])
        self.assertEqual(ctx.exception.error_code, 2001)

    def test_get_and_set(self):
        """Dot-notation access reads and writes settings."""
        self.assertEqual(self.loader.get('shell.prompt'), '$ ')
        self.assertEqual(self.loader.get('shell.missing', 'fallback'), 'fallback')

        self.loader.set('shell.prompt', '# ')
        self.assertEqual(self.loader.config.shell.prompt, '# ')

        with self.assertRaises(ConfigValidationError):
            self.loader.set('shell.missing', 1)
        with self.assertRaises(ConfigValidationError):
            self.loader.set('nothing.here', 1)

    def test_to_dict(self):
        """The configuration converts to nested dicts."""
        data = self.loader.to_dict()
        self.assertEqual(data['shell']['prompt'], '$ ')
        self.assertIsNone(data['logging']['log_file'])


if __name__ == '__main__':
    unittest.main()
