"""Tests for configuration, logging and the exception hierarchy."""

import json
import os
import tempfile
import unittest

from vshell.core.config_loader import Config, ConfigLoader
from vshell.exceptions import (
    CommandNotFoundError,
    ConfigValidationError,
    DirectoryNotFoundError,
    ShellException,
)
from vshell.logger import Logger, LogLevel
from vshell.shell import BufferDisplay, CommandRegistry, CommandSpec, create_session
from vshell.tests.helpers import make_session


class TestConfig(unittest.TestCase):
    """Test the configuration system."""

    def tearDown(self):
        ConfigLoader().reset()

    def write_config(self, data) -> str:
        handle = tempfile.NamedTemporaryFile('w', suffix='.json', delete=False)
        with handle:
            if isinstance(data, str):
                handle.write(data)
            else:
                json.dump(data, handle)
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def test_default_config(self):
        config = Config()
        self.assertEqual(config.shell.user, 'guest')
        self.assertEqual(config.filesystem.root_label, '~')
        self.assertIn('about.txt', config.filesystem.seed)
        self.assertEqual(config.logging.level, 'WARNING')

    def test_loader_is_singleton(self):
        self.assertIs(ConfigLoader(), ConfigLoader())

    def test_load_overrides_sections(self):
        path = self.write_config({
            'shell': {'user': 'carl'},
            'filesystem': {'seed': {'x.txt': 'only line'}},
        })
        config = ConfigLoader().load(path)
        self.assertEqual(config.shell.user, 'carl')
        self.assertEqual(config.shell.hostname, 'www.carlegbert.com')
        self.assertEqual(config.filesystem.seed, {'x.txt': 'only line'})

        session = create_session(config=config, display=BufferDisplay())
        self.assertEqual(session.execute('whoami').std_out, ['carl'])
        self.assertEqual(session.execute('cat x.txt').std_out, ['only line'])

    def test_missing_file(self):
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load('/nonexistent/vshell.json')

    def test_invalid_json(self):
        path = self.write_config('{not json')
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load(path)

    def test_invalid_log_level(self):
        path = self.write_config({'logging': {'level': 'LOUD'}})
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load(path)

    def test_section_must_be_object(self):
        for section in ('shell', 'filesystem', 'logging'):
            path = self.write_config({section: 'oops'})
            with self.assertRaises(ConfigValidationError) as ctx:
                ConfigLoader().load(path)
            self.assertIn(section, ctx.exception.message)

    def test_invalid_seed_values(self):
        bad_seeds = [
            {'x.txt': 5},
            {'x.txt': None},
            {'x.txt': ['ok', 3]},
            {'docs': {'deep.txt': True}},
        ]
        for seed in bad_seeds:
            path = self.write_config({'filesystem': {'seed': seed}})
            with self.assertRaises(ConfigValidationError):
                ConfigLoader().load(path)

    def test_nested_seed_error_names_entry(self):
        with self.assertRaises(ConfigValidationError) as ctx:
            ConfigLoader.parse({'filesystem': {'seed': {'docs': {'a.txt': 1}}}})
        self.assertIn('filesystem.seed.docs.a.txt', ctx.exception.message)

    def test_get_and_set(self):
        loader = ConfigLoader()
        loader.set('shell.user', 'root')
        self.assertEqual(loader.get('shell.user'), 'root')
        self.assertEqual(loader.get('shell.nothing', 'dflt'), 'dflt')
        with self.assertRaises(ConfigValidationError):
            loader.set('shell.nothing', 1)
        self.assertEqual(loader.to_dict()['shell']['user'], 'root')


class TestLogger(unittest.TestCase):
    """Test the logging system."""

    def test_logger_per_subsystem(self):
        self.assertIs(Logger('test1'), Logger('test1'))
        self.assertIsNot(Logger('test1'), Logger('test2'))

    def capture(self):
        Logger.initialize(level=LogLevel.DEBUG)
        Logger.set_level(LogLevel.DEBUG)
        Logger.clear_session_logs()
        self.addCleanup(Logger.set_level, LogLevel.WARNING)
        self.addCleanup(Logger.clear_session_logs)

    def test_unknown_command_is_logged(self):
        self.capture()
        session = make_session()
        session.execute('frobnicate')

        logs = Logger.get_session_logs(level='INFO', subsystem='interpreter')
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0]['message'], 'Unknown command')
        self.assertEqual(logs[0]['context'], {'command': 'frobnicate'})

    def test_handler_fault_is_logged(self):
        self.capture()
        def explode(session, cmd):
            raise RuntimeError("boom")

        registry = CommandRegistry([CommandSpec('explode', explode)])
        make_session(registry=registry).execute('explode now')

        logs = Logger.get_session_logs(level='ERROR', subsystem='interpreter')
        self.assertEqual(len(logs), 1)
        self.assertIn('RuntimeError', logs[0]['message'])

    def test_clear_session_logs(self):
        self.capture()
        make_session().execute('nope')
        self.assertTrue(Logger.get_session_logs(subsystem='interpreter'))
        Logger.clear_session_logs()
        self.assertEqual(Logger.get_session_logs(), [])

    def test_level_filters_records(self):
        self.capture()
        Logger.set_level(LogLevel.WARNING)
        make_session().execute('nope')
        self.assertEqual(Logger.get_session_logs(subsystem='interpreter'), [])

    def test_log_levels(self):
        self.assertTrue(LogLevel.ERROR > LogLevel.INFO)
        self.assertEqual(LogLevel.from_name('debug'), LogLevel.DEBUG)
        with self.assertRaises(ValueError):
            LogLevel.from_name('loud')


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_command_not_found(self):
        exc = CommandNotFoundError('foo')
        self.assertIsInstance(exc, ShellException)
        self.assertEqual(exc.stderr, 'foo: command not found')
        self.assertEqual(exc.error_code, 5001)
        self.assertIn('5001', str(exc))

    def test_directory_not_found(self):
        exc = DirectoryNotFoundError('a/b')
        self.assertEqual(exc.path, 'a/b')
        self.assertEqual(exc.stderr, 'a/b: Directory not found')


if __name__ == '__main__':
    unittest.main()
