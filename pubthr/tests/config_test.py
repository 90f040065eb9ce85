import os
import shutil
import tempfile
import unittest

from pubthr import config
from pubthr.errors import ConfigurationError


CONFIG_FILE = """
[zmq]
io_threads = 2
socket_type = PUB
sndhwm = 1000
linger = 250

[logging]
console = false
logfile = /var/log/pubthr/pubthr.log
verbosity = DEBUG
"""


class WhenTestingConfiguration(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.location = os.path.join(self.tmp_dir, 'pubthr.conf')

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def _write(self, contents):
        with open(self.location, 'w') as cfg_file:
            cfg_file.write(contents)
        return config.load_config(self.location)

    def test_defaults(self):
        cfg = config.load_config()
        self.assertEqual(cfg.zmq.io_threads, 1)
        self.assertEqual(cfg.zmq.socket_type, 'push')
        self.assertIsNone(cfg.zmq.sndhwm)
        self.assertEqual(cfg.zmq.linger, 0)
        self.assertTrue(cfg.logging.console)
        self.assertIsNone(cfg.logging.logfile)
        self.assertEqual(cfg.logging.verbosity, 'WARNING')

    def test_unknown_section(self):
        self.assertIsNone(config.load_config().core)

    def test_file_values(self):
        cfg = self._write(CONFIG_FILE)
        self.assertEqual(cfg.zmq.io_threads, 2)
        self.assertEqual(cfg.zmq.socket_type, 'pub')
        self.assertEqual(cfg.zmq.sndhwm, 1000)
        self.assertEqual(cfg.zmq.linger, 250)
        self.assertFalse(cfg.logging.console)
        self.assertEqual(cfg.logging.logfile, '/var/log/pubthr/pubthr.log')
        self.assertEqual(cfg.logging.verbosity, 'DEBUG')

    def test_partial_file(self):
        cfg = self._write('[zmq]\nsndhwm = 10\n')
        self.assertEqual(cfg.zmq.sndhwm, 10)
        self.assertEqual(cfg.zmq.socket_type, 'push')
        self.assertTrue(cfg.logging.console)

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError):
            config.load_config(os.path.join(self.tmp_dir, 'missing.conf'))

    def test_unsupported_socket_type(self):
        cfg = self._write('[zmq]\nsocket_type = dealer\n')
        with self.assertRaises(ConfigurationError):
            cfg.zmq.socket_type

    def test_malformed_integer(self):
        cfg = self._write('[zmq]\nsndhwm = lots\n')
        with self.assertRaises(ConfigurationError):
            cfg.zmq.sndhwm

    def test_malformed_boolean(self):
        cfg = self._write('[logging]\nconsole = maybe\n')
        with self.assertRaises(ConfigurationError):
            cfg.logging.console


class WhenTestingPublisherSettings(unittest.TestCase):

    def test_fields(self):
        settings = config.PublisherSettings('tcp://127.0.0.1:4505', 8)
        self.assertEqual(settings.endpoint, 'tcp://127.0.0.1:4505')
        self.assertEqual(settings.payload_size, 8)

    def test_immutable(self):
        settings = config.PublisherSettings('tcp://127.0.0.1:4505', 8)
        with self.assertRaises(AttributeError):
            settings.payload_size = 16


if __name__ == '__main__':
    unittest.main()
