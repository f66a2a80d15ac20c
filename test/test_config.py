#!/usr/bin/env python3
import os
import tempfile
import unittest
from unittest import mock

from bakeit.config import config_path, read_api_key, CONFIG_ENV
from bakeit.exceptions import ConfigError


class ReadApiKeyTest(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "bakeit.cfg")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, text):
        with open(self.path, 'w') as f:
            f.write(text)

    def test_api_key(self):
        self.write("[pastery]\napi_key = abc%123 \n")
        self.assertEqual(read_api_key(self.path), "abc%123")

    def test_missing_file(self):
        with self.assertRaisesRegex(ConfigError, "Cannot read config file"):
            read_api_key(self.path)

    def test_missing_key(self):
        cases = [
            "",
            "[other]\napi_key = abc\n",
            "[pastery]\n",
            "[pastery]\napi_key =\n",
            "[pastery]\napi_key =    \n",
        ]
        for text in cases:
            self.write(text)
            with self.assertRaisesRegex(ConfigError, "missing api_key",
                                        msg=text):
                read_api_key(self.path)

    def test_malformed(self):
        self.write("api_key = abc\n")
        with self.assertRaisesRegex(ConfigError, "Malformed"):
            read_api_key(self.path)

    def test_not_utf8(self):
        with open(self.path, 'wb') as f:
            f.write(b"[pastery]\napi_key = caf\xe9\n")
        with self.assertRaisesRegex(ConfigError, "not valid UTF-8"):
            read_api_key(self.path)


class ConfigPathTest(unittest.TestCase):

    def test_env_override(self):
        with mock.patch.dict(os.environ, {CONFIG_ENV: "/tmp/elsewhere.cfg"}):
            self.assertEqual(config_path(), "/tmp/elsewhere.cfg")

    def test_default(self):
        with mock.patch.dict(os.environ, {"HOME": "/home/baker"}):
            os.environ.pop(CONFIG_ENV, None)
            self.assertEqual(
                config_path(),
                os.path.join("/home/baker", ".config", "bakeit.cfg"),
            )

    def test_no_home(self):
        with mock.patch.dict(os.environ), \
                mock.patch("bakeit.config.os.path.expanduser",
                           return_value="~"):
            os.environ.pop(CONFIG_ENV, None)
            with self.assertRaisesRegex(ConfigError, "home directory"):
                config_path()


if __name__ == "__main__":
    unittest.main()

# vim: ts=4 sw=4 sts=4 expandtab
