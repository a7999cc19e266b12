# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    Unit Tests for Configuration settings
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import os
import tempfile
import unittest

from scriptlib.config import config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.config_dir = tempfile.TemporaryDirectory()
        self.config_file = os.path.join(self.config_dir.name, 'config.ini')

    def tearDown(self):
        os.environ.pop('SCRIPTLIB_CONFIG_FILE', None)
        config.read_config()
        self.config_dir.cleanup()

    def _read(self, content):
        with open(self.config_file, 'w') as f:
            f.write(content)
        os.environ['SCRIPTLIB_CONFIG_FILE'] = self.config_file
        return config.read_config()

    def test_config_defaults(self):
        self.assertTrue(self._read("[logs]\nenable_scriptlib_logging=False\n"))
        self.assertEqual(config.MAX_SCRIPT_TOKENS, 10000)
        self.assertEqual(config.MAX_STACK_SIZE, 1000)
        self.assertEqual(config.MAX_ELEMENT_SIZE, 520)
        self.assertEqual(config.MAX_OPS_PER_SCRIPT, 201)
        self.assertEqual(config.MAX_INSTRUCTIONS, 100000)
        self.assertEqual(config.FINAL_STACK_POLICY, 'warn')
        self.assertEqual(config.LITERAL_ENCODING, 'text')
        self.assertFalse(config.ENABLE_SCRIPTLIB_LOGGING)

    def test_config_settings(self):
        self._read("[logs]\nenable_scriptlib_logging=False\nloglevel=DEBUG\n"
                   "[limits]\nmax_stack_size=50\nmax_instructions=0\n"
                   "[script]\nfinal_stack_policy=clean\nliteral_encoding=hex\nhash_provider=hash160\n"
                   "signature_verifier=ecdsa\n")
        self.assertEqual(config.LOGLEVEL, 'DEBUG')
        self.assertEqual(config.MAX_STACK_SIZE, 50)
        self.assertIsNone(config.MAX_INSTRUCTIONS)
        self.assertEqual(config.FINAL_STACK_POLICY, 'clean')
        self.assertEqual(config.LITERAL_ENCODING, 'hex')
        self.assertEqual(config.DEFAULT_HASH_PROVIDER, 'hash160')
        self.assertEqual(config.DEFAULT_SIGNATURE_VERIFIER, 'ecdsa')

    def test_config_invalid_policy(self):
        self.assertRaisesRegex(ValueError, "Unknown final_stack_policy 'strict'", self._read,
                               "[logs]\nenable_scriptlib_logging=False\n[script]\nfinal_stack_policy=strict\n")

    def test_config_invalid_encoding(self):
        self.assertRaisesRegex(ValueError, "Unknown literal_encoding 'base64'", self._read,
                               "[logs]\nenable_scriptlib_logging=False\n[script]\nliteral_encoding=base64\n")

    def test_config_file_not_found(self):
        os.environ['SCRIPTLIB_CONFIG_FILE'] = os.path.join(self.config_dir.name, 'missing.ini')
        self.assertRaises(IOError, config.read_config)


if __name__ == '__main__':
    unittest.main()
