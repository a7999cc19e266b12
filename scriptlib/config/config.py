# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    CONFIG - Configuration settings
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
import configparser
from .opcodes import *
from pathlib import Path

# General defaults
LOGLEVEL = 'WARNING'

# File locations
SCL_CONFIG_FILE = ''
SCL_INSTALL_DIR = Path(__file__).parents[1]
SCL_DATA_DIR = ''
SCL_LOG_FILE = ''

# Main
ENABLE_SCRIPTLIB_LOGGING = True

# Resource limits, use None to disable a limit
MAX_SCRIPT_TOKENS = 10000
MAX_STACK_SIZE = 1000
MAX_ELEMENT_SIZE = 520
MAX_OPS_PER_SCRIPT = 201
MAX_INSTRUCTIONS = 100000

# Script evaluation
FINAL_STACK_POLICIES = ['warn', 'clean']
FINAL_STACK_POLICY = 'warn'
LITERAL_ENCODINGS = ['text', 'hex']
LITERAL_ENCODING = 'text'
LITERAL_TEXT_CHARSET = 'utf-8'
HASH_DIGEST_SIZE = 20
DEFAULT_HASH_PROVIDER = 'truncated_sha256'
DEFAULT_SIGNATURE_VERIFIER = 'mock'


def read_config():
    config = configparser.ConfigParser()

    def config_get(section, var, fallback, is_boolean=False):
        try:
            if is_boolean:
                val = config.getboolean(section, var, fallback=fallback)
            else:
                val = config.get(section, var, fallback=fallback)
            return val
        except Exception:
            return fallback

    def config_limit(var, fallback):
        val = int(config_get('limits', var, fallback=fallback))
        return val if val > 0 else None

    global SCL_CONFIG_FILE, SCL_DATA_DIR, SCL_LOG_FILE, LOGLEVEL, ENABLE_SCRIPTLIB_LOGGING
    global MAX_SCRIPT_TOKENS, MAX_STACK_SIZE, MAX_ELEMENT_SIZE, MAX_OPS_PER_SCRIPT, MAX_INSTRUCTIONS
    global FINAL_STACK_POLICY, LITERAL_ENCODING, DEFAULT_HASH_PROVIDER, DEFAULT_SIGNATURE_VERIFIER

    # Read settings from Configuration file provided in OS environment or ~/.scriptlib/ directory
    config_file_name = os.environ.get('SCRIPTLIB_CONFIG_FILE')
    if not config_file_name:
        SCL_CONFIG_FILE = Path('~/.scriptlib/config.ini').expanduser()
    else:
        SCL_CONFIG_FILE = Path(config_file_name)
        if not SCL_CONFIG_FILE.is_absolute():
            SCL_CONFIG_FILE = Path(Path.home(), '.scriptlib', SCL_CONFIG_FILE)
        if not SCL_CONFIG_FILE.exists():
            SCL_CONFIG_FILE = Path(SCL_INSTALL_DIR, 'config', config_file_name)
        if not SCL_CONFIG_FILE.exists():
            raise IOError('Scriptlib configuration file not found: %s' % str(SCL_CONFIG_FILE))
    data = config.read(str(SCL_CONFIG_FILE))
    SCL_DATA_DIR = Path(config_get('locations', 'data_dir', fallback='~/.scriptlib')).expanduser()

    # Log settings
    ENABLE_SCRIPTLIB_LOGGING = config_get("logs", "enable_scriptlib_logging", fallback=True, is_boolean=True)
    SCL_LOG_FILE = Path(SCL_DATA_DIR, config_get('logs', 'log_file', fallback='scriptlib.log'))
    if ENABLE_SCRIPTLIB_LOGGING:
        SCL_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    LOGLEVEL = config_get('logs', 'loglevel', fallback='WARNING')

    # Resource limits
    MAX_SCRIPT_TOKENS = config_limit('max_script_tokens', 10000)
    MAX_STACK_SIZE = config_limit('max_stack_size', 1000)
    MAX_ELEMENT_SIZE = config_limit('max_element_size', 520)
    MAX_OPS_PER_SCRIPT = config_limit('max_ops_per_script', 201)
    MAX_INSTRUCTIONS = config_limit('max_instructions', 100000)

    # Script evaluation settings
    FINAL_STACK_POLICY = config_get('script', 'final_stack_policy', fallback='warn')
    if FINAL_STACK_POLICY not in FINAL_STACK_POLICIES:
        raise ValueError("Unknown final_stack_policy '%s' in %s, use one of %s" %
                         (FINAL_STACK_POLICY, SCL_CONFIG_FILE, FINAL_STACK_POLICIES))
    LITERAL_ENCODING = config_get('script', 'literal_encoding', fallback='text')
    if LITERAL_ENCODING not in LITERAL_ENCODINGS:
        raise ValueError("Unknown literal_encoding '%s' in %s, use one of %s" %
                         (LITERAL_ENCODING, SCL_CONFIG_FILE, LITERAL_ENCODINGS))
    DEFAULT_HASH_PROVIDER = config_get('script', 'hash_provider', fallback='truncated_sha256')
    DEFAULT_SIGNATURE_VERIFIER = config_get('script', 'signature_verifier', fallback='mock')

    if not data:
        return False
    return True


# Initialize library
read_config()
SCRIPTLIB_VERSION = Path(SCL_INSTALL_DIR, 'config/VERSION').open().read().strip()
