# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    MAIN - Load configs and initialize logging
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

# Do not remove any of the imports below, used by other files
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from scriptlib.config.config import *


# Initialize logging
logger = logging.getLogger('scriptlib')
logger.setLevel(LOGLEVEL)

if ENABLE_SCRIPTLIB_LOGGING:
    handler = RotatingFileHandler(str(SCL_LOG_FILE), maxBytes=100 * 1024 * 1024, backupCount=2)
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s',
                                  datefmt='%Y/%m/%d %H:%M:%S')
    handler.setFormatter(formatter)
    handler.setLevel(LOGLEVEL)
    logger.addHandler(handler)

    _logger = logging.getLogger(__name__)
    logger.info('WELCOME TO SCRIPTLIB - BITCOIN SCRIPT INTERPRETER')
    logger.info('Version: %s' % SCRIPTLIB_VERSION)
    logger.info('Read config from: %s' % SCL_CONFIG_FILE)
    logger.info('Logging to: %s' % SCL_LOG_FILE)
    logger.info('Resource limits: tokens %s, stack %s, element size %s, ops %s, instructions %s' %
                (MAX_SCRIPT_TOKENS, MAX_STACK_SIZE, MAX_ELEMENT_SIZE, MAX_OPS_PER_SCRIPT, MAX_INSTRUCTIONS))
