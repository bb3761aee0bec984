# Copyright 2013 craigslist
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

'''anybase log module.

This modules provides a few helper functions around the standard Python
logging module to setup console and syslog logging. Applications should
call setup() with the parsed log config to setup logging. Modules that
need to log can use get_log() to get a logging object with the appropriate
level set. If no syslog ident is configured, console logging will be
enabled by default.'''

import logging.handlers
import os

DEFAULT_CONFIG = {
    'anybase': {
        'log': {
            'console': False,
            'format': ' %(process)d %(levelname)s %(name)s %(message)s',
            'level': 'WARNING',
            'syslog_ident': None}}}

SYSLOG_ADDRESS = '/dev/log'


def setup(config):
    '''Enable console and/or syslog logging.'''
    config = config['anybase']['log']
    level = _get_level(config['level'])
    logger = logging.getLogger()
    logger.setLevel(level)

    if config['syslog_ident'] is not None and os.path.exists(SYSLOG_ADDRESS):
        handler = logging.handlers.SysLogHandler(address=SYSLOG_ADDRESS)
        format_string = str(config['syslog_ident'] + config['format'])
        handler.setFormatter(logging.Formatter(format_string))
        handler.setLevel(level)
        logger.addHandler(handler)

    if config['console'] or config['syslog_ident'] is None:
        handler = logging.StreamHandler()
        format_string = '%(asctime)s' + str(config['format'])
        handler.setFormatter(logging.Formatter(format_string))
        handler.setLevel(level)
        logger.addHandler(handler)


def _get_level(level):
    '''Get level, converting from string if needed.'''
    if isinstance(level, str):
        return logging.getLevelName(level)
    return level


def get_log(name, level='NOTSET'):
    '''Get a logger and set the appropriate level.'''
    logger = logging.getLogger(name)
    logger.setLevel(_get_level(level))
    return logger
