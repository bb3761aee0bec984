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

'''Tests for anybase config module.'''

import io
import os.path
import sys
import unittest

import anybase.config

TEST_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.path.join(TEST_DIR, 'test_config.d')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'test_config.json')


class TestConfig(unittest.TestCase):

    def test_load(self):
        config, args = anybase.config.load({}, args=[])
        self.assertEqual({}, config)
        self.assertEqual([], args)
        config, args = anybase.config.load({}, args=['-d'])
        self.assertEqual('DEBUG', config['anybase']['log']['level'])
        self.assertEqual([], args)
        config, args = anybase.config.load({}, args=['-v'])
        self.assertEqual('INFO', config['anybase']['log']['level'])
        self.assertEqual([], args)
        config, args = anybase.config.load(dict(a=dict(b='', d=1, e=False)),
            args=['--a.b=c', '--a.d=4', '--a.e=true', 'encode'])
        self.assertEqual('c', config['a']['b'])
        self.assertEqual(4, config['a']['d'])
        self.assertEqual(True, config['a']['e'])
        self.assertEqual(['encode'], args)
        self.assertRaises(SystemExit, anybase.config.load, {},
            expect_args=False, args=['test'])

    def test_load_files(self):
        config, args = anybase.config.load({}, args=['-c', CONFIG_FILE])
        self.assertEqual('test', config['anybase']['log']['syslog_ident'])
        self.assertEqual('Z85', config['anybase']['tool']['alphabet'])
        self.assertEqual([], args)
        config, args = anybase.config.load({},
            config_files=['not_found', CONFIG_FILE], args=[])
        self.assertEqual('test', config['anybase']['log']['syslog_ident'])
        self.assertEqual([], args)
        config, args = anybase.config.load({},
            config_files=[CONFIG_FILE], args=['-n'])
        self.assertEqual({}, config)

    def test_load_dirs(self):
        config, args = anybase.config.load({}, args=['-C', CONFIG_DIR])
        self.assertEqual('test', config['anybase']['log']['syslog_ident'])
        self.assertEqual([], args)
        config, args = anybase.config.load({},
            config_dirs=['not_found', CONFIG_DIR], args=[])
        self.assertEqual('test', config['anybase']['log']['syslog_ident'])
        self.assertEqual([], args)

    def test_parse_value(self):
        self.assertEqual('', anybase.config.parse_value(''))
        self.assertEqual([1, 2, 'three'],
            anybase.config.parse_value('[1, 2, "three"]'))
        self.assertEqual({"test": False},
            anybase.config.parse_value('{"test": false}'))
        self.assertEqual('test string',
            anybase.config.parse_value('test string'))
        self.assertEqual('10.0.0.1', anybase.config.parse_value('10.0.0.1'))
        self.assertEqual('012', anybase.config.parse_value('012'))
        self.assertEqual(5, anybase.config.parse_value('5'))
        self.assertEqual(-1.2, anybase.config.parse_value('-1.2'))
        self.assertEqual(True, anybase.config.parse_value('true'))
        self.assertEqual(None, anybase.config.parse_value('null'))
        self.assertEqual(7, anybase.config.parse_value(7))
        old_stdin = sys.stdin
        sys.stdin = io.StringIO('test')
        try:
            self.assertEqual('test', anybase.config.parse_value('-'))
        finally:
            sys.stdin = old_stdin
        self.assertRaises(ValueError, anybase.config.parse_value, '{')

    def test_help(self):
        self.assertRaises(SystemExit, anybase.config.load, {}, args=['-h'])

    def test_print_config(self):
        self.assertRaises(SystemExit, anybase.config.load, {}, args=['-p'])

    def test_version(self):
        self.assertRaises(SystemExit, anybase.config.load, {}, args=['-V'])

    def test_bad_file(self):
        self.assertRaises(SystemExit, anybase.config.load, {},
            args=['-c', 'xx'])
        self.assertRaises(SystemExit, anybase.config.load, {},
            args=['-c', os.path.abspath(__file__)])
        self.assertRaises(anybase.config.ConfigError,
            anybase.config.load_file, {}, os.path.abspath(__file__))

    def test_bad_option(self):
        self.assertRaises(SystemExit, anybase.config.load, dict(a=1),
            args=['--a={'])

    def test_update(self):
        original = dict(a=0, b=0)
        config = anybase.config.update(original, dict(a=1, b=1), dict(a=2))
        self.assertEqual(config, dict(a=2, b=1))
        self.assertEqual(original, dict(a=0, b=0))
        nested = anybase.config.update(dict(a=dict(b=1, c=2)),
            dict(a=dict(c=3)))
        self.assertEqual(dict(a=dict(b=1, c=3)), nested)

    def test_get_options(self):
        self.assertEqual(['a.b', 'a.c', 'd'],
            list(anybase.config.get_options(dict(a=dict(b=1, c={}), d=2))))

    def test_method_help(self):
        self.assertEqual('test_method_help',
            anybase.config.method_help(self.test_method_help))

        def _test(one, two, three=None):
            '''Test function for method_help.'''
            return one, two, three

        self.assertEqual('_test <one> <two> [three=null]',
            anybase.config.method_help(_test))
