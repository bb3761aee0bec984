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

'''anybase command line tool module.

This module runs the anybase conversions from the command line. The
alphabet comes from config, either by name from the built-in bases, by
size (an integer picks anybase.alphabet.base()), or with explicit numerals.
For example::

    anybase encode 'Hello World'
    anybase --anybase.tool.alphabet=Z85 encode - < data.bin
    anybase --anybase.tool.numerals=01 numeral 48
    anybase bases

Any argument given as '-' is read from standard input.'''

import os
import sys

import anybase.alphabet
import anybase.bases
import anybase.codec
import anybase.config
import anybase.log

DEFAULT_CONFIG = anybase.config.update(anybase.log.DEFAULT_CONFIG, {
    'anybase': {
        'tool': {
            'alphabet': 'Base62',
            'log_level': 'NOTSET',
            'numerals': None}}})

CONFIG_FILES = ['/etc/anybase.json', os.path.expanduser('~/.anybase.json')]

# Command name to number of arguments.
COMMANDS = {
    'encode': 1,
    'decode': 1,
    'numeral': 1,
    'integer': 1,
    'bases': 0}


def get_alphabet(config):
    '''Get the alphabet for the tool section of a config.'''
    numerals = config['numerals']
    if numerals is not None:
        if isinstance(numerals, int):
            numerals = str(numerals)
        return anybase.alphabet.Alphabet(numerals)
    if isinstance(config['alphabet'], int):
        return anybase.alphabet.base(config['alphabet'])
    return anybase.bases.get(config['alphabet'])


class Tool(object):
    '''Command runner for a single configured codec. Input comes from the
    command arguments or the stdin stream, output goes to the stdout
    stream, and both streams work with bytes.'''

    def __init__(self, config, stdin=None, stdout=None):
        config = config['anybase']['tool']
        self.log = anybase.log.get_log('anybase_tool', config['log_level'])
        self.codec = anybase.codec.Codec(get_alphabet(config))
        self.stdin = stdin or sys.stdin.buffer
        self.stdout = stdout or sys.stdout.buffer

    def run(self, args):
        '''Run the command given in args and return the exit status.'''
        if len(args) == 0 or args[0] not in COMMANDS or \
                len(args) - 1 != COMMANDS[args[0]]:
            self.usage()
            return 1
        try:
            getattr(self, args[0])(*args[1:])
        except ValueError as exception:
            self.log.error(_('Could not run %s: %s'), args[0], exception)
            return 1
        self.log.debug(_('Ran %s with %r'), args[0], self.codec)
        return 0

    def usage(self):
        '''Print the list of commands.'''
        lines = [_('Usage: anybase [options] <command> [args]'),
            _('Commands:')]
        for command in sorted(COMMANDS):
            lines.append('  ' +
                anybase.config.method_help(getattr(self, command)))
        self._write('\n'.join(lines))

    def encode(self, data):
        '''Encode a byte string.'''
        self._write(self.codec.encode(self._read(data)))

    def decode(self, string):
        '''Decode a numeral string to raw bytes.'''
        self.stdout.write(self.codec.decode(self._parse(string)))
        self.stdout.flush()

    def numeral(self, number):
        '''Convert an integer to a numeral string.'''
        self._write(self.codec.integer_to_string(int(self._read(number))))

    def integer(self, string):
        '''Convert a numeral string to an integer.'''
        self._write(str(self.codec.string_to_integer(self._parse(string))))

    def bases(self):
        '''Print the table of built-in bases.'''
        self._write(anybase.bases.bases_table())

    def _read(self, value):
        '''Get the bytes of an argument, reading stdin if it is '-'.'''
        if value == '-':
            return self.stdin.read()
        return os.fsencode(value)

    def _parse(self, value):
        '''Get a numeral string of the codec's type from an argument.'''
        data = self._read(value)
        symbols = self.codec.numerals
        if isinstance(symbols, bytes):
            return data
        if isinstance(symbols, str):
            return data.decode('utf-8').rstrip('\r\n')
        return tuple(data.decode('utf-8').split())

    def _write(self, value):
        '''Write a result line, or raw bytes for byte alphabets.'''
        if isinstance(value, tuple):
            value = ' '.join(str(symbol) for symbol in value)
        if isinstance(value, str):
            value = (value + '\n').encode('utf-8')
        self.stdout.write(value)
        self.stdout.flush()


def main(args=None):
    '''Parse config and options, then run the requested command.'''
    config, args = anybase.config.load(DEFAULT_CONFIG, CONFIG_FILES,
        args=args)
    anybase.log.setup(config)
    try:
        tool = Tool(config)
    except ValueError as exception:
        log = anybase.log.get_log('anybase_tool')
        log.error(_('Invalid alphabet: %s'), exception)
        sys.exit(1)
    sys.exit(tool.run(args))


if __name__ == '__main__':
    main()
