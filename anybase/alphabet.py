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

'''anybase alphabet module.

An alphabet is the ordered list of numeral symbols used to write numbers
in some base. The base is the number of symbols, and the symbol at index
0 is the zero digit. Alphabets are validated when created and can not be
changed afterwards, so one alphabet can be shared by any number of callers.
For example::

    >>> ternary = anybase.alphabet.Alphabet('012')
    >>> ternary.base
    3
    >>> ternary.index('2')
    2
    >>> anybase.alphabet.base(16).symbols
    '0123456789ABCDEF'

Symbols are usually given as a string, but bytes (each byte is a symbol)
and other sequences of hashable tokens work too. Numeral strings written
with an alphabet use the same type: str for str alphabets, bytes for
bytes alphabets, and tuples for everything else.'''

DIGITS = '0123456789'
UPPERCASE = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
LOWERCASE = 'abcdefghijklmnopqrstuvwxyz'
DIGITS_UPPERCASE_LOWERCASE = DIGITS + UPPERCASE + LOWERCASE
MIN_BASE = 2
MAX_BASE = len(DIGITS_UPPERCASE_LOWERCASE)


class Alphabet(object):
    '''Ordered set of unique numeral symbols.'''

    __slots__ = ('_symbols', '_numerals', '_indexes')

    def __init__(self, symbols):
        if isinstance(symbols, Alphabet):
            symbols = symbols.symbols
        if isinstance(symbols, (bytes, bytearray)):
            symbols = bytes(symbols)
            numerals = tuple(symbols[index:index + 1]
                for index in range(len(symbols)))
        elif isinstance(symbols, str):
            numerals = tuple(symbols)
        else:
            symbols = tuple(symbols)
            numerals = symbols
        if len(numerals) < MIN_BASE:
            raise ConfigurationError(_('Need at least two numerals to '
                'express numbers, numerals given: %r') % (symbols,))
        indexes = dict((numeral, index)
            for index, numeral in enumerate(numerals))
        if len(indexes) != len(numerals):
            raise ConfigurationError(_('Duplicate symbols found in numerals '
                'definition: %r') % (symbols,))
        object.__setattr__(self, '_symbols', symbols)
        object.__setattr__(self, '_numerals', numerals)
        object.__setattr__(self, '_indexes', indexes)

    @property
    def symbols(self):
        '''Symbols as given, normalized to str, bytes, or tuple.'''
        return self._symbols

    @property
    def numerals(self):
        '''Tuple of the individual symbols.'''
        return self._numerals

    @property
    def base(self):
        return len(self._numerals)

    @property
    def zero(self):
        '''The zero digit.'''
        return self._numerals[0]

    @property
    def indexes(self):
        '''Copy of the symbol to index mapping.'''
        return dict(self._indexes)

    def index(self, symbol):
        '''Get the value of a symbol, raising KeyError if it is unknown.'''
        return self._indexes[symbol]

    def join(self, numerals):
        '''Build a numeral string of this alphabet's type from symbols.'''
        if isinstance(self._symbols, (str, bytes)):
            return self._symbols[:0].join(numerals)
        return tuple(numerals)

    def split(self, string):
        '''Iterate over the individual symbols of a numeral string.'''
        if isinstance(string, (bytes, bytearray)):
            return (string[index:index + 1] for index in range(len(string)))
        return iter(string)

    def __setattr__(self, name, value):
        raise AttributeError(_('Alphabet is read-only'))

    def __reduce__(self):
        return (Alphabet, (self._symbols,))

    def __len__(self):
        return len(self._numerals)

    def __contains__(self, symbol):
        return symbol in self._indexes

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        '''Numerals and symbol type, which decides the numeral string type.'''
        return (type(self._symbols), self._numerals)

    def __repr__(self):
        return 'Alphabet(%r)' % (self._symbols,)


def base(number):
    '''Get the alphabet of the first number symbols of digits, uppercase,
    then lowercase letters.'''
    if isinstance(number, bool) or not isinstance(number, int) or \
            not MIN_BASE <= number <= MAX_BASE:
        raise ConfigurationError(_('Base %r is not valid, base must be at '
            'least %d and at most %d') % (number, MIN_BASE, MAX_BASE))
    return Alphabet(DIGITS_UPPERCASE_LOWERCASE[:number])


class ConfigurationError(ValueError):
    '''Exception raised when an alphabet can not be created.'''

    pass
