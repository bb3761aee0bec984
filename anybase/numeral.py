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

'''anybase numeral module.

This module provides functions to encode and decode numbers using any
alphabet given to it. By default it uses a 62 character set to make
URL-safe encodings. For example::

    >>> anybase.numeral.encode(1234567890)
    '1ly7vk'
    >>> anybase.numeral.decode('1ly7vk')
    1234567890

To use a custom alphabet, pass it as the last argument:

    >>> alphabet = anybase.alphabet.Alphabet('abcdefghij')
    >>> anybase.numeral.encode(1234567890, alphabet)
    'bcdefghija'
    >>> anybase.numeral.decode('bcdefghija', alphabet)
    1234567890

Numbers may be of any size, the most significant symbol comes first.'''

import anybase.alphabet

ENCODING = '0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'
DEFAULT_ALPHABET = anybase.alphabet.Alphabet(ENCODING)


def encode(number, alphabet=None):
    '''Encode a non-negative number using the given alphabet.'''
    alphabet = alphabet or DEFAULT_ALPHABET
    if number < 0:
        raise ValueError(_('Cannot encode negative number: %d') % number)
    if number == 0:
        return alphabet.join([alphabet.zero])
    base = alphabet.base
    numerals = alphabet.numerals
    encoded = []
    while number > 0:
        number, remainder = divmod(number, base)
        encoded.append(numerals[remainder])
    return alphabet.join(reversed(encoded))


def decode(string, alphabet=None):
    '''Decode a numeral string using the given alphabet.'''
    alphabet = alphabet or DEFAULT_ALPHABET
    if len(string) == 0:
        raise EmptyInputError(_('Cannot convert empty string into integer'))
    base = alphabet.base
    number = 0
    for symbol in alphabet.split(string):
        number *= base
        try:
            number += alphabet.index(symbol)
        except KeyError:
            raise InvalidSymbolError(symbol)
    return number


class EmptyInputError(ValueError):
    '''Exception raised when decoding an empty numeral string.'''

    pass


class InvalidSymbolError(ValueError):
    '''Exception raised when a numeral string has a symbol that is not in
    the alphabet. The symbol attribute holds the offending symbol.'''

    def __init__(self, symbol):
        super(InvalidSymbolError, self).__init__(_('Cannot convert to '
            'integer, %r is not in the numerals for this base') % (symbol,))
        self.symbol = symbol
