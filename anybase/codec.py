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

'''anybase codec module.

The Codec class binds one alphabet to the numeral and binary conversion
functions so applications can create it once from config and pass it
around::

    >>> codec = anybase.codec.Codec('012')
    >>> codec.integer_to_string(48)
    '1210'
    >>> codec.decode(codec.encode(b'stuff'))
    b'stuff'
'''

import anybase.alphabet
import anybase.binary
import anybase.numeral


class Codec(object):
    '''Numeral and binary codec for a single alphabet. Codecs have no state
    other than the alphabet and can be shared freely.'''

    def __init__(self, alphabet):
        if not isinstance(alphabet, anybase.alphabet.Alphabet):
            alphabet = anybase.alphabet.Alphabet(alphabet)
        self._alphabet = alphabet

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def base(self):
        return self._alphabet.base

    @property
    def numerals(self):
        return self._alphabet.symbols

    def integer_to_string(self, number):
        '''Convert a non-negative integer to a numeral string.'''
        return anybase.numeral.encode(number, self._alphabet)

    def string_to_integer(self, string):
        '''Convert a numeral string to an integer.'''
        return anybase.numeral.decode(string, self._alphabet)

    def encode(self, data):
        '''Encode a byte string.'''
        return anybase.binary.encode(data, self._alphabet)

    def decode(self, string):
        '''Decode a numeral string into the original byte string.'''
        return anybase.binary.decode(string, self._alphabet)

    def __repr__(self):
        return 'Codec(%r)' % (self._alphabet.symbols,)
