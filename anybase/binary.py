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

'''anybase binary module.

This module encodes byte strings as numeral strings of any alphabet and
back again. The bytes are read as one big-endian base 256 number which is
then written with the alphabet. For example::

    >>> hex = anybase.alphabet.Alphabet('0123456789abcdef')
    >>> anybase.binary.encode(b'\\x00\\x01', hex)
    '0001'
    >>> anybase.binary.decode('0001', hex)
    b'\\x00\\x01'

Leading zero bytes do not change the number, so the encoder pads the output
with zero digits until it has room for any byte string of the input length,
and the decoder puts back the zero bytes that padding stands for. This keeps
the exact length and value of every byte string through a round trip for
alphabets of up to 256 symbols. With more symbols, two byte lengths can
share one encoded length and leading zero bytes may be lost.'''

import anybase.alphabet
import anybase.numeral

BYTE_BASE = 256
IDENTITY = anybase.alphabet.Alphabet(bytes(bytearray(range(BYTE_BASE))))


def encode(data, alphabet=None):
    '''Encode a byte string using the given alphabet.'''
    alphabet = alphabet or anybase.numeral.DEFAULT_ALPHABET
    if len(data) == 0:
        return alphabet.join([])
    number = int.from_bytes(bytes(data), 'big')
    encoded = anybase.numeral.encode(number, alphabet)
    data_space = BYTE_BASE ** len(data)
    encoded_space = alphabet.base ** len(encoded)
    padding = 0
    while encoded_space < data_space:
        padding += 1
        encoded_space *= alphabet.base
    return alphabet.join([alphabet.zero] * padding) + encoded


def decode(string, alphabet=None):
    '''Decode a numeral string made by encode() back into a byte string.'''
    alphabet = alphabet or anybase.numeral.DEFAULT_ALPHABET
    if len(string) == 0:
        return b''
    number = anybase.numeral.decode(string, alphabet)
    decoded = anybase.numeral.encode(number, IDENTITY)
    decoded_space = BYTE_BASE ** len(decoded)
    encoded_space = alphabet.base ** len(string)

    # encoded_space // base < decoded_space <= encoded_space
    padding = 0
    while decoded_space <= encoded_space // alphabet.base:
        padding += 1
        decoded_space *= BYTE_BASE
    return b'\x00' * padding + decoded
