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

'''anybase bases module.

This module holds the built-in named alphabets. Use get() to look one up
by name, or print_bases() to see all of them with an example encoding::

    >>> anybase.numeral.encode(123456789, anybase.bases.get('Base58'))
    'BukQL'

Some names are aliases for the same alphabet (Base16, Hex and Hexadecimal
are all Base16L), and Base256 is the byte identity alphabet used by the
binary module.'''

import anybase.alphabet
import anybase.binary

from anybase.alphabet import Alphabet, DIGITS, LOWERCASE, UPPERCASE

# Random 64-bit token.
EXAMPLE_TOKEN = b'\xfc\x8e\x3c\x91\x7d\x58\x36\x8b'
EXAMPLE_WIDTH = 22


def _numerals(*parts, exclude=''):
    '''Join symbol groups, dropping any symbols in the exclude string.'''
    return ''.join(char for char in ''.join(parts) if char not in exclude)


BINARY = Alphabet('01')

BASE16L = Alphabet(DIGITS + 'abcdef')
BASE16U = Alphabet(DIGITS + 'ABCDEF')

# Case insensitive, no 'u' to avoid accidental obscenity.
BASE30L = Alphabet(_numerals(DIGITS, LOWERCASE, exclude='01ilou'))
BASE30U = Alphabet(_numerals(DIGITS, UPPERCASE, exclude='01ILOU'))

BASE31L = Alphabet(_numerals(DIGITS, LOWERCASE, exclude='01ilo'))
BASE31U = Alphabet(_numerals(DIGITS, UPPERCASE, exclude='01ILO'))

RFC4648_BASE32 = Alphabet(_numerals(UPPERCASE, DIGITS, exclude='0189'))
CROCKFORD_BASE32 = Alphabet(_numerals(DIGITS, UPPERCASE, exclude='ILOU'))

BITCOIN_BASE58 = Alphabet(_numerals(DIGITS, UPPERCASE, LOWERCASE,
    exclude='0OIl'))
FLICKR_BASE58 = Alphabet(_numerals(DIGITS, LOWERCASE, UPPERCASE,
    exclude='0OIl'))
GMP_BASE58 = Alphabet(_numerals(DIGITS, UPPERCASE, LOWERCASE, exclude='wxyz'))

# See http://tantek.pbworks.com/w/page/19402946/NewBase60
NEW_BASE60 = Alphabet(_numerals(DIGITS, UPPERCASE, '_', LOWERCASE,
    exclude='OIl'))

BASE62_DUL = Alphabet(DIGITS + UPPERCASE + LOWERCASE)
BASE62_DLU = Alphabet(DIGITS + LOWERCASE + UPPERCASE)
BASE62_LDU = Alphabet(LOWERCASE + DIGITS + UPPERCASE)
BASE62_LUD = Alphabet(LOWERCASE + UPPERCASE + DIGITS)
BASE62_UDL = Alphabet(UPPERCASE + DIGITS + LOWERCASE)
BASE62_ULD = Alphabet(UPPERCASE + LOWERCASE + DIGITS)

URL_BASE64 = Alphabet(UPPERCASE + LOWERCASE + DIGITS + '-_')

# ZeroMQ symbols, compatible with Z85 when data is processed in 4-byte chunks.
Z85 = Alphabet(DIGITS + LOWERCASE + UPPERCASE + '.-:+=^!/*?&<>()[]{}@%$#')

BASES = {
    'Binary': BINARY,
    'Base16': BASE16L,
    'Base16L': BASE16L,
    'Base16U': BASE16U,
    'Hex': BASE16L,
    'Hexadecimal': BASE16L,
    'Base30L': BASE30L,
    'Base30U': BASE30U,
    'Base31L': BASE31L,
    'Base31U': BASE31U,
    'RFC4648Base32': RFC4648_BASE32,
    'CrockfordBase32': CROCKFORD_BASE32,
    'Base58': BITCOIN_BASE58,
    'BitcoinBase58': BITCOIN_BASE58,
    'FlickrBase58': FLICKR_BASE58,
    'GMPBase58': GMP_BASE58,
    'NewBase60': NEW_BASE60,
    'Base62': BASE62_DUL,
    'Base62DUL': BASE62_DUL,
    'Base62DLU': BASE62_DLU,
    'Base62LDU': BASE62_LDU,
    'Base62LUD': BASE62_LUD,
    'Base62UDL': BASE62_UDL,
    'Base62ULD': BASE62_ULD,
    'URLBase64': URL_BASE64,
    'Z85': Z85,
    'Base256': anybase.binary.IDENTITY}


def get(name):
    '''Get a built-in alphabet by name.'''
    try:
        return BASES[name]
    except KeyError:
        raise anybase.alphabet.ConfigurationError(
            _('Unknown base name: %s') % name)


def bases():
    '''Get a list of [name, base, example, numerals] for all built-in
    alphabets, sorted by base and then name.'''
    names = sorted(BASES, key=lambda name: (BASES[name].base, name))
    return [[name, BASES[name].base,
            anybase.binary.encode(EXAMPLE_TOKEN, BASES[name]),
            BASES[name].symbols]
        for name in names]


def _printable(value):
    '''Get a display string, using repr for anything but printable text.'''
    if isinstance(value, str) and value.isprintable():
        return value
    return repr(value)


def bases_table():
    '''Format the list of built-in alphabets as a text table.'''
    lines = []
    for name, base, example, numerals in bases():
        example = _printable(example)
        if len(example) > EXAMPLE_WIDTH:
            example = example[:EXAMPLE_WIDTH - 1] + '…'
        lines.append('%-15s %-3s %-22s %s' %
            (name, base, example, _printable(numerals)))
    return '\n'.join(lines)


def print_bases():
    '''Print the table of built-in alphabets.'''
    print(bases_table())
