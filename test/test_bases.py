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

'''Tests for anybase bases module.'''

import contextlib
import io
import unittest

import anybase.alphabet
import anybase.bases
import anybase.binary
import anybase.numeral

EXPECTED_ORDER = [
    'Binary',
    'Base16',
    'Base16L',
    'Base16U',
    'Hex',
    'Hexadecimal',
    'Base30L',
    'Base30U',
    'Base31L',
    'Base31U',
    'CrockfordBase32',
    'RFC4648Base32',
    'Base58',
    'BitcoinBase58',
    'FlickrBase58',
    'GMPBase58',
    'NewBase60',
    'Base62',
    'Base62DLU',
    'Base62DUL',
    'Base62LDU',
    'Base62LUD',
    'Base62UDL',
    'Base62ULD',
    'URLBase64',
    'Z85',
    'Base256']

# Name, 123456789, 987654321.
VECTORS = [
    ('Binary', '111010110111100110100010101',
        '111010110111100110100010110001'),
    ('Base16L', '75bcd15', '3ade68b1'),
    ('Base16U', '75BCD15', '3ADE68B1'),
    ('Base30L', '74eg8b', '3cnbspq'),
    ('Base30U', '74EG8B', '3CNBSPQ'),
    ('Base31L', '6bq524', '35hft2u'),
    ('Base31U', '6BQ524', '35HFT2U'),
    ('RFC4648Base32', 'DVXTIV', '5N42FR'),
    ('CrockfordBase32', '3NQK8N', 'XDWT5H'),
    ('BitcoinBase58', 'BukQL', '2WGzDn'),
    ('FlickrBase58', 'bUKpk', '2vgZdM'),
    ('GMPBase58', 'AqhNJ', '1TFvCj'),
    ('NewBase60', '9XZZ9', '1GCURM'),
    ('Base62DUL', '8M0kX', '14q60P'),
    ('Base62DLU', '8m0Kx', '14Q60p'),
    ('Base62LDU', 'iwaK7', 'beQgaz'),
    ('Base62LUD', 'iwaUH', 'be0gaz'),
    ('Base62UDL', 'IWAk7', 'BEqGAZ'),
    ('Base62ULD', 'IWAuh', 'BE0GAZ'),
    ('URLBase64', 'HW80V', '63mix'),
    ('Z85', '2v2B/', 'i]jLP'),
    ('Base256', b'\x07\x5b\xcd\x15', b'\x3a\xde\x68\xb1')]


class TestBases(unittest.TestCase):

    def test_sizes(self):
        for name, alphabet in anybase.bases.BASES.items():
            self.assertTrue(isinstance(alphabet, anybase.alphabet.Alphabet))
            if name.startswith('Base'):
                self.assertEqual(int(name[4:7].rstrip('DLU')), alphabet.base,
                    name)
        self.assertEqual(85, anybase.bases.Z85.base)
        self.assertEqual(32, anybase.bases.RFC4648_BASE32.base)
        self.assertEqual(32, anybase.bases.CROCKFORD_BASE32.base)
        self.assertEqual(58, anybase.bases.GMP_BASE58.base)
        self.assertEqual(60, anybase.bases.NEW_BASE60.base)
        self.assertEqual(64, anybase.bases.URL_BASE64.base)

    def test_aliases(self):
        self.assertTrue(anybase.bases.get('Hex') is anybase.bases.BASE16L)
        self.assertTrue(anybase.bases.get('Base58') is
            anybase.bases.BITCOIN_BASE58)
        self.assertTrue(anybase.bases.get('Base62') is anybase.bases.BASE62_DUL)
        self.assertTrue(anybase.bases.get('Base256') is
            anybase.binary.IDENTITY)

    def test_get(self):
        self.assertEqual('01', anybase.bases.get('Binary').symbols)
        self.assertRaises(anybase.alphabet.ConfigurationError,
            anybase.bases.get, 'Base99')

    def test_vectors(self):
        for name, first, second in VECTORS:
            alphabet = anybase.bases.get(name)
            self.assertEqual(first, anybase.numeral.encode(123456789, alphabet),
                name)
            self.assertEqual(second,
                anybase.numeral.encode(987654321, alphabet), name)
            self.assertEqual(987654321, anybase.numeral.decode(second,
                alphabet), name)

    def test_round_trip(self):
        data = b'\x00\x00' + anybase.bases.EXAMPLE_TOKEN
        for alphabet in anybase.bases.BASES.values():
            encoded = anybase.binary.encode(data, alphabet)
            self.assertEqual(data, anybase.binary.decode(encoded, alphabet))

    def test_bases(self):
        bases = anybase.bases.bases()
        self.assertEqual(['Binary', 2,
            '1111110010001110001111001001000101111101010110000011011010001011',
            '01'], bases[0])
        self.assertEqual(EXPECTED_ORDER, [base[0] for base in bases])
        self.assertEqual(['Base256', 256, anybase.bases.EXAMPLE_TOKEN,
            bytes(bytearray(range(256)))], bases[-1])

    def test_bases_table(self):
        table = anybase.bases.bases_table()
        lines = table.split('\n')
        self.assertEqual(len(EXPECTED_ORDER), len(lines))
        self.assertTrue(lines[0].startswith('Binary          2   '))
        self.assertTrue(lines[0].endswith(' 01'))
        self.assertTrue('…' in lines[0])
        self.assertTrue(lines[-1].startswith('Base256         256 b'))

    def test_print_bases(self):
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            anybase.bases.print_bases()
        self.assertEqual(anybase.bases.bases_table() + '\n', output.getvalue())
