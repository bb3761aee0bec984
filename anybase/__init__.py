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

'''anybase package.

This package converts numbers to and from numeral strings written with any
alphabet of two or more symbols, and encodes binary strings with those
alphabets without losing leading zero bytes. See the documentation for each
module for specifics on how it should be used:

- anybase.alphabet: validated alphabets of numeral symbols.
- anybase.numeral: integer <-> numeral string conversion.
- anybase.binary: byte string <-> numeral string encoding.
- anybase.codec: a codec object bound to one alphabet.
- anybase.bases: the built-in named alphabets.'''

# Install the _(...) function as a built-in so all other modules don't need to.
import gettext
gettext.install('anybase')

__version__ = '1.0'
