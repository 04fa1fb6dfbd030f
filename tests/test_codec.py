#===============================================================================
#
#  RDFa to quads extraction
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import pytest

#===============================================================================

from rdfa2quads.codec import REPLACEMENT_CHARACTER, combine_surrogates, decode_utf8, encode_utf8

#===============================================================================

def test_encoding_lengths():
    assert encode_utf8('A') == b'A'
    assert encode_utf8('é') == b'\xc3\xa9'
    assert encode_utf8('€') == b'\xe2\x82\xac'
    assert encode_utf8('\U0001F600') == b'\xf0\x9f\x98\x80'

def test_encoding_boundaries():
    assert encode_utf8('\u007f') == b'\x7f'
    assert encode_utf8('\u0080') == b'\xc2\x80'
    assert encode_utf8('\u07ff') == b'\xdf\xbf'
    assert encode_utf8('\u0800') == b'\xe0\xa0\x80'
    assert encode_utf8('\uffff') == b'\xef\xbf\xbf'
    assert encode_utf8('\U00010000') == b'\xf0\x90\x80\x80'
    assert encode_utf8('\U0010FFFF') == b'\xf4\x8f\xbf\xbf'

def test_surrogate_pairs():
    assert combine_surrogates(0xD83D, 0xDE00) == 0x1F600
    # A pair as handed over by a UTF-16 runtime
    assert encode_utf8('\ud83d\ude00') == b'\xf0\x9f\x98\x80'
    assert encode_utf8('\ud83d') == b'\xef\xbf\xbd'
    assert encode_utf8('a\ude00b') == b'a\xef\xbf\xbdb'
    assert encode_utf8('\ude00\ud83d') == b'\xef\xbf\xbd\xef\xbf\xbd'

def test_matches_builtin_codec():
    text = 'RDFa à la carte: 日本語 \U0001F600 \U0001D11E'
    assert encode_utf8(text) == text.encode('utf-8')
    assert decode_utf8(text.encode('utf-8')) == text

@pytest.mark.parametrize('text', ['', 'plain', 'été', '€100', 'smile \U0001F600!'])
def test_round_trip(text):
    assert decode_utf8(encode_utf8(text)) == text
    data = text.encode('utf-8')
    assert encode_utf8(decode_utf8(data)) == data

def test_malformed_input():
    replacement = chr(REPLACEMENT_CHARACTER)
    assert decode_utf8(b'a\x80b') == f'a{replacement}b'
    assert decode_utf8(b'a\xe2\x82') == f'a{replacement}'
    assert decode_utf8(b'\xe2\x82a') == f'{replacement}a'
    assert decode_utf8(b'\xff') == replacement
    assert decode_utf8(b'\xf7\xbf\xbf\xbf') == replacement

def test_decodes_sequences_of_ints():
    assert decode_utf8([0x48, 0xC3, 0xA9]) == 'Hé'

#===============================================================================
#===============================================================================
