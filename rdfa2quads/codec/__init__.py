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

"""
UTF-8 encoding and decoding over Unicode scalar values.

Strings handed over by a foreign runtime may still carry UTF-16 surrogate
pairs; these are combined into a single scalar before encoding. Decoding is
best-effort: a truncated or invalid sequence becomes U+FFFD and decoding
carries on with the next byte.
"""

#===============================================================================

from typing import Sequence

#===============================================================================

REPLACEMENT_CHARACTER = 0xFFFD

#===============================================================================

def is_high_surrogate(c: int) -> bool:
    return 0xD800 <= c <= 0xDBFF

def is_low_surrogate(c: int) -> bool:
    return 0xDC00 <= c <= 0xDFFF

def combine_surrogates(high: int, low: int) -> int:
#==================================================
    return 0x10000 + (((high & 0x3FF) << 10) | (low & 0x3FF))

#===============================================================================

def encode_utf8(text: str) -> bytes:
#===================================
    buffer = bytearray()
    length = len(text)
    i = 0
    while i < length:
        c = ord(text[i])
        i += 1
        if c < 0x80:
            buffer.append(c)
        elif c < 0x800:
            buffer.append(0xC0 | (c >> 6))
            buffer.append(0x80 | (c & 0x3F))
        else:
            if is_high_surrogate(c) and i < length and is_low_surrogate(ord(text[i])):
                c = combine_surrogates(c, ord(text[i]))
                i += 1
            elif is_high_surrogate(c) or is_low_surrogate(c):
                # Lone surrogates are not valid UTF-8
                c = REPLACEMENT_CHARACTER
            if c < 0x10000:
                buffer.append(0xE0 | (c >> 12))
                buffer.append(0x80 | ((c >> 6) & 0x3F))
                buffer.append(0x80 | (c & 0x3F))
            else:
                buffer.append(0xF0 | (c >> 18))
                buffer.append(0x80 | ((c >> 12) & 0x3F))
                buffer.append(0x80 | ((c >> 6) & 0x3F))
                buffer.append(0x80 | (c & 0x3F))
    return bytes(buffer)

def decode_utf8(data: bytes|bytearray|Sequence[int]) -> str:
#===========================================================
    chars: list[str] = []
    length = len(data)
    i = 0
    while i < length:
        c = data[i]
        i += 1
        if c < 0x80:
            chars.append(chr(c))
            continue
        elif c < 0xC0:
            # Stray continuation byte
            chars.append(chr(REPLACEMENT_CHARACTER))
            continue
        elif c < 0xE0:
            continuations, code_point = 1, c & 0x1F
        elif c < 0xF0:
            continuations, code_point = 2, c & 0x0F
        elif c < 0xF8:
            continuations, code_point = 3, c & 0x07
        else:
            chars.append(chr(REPLACEMENT_CHARACTER))
            continue
        truncated = False
        for _ in range(continuations):
            if i < length and (data[i] & 0xC0) == 0x80:
                code_point = (code_point << 6) | (data[i] & 0x3F)
                i += 1
            else:
                truncated = True
                break
        if truncated or code_point > 0x10FFFF:
            code_point = REPLACEMENT_CHARACTER
        chars.append(chr(code_point))
    return ''.join(chars)

#===============================================================================
#===============================================================================
