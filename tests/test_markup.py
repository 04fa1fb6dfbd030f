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

from rdfa2quads.markup import APPLICATION_XHTML_XML, TEXT_HTML
from rdfa2quads.markup import EndTag, StartTag, Text
from rdfa2quads.markup import html_base, normalise_content_type, parse_document, serialise_event, tokenise
from rdfa2quads.utils import MarkupError

#===============================================================================

def events(markup: str, content_type: str=TEXT_HTML) -> list:
#============================================================
    return list(tokenise(markup, content_type))

def start_tags(markup: str, content_type: str=TEXT_HTML) -> list[StartTag]:
#==========================================================================
    return [event for event in events(markup, content_type) if isinstance(event, StartTag)]

#===============================================================================

def test_html_events():
    assert events('<p>Hi <b>there</b></p>') == [
        StartTag('html', {}, 0),
        StartTag('body', {}, 1),
        StartTag('p', {}, 2),
        Text('Hi '),
        StartTag('b', {}, 3),
        Text('there'),
        EndTag('b', 3),
        EndTag('p', 2),
        EndTag('body', 1),
        EndTag('html', 0),
    ]

def test_html_names_are_lowercase():
    tags = start_tags('<DIV ABOUT="#x" Property="dc:title">T</DIV>')
    assert tags[-1] == StartTag('div', {'about': '#x', 'property': 'dc:title'}, 2)

def test_html_recovery():
    result = events('<div><span>unclosed</div><p>after')
    starts = [event.name for event in result if isinstance(event, StartTag)]
    ends = [event.name for event in result if isinstance(event, EndTag)]
    assert sorted(starts) == sorted(ends)
    assert 'p' in starts
    assert Text('after') in result

def test_comments_are_skipped():
    result = events('<p>a<!-- note -->b</p>')
    assert [event for event in result if isinstance(event, Text)] == [Text('a'), Text('b')]

def test_non_ascii_text():
    result = events('<p>日本語 \U0001F600</p>')
    assert Text('日本語 \U0001F600') in result

def test_xhtml_namespaces():
    markup = ('<html xmlns="http://www.w3.org/1999/xhtml" xmlns:ex="http://ex.org/" xml:lang="en">'
              '<body xml:base="http://other.example/"><p>x</p></body></html>')
    tags = start_tags(markup, APPLICATION_XHTML_XML)
    assert tags[0] == StartTag('html', {'xmlns:ex': 'http://ex.org/', 'xml:lang': 'en'}, 0)
    assert tags[1] == StartTag('body', {'xml:base': 'http://other.example/'}, 1)
    assert tags[2] == StartTag('p', {}, 2)

def test_xhtml_must_be_well_formed():
    with pytest.raises(MarkupError):
        events('<html><body></html>', APPLICATION_XHTML_XML)

@pytest.mark.parametrize('markup', ['', '   \n  '])
def test_empty_documents(markup):
    with pytest.raises(MarkupError):
        tokenise(markup, TEXT_HTML)

def test_html_base():
    root = parse_document('<html><head><base href="http://other.example/doc"></head><body></body></html>', TEXT_HTML)
    assert html_base(root) == 'http://other.example/doc'
    assert html_base(parse_document('<p>no base</p>', TEXT_HTML)) is None

def test_serialise_event():
    assert serialise_event(StartTag('b', {'title': 'say "hi"'}, 0)) == '<b title="say &quot;hi&quot;">'
    assert serialise_event(EndTag('b', 0)) == '</b>'
    assert serialise_event(Text('a < b & c')) == 'a &lt; b &amp; c'

def test_content_types():
    assert normalise_content_type(None) == TEXT_HTML
    assert normalise_content_type('') == TEXT_HTML
    assert normalise_content_type('text/html; charset=UTF-8') == TEXT_HTML
    assert normalise_content_type('Application/XHTML+XML') == APPLICATION_XHTML_XML
    with pytest.raises(MarkupError):
        normalise_content_type('application/json')

#===============================================================================
#===============================================================================
