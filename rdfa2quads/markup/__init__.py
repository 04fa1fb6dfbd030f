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
Depth-first markup events for RDFa processing.

Documents are parsed with lxml, permissively for ``text/html`` and as
well-formed XML for ``application/xhtml+xml``, and then walked to give an
ordered stream of start tag, text and end tag events. XML namespace
declarations are reported as ``xmlns:prefix`` attributes and attributes in
the XML namespace as ``xml:lang`` and ``xml:base``, so both host languages
present the same attribute names.
"""

#===============================================================================

from collections import namedtuple
from html import escape
from typing import Iterator, Optional, TypeAlias

#===============================================================================

import lxml.etree as etree

#===============================================================================

from ..codec import encode_utf8
from ..utils import MarkupError, XMLNamespace

#===============================================================================

TEXT_HTML = 'text/html'
APPLICATION_XHTML_XML = 'application/xhtml+xml'

CONTENT_TYPES = [TEXT_HTML, APPLICATION_XHTML_XML]

XML_NS = XMLNamespace('http://www.w3.org/XML/1998/namespace')

#===============================================================================

StartTag = namedtuple('StartTag', 'name, attributes, depth')
Text = namedtuple('Text', 'data')
EndTag = namedtuple('EndTag', 'name, depth')

MarkupEvent: TypeAlias = StartTag | Text | EndTag

#===============================================================================

def is_xml_content(content_type: str) -> bool:
    return content_type == APPLICATION_XHTML_XML

def normalise_content_type(content_type: Optional[str]) -> str:
#==============================================================
    """
    Strip any parameters and case-fold. A missing content type is taken as
    ``text/html``.
    """
    if content_type is None or content_type.strip() == '':
        return TEXT_HTML
    media_type = content_type.split(';', 1)[0].strip().lower()
    if media_type not in CONTENT_TYPES:
        raise MarkupError(f'Unsupported content type: {content_type}')
    return media_type

#===============================================================================

def parse_document(markup: str, content_type: str) -> etree.Element:
#===================================================================
    data = encode_utf8(markup)
    if data.strip() == b'':
        raise MarkupError('Document is empty')
    if is_xml_content(content_type):
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
    else:
        parser = etree.HTMLParser(encoding='utf-8', no_network=True)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as error:
        raise MarkupError(f'Cannot parse {content_type} document: {error}')
    if root is None:
        raise MarkupError('Document is empty')
    return root

#===============================================================================

class TreeWalker:
    def __init__(self, root: etree.Element, xml: bool=False):
        self.__root = root
        self.__xml = xml

    def events(self) -> Iterator[MarkupEvent]:
    #=========================================
        root = self.__root
        yield self.__start_tag(root, 0)
        if root.text:
            yield Text(root.text)
        elements = [root]
        children = [iter(root)]
        while children:
            child = next(children[-1], None)
            if child is None:
                children.pop()
                element = elements.pop()
                yield EndTag(self.__tag_name(element), len(elements))
                if elements and element.tail:
                    yield Text(element.tail)
            elif not isinstance(child.tag, str):
                # Comments, processing instructions and entities
                if child.tail:
                    yield Text(child.tail)
            else:
                yield self.__start_tag(child, len(elements))
                if child.text:
                    yield Text(child.text)
                elements.append(child)
                children.append(iter(child))

    def __start_tag(self, element: etree.Element, depth: int) -> StartTag:
    #=====================================================================
        attributes: dict[str, str] = {}
        if self.__xml:
            parent = element.getparent()
            parent_nsmap = parent.nsmap if parent is not None else {}
            for prefix, ns_uri in element.nsmap.items():
                if prefix is not None and parent_nsmap.get(prefix) != ns_uri:
                    attributes[f'xmlns:{prefix}'] = ns_uri
        for name, value in element.attrib.items():
            attributes[self.__attribute_name(element, name)] = value
        return StartTag(self.__tag_name(element), attributes, depth)

    def __attribute_name(self, element: etree.Element, name: str) -> str:
    #====================================================================
        if not name.startswith('{'):
            return name if self.__xml else name.lower()
        ns_uri, local_name = name[1:].split('}', 1)
        if ns_uri == str(XML_NS):
            return f'xml:{local_name}'
        for prefix, uri in element.nsmap.items():
            if uri == ns_uri and prefix is not None:
                return f'{prefix}:{local_name}'
        return local_name

    def __tag_name(self, element: etree.Element) -> str:
    #===================================================
        if self.__xml:
            return etree.QName(element).localname
        return element.tag.lower()

def html_base(root: etree.Element) -> Optional[str]:
#===================================================
    for element in root.iter('base'):
        if (href := element.get('href')) is not None:
            return href
    return None

#===============================================================================

def tokenise(markup: str, content_type: str) -> Iterator[MarkupEvent]:
#=====================================================================
    """
    Parse ``markup`` and return an iterator over its events.

    The document is parsed before the iterator is returned, so a
    :class:`MarkupError` is raised here rather than part way through
    iteration.
    """
    root = parse_document(markup, content_type)
    return TreeWalker(root, is_xml_content(content_type)).events()

#===============================================================================

def serialise_event(event: MarkupEvent) -> str:
#==============================================
    if isinstance(event, StartTag):
        attributes = ''.join(f' {name}="{escape(value, quote=True)}"'
                                for name, value in event.attributes.items())
        return f'<{event.name}{attributes}>'
    elif isinstance(event, EndTag):
        return f'</{event.name}>'
    return escape(event.data, quote=False)

#===============================================================================
#===============================================================================
