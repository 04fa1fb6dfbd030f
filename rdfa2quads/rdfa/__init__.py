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

from typing import Callable, Optional

#===============================================================================

from ..markup import TreeWalker, html_base, is_xml_content, parse_document
from ..rdf import Quad
from ..utils import log

from .curie import resolve_iri
from .processor import LIST_STYLES, RdfaOptions, RdfaProcessor

#===============================================================================

def extract(markup: str, base_iri: str, content_type: str, emit: Callable[[Quad], None],
            options: Optional[RdfaOptions]=None, before_event: Optional[Callable[[], None]]=None):
#=================================================================================================
    """
    Extract the RDFa statements of a document, calling ``emit`` with each
    quad as soon as it is known.

    ``before_event`` is called before each markup event is processed and
    may raise to stop extraction.
    """
    root = parse_document(markup, content_type)
    xml = is_xml_content(content_type)
    if not xml and (href := html_base(root)) is not None:
        base_iri = resolve_iri(base_iri, href)
        log.debug(f'Document base set to {base_iri}')
    processor = RdfaProcessor(base_iri, content_type, emit, options)
    for event in TreeWalker(root, xml).events():
        if before_event is not None:
            before_event()
        processor.process(event)
    processor.finish()

#===============================================================================

__all__ = [
    'LIST_STYLES',
    'RdfaOptions',
    'RdfaProcessor',
    'extract',
]

#===============================================================================
#===============================================================================
