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
Parse RDFa into an :class:`RdfGraph`, receiving quads through the boundary
the same way a foreign host does.
"""

#===============================================================================

from pathlib import Path
from typing import Any, Mapping, Optional

#===============================================================================

import lxml

#===============================================================================

from .boundary import parse as parse_rdfa
from .markup import APPLICATION_XHTML_XML, TEXT_HTML, normalise_content_type
from .rdf import BlankNode, Literal, NamedNode, Triple, ntriples_line
from .rdf.namespace import RDF
from .rdf.store import RdfGraph
from .rdfa import RdfaOptions
from .utils import Issue, log
from .version import __version__

#===============================================================================

__all__ = [
    'QuadHandler',
    'RdfaParseException',
    'RdfaParser',
    'content_type_for',
    'get_version',
    'normalise_content_type',
    'rdfa_to_triple_array',
]

#===============================================================================

CONTENT_TYPE_SUFFIXES = {
    '.htm': TEXT_HTML,
    '.html': TEXT_HTML,
    '.xhtml': APPLICATION_XHTML_XML,
}

def content_type_for(path: str|Path) -> str:
#===========================================
    return CONTENT_TYPE_SUFFIXES.get(Path(path).suffix.lower(), TEXT_HTML)

def get_version() -> str:
#========================
    return f'rdfa2quads {__version__} (lxml {lxml.__version__})'

#===============================================================================

class RdfaParseException(Issue):
    pass

#===============================================================================

class QuadHandler:
    """
    Adds quads received as term records to a graph. A quad whose terms
    cannot be converted is ignored.
    """
    def __init__(self, graph: RdfGraph):
        self.__graph = graph

    def on_quad(self, subject: Optional[Mapping[str, Any]], predicate: Optional[Mapping[str, Any]],
                      object: Optional[Mapping[str, Any]], graph: Optional[Mapping[str, Any]]=None):
    #===============================================================================================
        try:
            s = self.__resource(subject)
            p = self.__iri(predicate)
            o = self.__value(object)
        except ValueError as e:
            log.debug(f'Ignored quad: {e}')
            return
        if s is not None and p is not None and o is not None:
            self.__graph.add(Triple(s, p, o))

    __call__ = on_quad

    def __resource(self, term: Optional[Mapping[str, Any]]) -> Optional[BlankNode|NamedNode]:
    #========================================================================================
        if term is None:
            return None
        kind = term.get('kind')
        if kind == 'NamedNode':
            return NamedNode(term['value'])
        elif kind == 'BlankNode':
            return BlankNode(term['value'])
        return None

    def __iri(self, term: Optional[Mapping[str, Any]]) -> Optional[NamedNode]:
    #=========================================================================
        if term is None or term.get('kind') != 'NamedNode':
            return None
        return NamedNode(term['value'])

    def __value(self, term: Optional[Mapping[str, Any]]) -> Optional[BlankNode|Literal|NamedNode]:
    #=============================================================================================
        if term is None:
            return None
        if term.get('kind') != 'Literal':
            return self.__resource(term)
        value = term['value']
        language = term.get('language')
        datatype = term.get('datatype')
        if language:
            return Literal(value, language=language)
        elif datatype and datatype != RDF.iri('langString'):
            return Literal(value, datatype=NamedNode(datatype))
        return Literal(value)

#===============================================================================

class RdfaParser:
    def __init__(self, options: Optional[RdfaOptions]=None):
        self.__options = options
        log.debug(f'RDFa parser initialised: {get_version()}')

    def parse(self, content: str, base_uri: str, content_type: Optional[str]=TEXT_HTML) -> RdfGraph:
    #===============================================================================================
        graph = RdfGraph()
        result = parse_rdfa(content, base_uri, content_type, QuadHandler(graph),
                            options=self.__options)
        if not result['success']:
            error = result.get('error') or 'Unknown parse error'
            raise RdfaParseException(f'Failed to parse RDFa: {error}')
        return graph

#===============================================================================

def rdfa_to_triple_array(data: str, base_uri: str, content_type: Optional[str]=TEXT_HTML) -> list[str]:
#======================================================================================================
    """The statements of an RDFa document as N-Triples lines."""
    graph = RdfaParser().parse(data, base_uri, content_type)
    return [ntriples_line(statement) for statement in graph.statements()]

#===============================================================================
#===============================================================================
