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
CURIE and IRI resolution, with the RDFa 1.1 initial context.

Attribute values are resolved in one of three ways:

* ``about`` and ``resource`` take a safe CURIE, a CURIE or an IRI;
* ``href`` and ``src`` take an IRI;
* ``typeof``, ``property``, ``rel``, ``rev`` and ``datatype`` take a term,
  a CURIE or an absolute IRI.

A value that looks like a CURIE but whose prefix is not in scope is dropped
rather than being read as an IRI with an unknown scheme.
"""

#===============================================================================

import re
from typing import Optional, TYPE_CHECKING
from urllib.parse import urldefrag, urljoin

#===============================================================================

from ..rdf import BlankNode, NamedNode, namedNode
from ..rdf.namespace import XHV
from ..utils import AdvisoryIssue, log

if TYPE_CHECKING:
    from .context import EvaluationContext

#===============================================================================

INITIAL_PREFIXES = {
    'as': 'https://www.w3.org/ns/activitystreams#',
    'cc': 'http://creativecommons.org/ns#',
    'csvw': 'http://www.w3.org/ns/csvw#',
    'ctag': 'http://commontag.org/ns#',
    'dc': 'http://purl.org/dc/terms/',
    'dc11': 'http://purl.org/dc/elements/1.1/',
    'dcat': 'http://www.w3.org/ns/dcat#',
    'dcterms': 'http://purl.org/dc/terms/',
    'dqv': 'http://www.w3.org/ns/dqv#',
    'duv': 'https://www.w3.org/ns/duv#',
    'earl': 'http://www.w3.org/ns/earl#',
    'foaf': 'http://xmlns.com/foaf/0.1/',
    'gr': 'http://purl.org/goodrelations/v1#',
    'grddl': 'http://www.w3.org/2003/g/data-view#',
    'ical': 'http://www.w3.org/2002/12/cal/icaltzd#',
    'jsonld': 'http://www.w3.org/ns/json-ld#',
    'ldp': 'http://www.w3.org/ns/ldp#',
    'ma': 'http://www.w3.org/ns/ma-ont#',
    'oa': 'http://www.w3.org/ns/oa#',
    'odrl': 'http://www.w3.org/ns/odrl/2/',
    'og': 'http://ogp.me/ns#',
    'org': 'http://www.w3.org/ns/org#',
    'owl': 'http://www.w3.org/2002/07/owl#',
    'prov': 'http://www.w3.org/ns/prov#',
    'qb': 'http://purl.org/linked-data/cube#',
    'rdf': 'http://www.w3.org/1999/02/22-rdf-syntax-ns#',
    'rdfa': 'http://www.w3.org/ns/rdfa#',
    'rdfs': 'http://www.w3.org/2000/01/rdf-schema#',
    'rev': 'http://purl.org/stuff/rev#',
    'rif': 'http://www.w3.org/2007/rif#',
    'rr': 'http://www.w3.org/ns/r2rml#',
    'schema': 'http://schema.org/',
    'sd': 'http://www.w3.org/ns/sparql-service-description#',
    'sioc': 'http://rdfs.org/sioc/ns#',
    'skos': 'http://www.w3.org/2004/02/skos/core#',
    'skosxl': 'http://www.w3.org/2008/05/skos-xl#',
    'sosa': 'http://www.w3.org/ns/sosa/',
    'ssn': 'http://www.w3.org/ns/ssn/',
    'time': 'http://www.w3.org/2006/time#',
    'v': 'http://rdf.data-vocabulary.org/#',
    'vcard': 'http://www.w3.org/2006/vcard/ns#',
    'void': 'http://rdfs.org/ns/void#',
    'wdr': 'http://www.w3.org/2007/05/powder#',
    'wdrs': 'http://www.w3.org/2007/05/powder-s#',
    'xhv': 'http://www.w3.org/1999/xhtml/vocab#',
    'xml': 'http://www.w3.org/XML/1998/namespace',
    'xsd': 'http://www.w3.org/2001/XMLSchema#',
}

INITIAL_TERMS = {
    'describedby': 'http://www.w3.org/2007/05/powder-s#describedby',
    'license': 'http://www.w3.org/1999/xhtml/vocab#license',
    'role': 'http://www.w3.org/1999/xhtml/vocab#role',
}

#===============================================================================

NCNAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')
SCHEME = re.compile(r'^([A-Za-z][A-Za-z0-9+.\-]*):')
PREFIX_DECLARATION = re.compile(r'(\S+?):\s+(\S+)')

# Schemes whose IRIs have no authority component
OPAQUE_SCHEMES = {
    'data', 'did', 'doi', 'geo', 'info', 'isbn', 'mailto', 'news',
    'sms', 'tag', 'tel', 'urn', 'uuid',
}

#===============================================================================

def is_absolute_iri(value: str) -> bool:
#=======================================
    if (match := SCHEME.match(value)) is None:
        return False
    return (value[match.end():].startswith('//')
         or match.group(1).lower() in OPAQUE_SCHEMES)

def resolve_iri(base: str, reference: str) -> str:
#=================================================
    reference = reference.strip()
    if reference == '':
        return urldefrag(base).url
    elif SCHEME.match(reference) is not None:
        return reference
    return urljoin(base, reference)

#===============================================================================

def prefix_declarations(attributes: dict[str, str]) -> dict[str, str]:
#=====================================================================
    """
    Prefix mappings declared by ``xmlns:*`` attributes and by ``@prefix``,
    the latter taking precedence. Prefixes are case-insensitive and ``_``
    can never be mapped.
    """
    declarations: dict[str, str] = {}
    for name, value in attributes.items():
        if name.startswith('xmlns:'):
            prefix = name[6:].lower()
            if prefix != '_' and NCNAME.match(prefix) and value.strip():
                declarations[prefix] = value.strip()
    if (value := attributes.get('prefix')) is not None:
        for prefix, ns_uri in PREFIX_DECLARATION.findall(value):
            prefix = prefix.lower()
            if prefix != '_' and NCNAME.match(prefix):
                declarations[prefix] = ns_uri
    return declarations

#===============================================================================

class BlankNodes:
    """Blank nodes, labelled uniquely within a single parse."""
    def __init__(self):
        self.__count = 0
        self.__labelled: dict[str, BlankNode] = {}

    def fresh(self) -> BlankNode:
    #============================
        node = BlankNode(f'b{self.__count}')
        self.__count += 1
        return node

    def labelled(self, label: str) -> BlankNode:
    #===========================================
        if (node := self.__labelled.get(label)) is None:
            node = self.fresh()
            self.__labelled[label] = node
        return node

#===============================================================================

def iri_node(iri: str) -> Optional[NamedNode]:
#=============================================
    try:
        return namedNode(iri)
    except AdvisoryIssue as issue:
        log.debug(f'Dropped: {issue.reason}')
        return None

#===============================================================================

class CurieResolver:
    def __init__(self, blank_nodes: BlankNodes):
        self.__blank_nodes = blank_nodes

    def expand_curie(self, curie: str, context: 'EvaluationContext') -> Optional[NamedNode|BlankNode]:
    #=================================================================================================
        if ':' not in curie:
            return None
        prefix, reference = curie.split(':', 1)
        if prefix == '_':
            return self.__blank_nodes.labelled(reference)
        elif prefix == '':
            return iri_node(XHV.iri(reference))
        elif (ns_uri := context.prefixes.get(prefix.lower())) is not None:
            return iri_node(f'{ns_uri}{reference}')
        return None

    def resource(self, value: str, context: 'EvaluationContext') -> Optional[NamedNode|BlankNode]:
    #=============================================================================================
        """Resolve a SafeCURIEorCURIEorIRI (``@about`` and ``@resource``)."""
        value = value.strip()
        if value.startswith('[') and value.endswith(']'):
            return self.expand_curie(value[1:-1], context)
        if (node := self.expand_curie(value, context)) is not None:
            return node
        if is_absolute_iri(value):
            return iri_node(value)
        prefix = value.split(':', 1)[0]
        if ':' in value and NCNAME.match(prefix):
            log.debug(f'Dropped CURIE with undeclared prefix: {value}')
            return None
        return iri_node(resolve_iri(context.base, value))

    def iri(self, value: str, context: 'EvaluationContext') -> Optional[NamedNode]:
    #==============================================================================
        """Resolve an IRI (``@href`` and ``@src``)."""
        return iri_node(resolve_iri(context.base, value))

    def term(self, value: str, context: 'EvaluationContext') -> Optional[NamedNode]:
    #===============================================================================
        """Resolve a TERMorCURIEorAbsIRI to an IRI."""
        if ':' not in value:
            if context.vocab is not None:
                return iri_node(f'{context.vocab}{value}')
            if (iri := context.terms.get(value)) is not None:
                return iri_node(iri)
            for term, iri in context.terms.items():
                if term.lower() == value.lower():
                    return iri_node(iri)
            return None
        node = self.expand_curie(value, context)
        if node is None:
            return iri_node(value) if is_absolute_iri(value) else None
        elif isinstance(node, BlankNode):
            return None
        return node

    def terms(self, value: str, context: 'EvaluationContext') -> list[NamedNode]:
    #============================================================================
        nodes = []
        for token in value.split():
            if (node := self.term(token, context)) is not None:
                nodes.append(node)
        return nodes

#===============================================================================
#===============================================================================
