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

from . import NamedNode

#===============================================================================

class Namespace:
    def __init__(self, iri: str):
        self.__iri = iri

    def __str__(self):
        return self.__iri

    def __getattr__(self, name: str) -> NamedNode:
        if name.startswith('__'):
            raise AttributeError(name)
        return NamedNode(f'{self.__iri}{name}')

    def __getitem__(self, name: str) -> NamedNode:
        return NamedNode(f'{self.__iri}{name}')

    def iri(self, name: str='') -> str:
        return f'{self.__iri}{name}'

#===============================================================================

RDF = Namespace('http://www.w3.org/1999/02/22-rdf-syntax-ns#')
RDFA = Namespace('http://www.w3.org/ns/rdfa#')
XHV = Namespace('http://www.w3.org/1999/xhtml/vocab#')
XSD = Namespace('http://www.w3.org/2001/XMLSchema#')

#===============================================================================

NAMESPACES = {
    'rdf': str(RDF),
    'rdfa': str(RDFA),
    'rdfs': 'http://www.w3.org/2000/01/rdf-schema#',
    'xhv': str(XHV),
    'xsd': str(XSD),
}

def get_curie(uri: str|NamedNode) -> str:
#========================================
    full_uri = uri if isinstance(uri, str) else uri.value
    for prefix, ns_uri in NAMESPACES.items():
        if full_uri.startswith(ns_uri):
            return f'{prefix}:{full_uri[len(ns_uri):]}'
    return full_uri

#===============================================================================
#===============================================================================
