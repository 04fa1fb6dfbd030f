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

from collections import namedtuple
from enum import StrEnum
from typing import Any, Optional, TypeAlias

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import AdvisoryIssue, InvariantViolation

#===============================================================================

BlankNode = oxigraph.BlankNode
DefaultGraph = oxigraph.DefaultGraph
Literal = oxigraph.Literal
NamedNode = oxigraph.NamedNode
Quad = oxigraph.Quad

Subject: TypeAlias = BlankNode | NamedNode
Object: TypeAlias = BlankNode | Literal | NamedNode
GraphName: TypeAlias = DefaultGraph | NamedNode
Term: TypeAlias = BlankNode | DefaultGraph | Literal | NamedNode

Triple = namedtuple('Triple', 'subject, predicate, object')

#===============================================================================

class TermKind(StrEnum):
    NAMED_NODE = 'NamedNode'
    BLANK_NODE = 'BlankNode'
    LITERAL = 'Literal'
    DEFAULT_GRAPH = 'DefaultGraph'

#===============================================================================

def literal(value: str, datatype: Optional[NamedNode]=None, language: Optional[str]=None) -> Literal:
#====================================================================================================
    if language and datatype is not None:
        raise InvariantViolation(f'Literal "{value}" cannot have both a language and a datatype')
    try:
        if language:
            return Literal(value, language=language)
        return Literal(value, datatype=datatype)
    except ValueError as e:
        raise AdvisoryIssue(f'Invalid literal "{value}": {e}')

def namedNode(uri: str) -> NamedNode:
#====================================
    try:
        return NamedNode(uri)
    except ValueError as e:
        raise AdvisoryIssue(f'Invalid IRI <{uri}>: {e}')

#===============================================================================

def isBlankNode(node: Any) -> bool:
    return isinstance(node, BlankNode)

def isDefaultGraph(node: Any) -> bool:
    return isinstance(node, DefaultGraph)

def isLiteral(node: Any) -> bool:
    return isinstance(node, Literal)

def isNamedNode(node: Any) -> bool:
    return isinstance(node, NamedNode)

def term_kind(term: Term) -> TermKind:
#=====================================
    if isNamedNode(term):
        return TermKind.NAMED_NODE
    elif isBlankNode(term):
        return TermKind.BLANK_NODE
    elif isLiteral(term):
        return TermKind.LITERAL
    elif isDefaultGraph(term):
        return TermKind.DEFAULT_GRAPH
    raise InvariantViolation(f'Not an RDF term: {term!r}')

#===============================================================================

def quad(subject: Subject, predicate: NamedNode, object: Object, graph: Optional[GraphName]=None) -> Quad:
#=========================================================================================================
    if not (isNamedNode(subject) or isBlankNode(subject)):
        raise InvariantViolation(f'Subject must be an IRI or blank node, not {subject!r}')
    if not isNamedNode(predicate):
        raise InvariantViolation(f'Predicate must be an IRI, not {predicate!r}')
    if not (isNamedNode(object) or isBlankNode(object) or isLiteral(object)):
        raise InvariantViolation(f'Object must be an IRI, blank node or literal, not {object!r}')
    if graph is None:
        graph = DefaultGraph()
    elif not (isNamedNode(graph) or isDefaultGraph(graph)):
        raise InvariantViolation(f'Graph must be an IRI or the default graph, not {graph!r}')
    return Quad(subject, predicate, object, graph)

def nquads_line(statement: Quad) -> str:
#=======================================
    terms = [str(statement.subject), str(statement.predicate), str(statement.object)]
    if isNamedNode(statement.graph_name):
        terms.append(str(statement.graph_name))
    return f'{" ".join(terms)} .'

def ntriples_line(statement: Quad|Triple) -> str:
#================================================
    return f'{statement.subject} {statement.predicate} {statement.object} .'

#===============================================================================
#===============================================================================
