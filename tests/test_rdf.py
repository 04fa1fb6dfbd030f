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

from rdfa2quads.rdf import BlankNode, DefaultGraph, Literal, NamedNode, Quad, TermKind, Triple
from rdfa2quads.rdf import literal, namedNode, nquads_line, ntriples_line, quad, term_kind
from rdfa2quads.rdf.namespace import RDF, XSD, get_curie
from rdfa2quads.rdf.store import RdfGraph
from rdfa2quads.utils import AdvisoryIssue, InvariantViolation

#===============================================================================

ALICE = NamedNode('http://ex/#alice')
NAME = NamedNode('http://xmlns.com/foaf/0.1/name')
PERSON = NamedNode('http://xmlns.com/foaf/0.1/Person')

#===============================================================================

def test_literals():
    assert literal('Alice') == Literal('Alice', datatype=XSD.string)
    assert literal('Alice', language='en').language == 'en'
    assert literal('42', datatype=XSD.integer).datatype == XSD.integer

def test_literal_with_language_and_datatype():
    with pytest.raises(InvariantViolation):
        literal('42', datatype=XSD.integer, language='en')

def test_invalid_terms_are_advisory():
    with pytest.raises(AdvisoryIssue):
        literal('Alice', language='not a tag!')
    with pytest.raises(AdvisoryIssue):
        namedNode('not an iri')

def test_quad_positions():
    statement = quad(ALICE, NAME, literal('Alice'))
    assert statement.graph_name == DefaultGraph()
    with pytest.raises(InvariantViolation):
        quad(literal('Alice'), NAME, ALICE)                 # type: ignore
    with pytest.raises(InvariantViolation):
        quad(ALICE, BlankNode('b0'), ALICE)                 # type: ignore
    with pytest.raises(InvariantViolation):
        quad(ALICE, NAME, ALICE, BlankNode('g'))            # type: ignore

def test_term_kinds():
    assert term_kind(ALICE) == TermKind.NAMED_NODE
    assert term_kind(BlankNode('b0')) == TermKind.BLANK_NODE
    assert term_kind(literal('x')) == TermKind.LITERAL
    assert term_kind(DefaultGraph()) == TermKind.DEFAULT_GRAPH
    assert TermKind.NAMED_NODE == 'NamedNode'

def test_lines():
    statement = quad(ALICE, NAME, literal('Alice', language='en'))
    assert ntriples_line(statement) == '<http://ex/#alice> <http://xmlns.com/foaf/0.1/name> "Alice"@en .'
    assert nquads_line(statement) == ntriples_line(statement)
    named = Quad(ALICE, NAME, ALICE, NamedNode('http://ex/g'))
    assert nquads_line(named).endswith(' <http://ex/g> .')

def test_namespaces():
    assert RDF.type == NamedNode('http://www.w3.org/1999/02/22-rdf-syntax-ns#type')
    assert RDF['nil'] == RDF.nil
    assert get_curie(XSD.integer) == 'xsd:integer'
    assert get_curie('http://ex/#alice') == 'http://ex/#alice'

#===============================================================================

def test_graph():
    graph = RdfGraph()
    assert graph.is_empty()
    graph.add(Triple(ALICE, RDF.type, PERSON))
    graph.add(Triple(ALICE, NAME, literal('Alice')))
    graph.add(Triple(ALICE, NAME, literal('Alice')))
    assert len(graph) == 2
    assert Triple(ALICE, RDF.type, PERSON) in graph
    assert Triple(ALICE, NAME, None) in graph
    assert Triple(PERSON, None, None) not in graph
    assert graph.objects(ALICE, NAME) == [literal('Alice')]

def test_graph_query():
    graph = RdfGraph({'foaf': 'http://xmlns.com/foaf/0.1/'})
    graph.add(Triple(ALICE, NAME, literal('Alice')))
    rows = graph.query('SELECT ?s ?name WHERE { ?s foaf:name ?name }')
    assert rows == [{'s': ALICE, 'name': literal('Alice')}]

def test_graph_serialise():
    graph = RdfGraph()
    graph.add(Triple(ALICE, RDF.type, PERSON))
    turtle = graph.serialise()
    assert 'rdf:type' in turtle or ' a ' in turtle
    assert '<http://ex/#alice>' in turtle

#===============================================================================
#===============================================================================
