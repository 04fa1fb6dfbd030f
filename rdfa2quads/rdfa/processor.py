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
RDFa 1.1 Core processing over a stream of markup events.

Each start tag is evaluated against its parent's :class:`EvaluationContext`
and the statements that can be made then are emitted immediately; literal
values taken from an element's content, and any lists the element owns,
are emitted when it closes.
"""

#===============================================================================

from dataclasses import dataclass, field
import re
from typing import Callable, Mapping, Optional
from urllib.parse import urldefrag

#===============================================================================

from ..markup import EndTag, MarkupEvent, StartTag, Text, is_xml_content, serialise_event
from ..rdf import Literal, NamedNode, Object, Quad, Subject, literal, quad
from ..rdf.namespace import RDF, RDFA, XSD, get_curie
from ..utils import AdvisoryIssue, Issue, InvariantViolation, log

from .context import Direction, EvaluationContext, IncompleteTriple
from .curie import BlankNodes, CurieResolver, INITIAL_PREFIXES, INITIAL_TERMS, iri_node
from .curie import prefix_declarations, resolve_iri
from .lists import ListMapping

#===============================================================================

LIST_STYLES = ['members', 'collection']

@dataclass(frozen=True)
class RdfaOptions:
    list_style: str = 'members'
    vocabulary_usage_triples: bool = True
    initial_prefixes: Mapping[str, str] = field(default_factory=lambda: INITIAL_PREFIXES)
    initial_terms: Mapping[str, str] = field(default_factory=lambda: INITIAL_TERMS)

    def __post_init__(self):
        if self.list_style not in LIST_STYLES:
            raise Issue(f'Unknown list style: {self.list_style}')

#===============================================================================

XML_LITERAL_DATATYPES = [RDF.XMLLiteral, RDF.HTML]

DATETIME_DATATYPES = [
    (re.compile(r'^-?P(?=.)(\d+Y)?(\d+M)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$'), XSD.duration),
    (re.compile(r'^-?\d{4,}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?$'), XSD.dateTime),
    (re.compile(r'^-?\d{4,}-\d{2}-\d{2}(Z|[+-]\d{2}:?\d{2})?$'), XSD.date),
    (re.compile(r'^\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?$'), XSD.time),
    (re.compile(r'^-?\d{4,}-\d{2}$'), XSD.gYearMonth),
    (re.compile(r'^-?\d{4,}$'), XSD.gYear),
]

def datetime_datatype(value: str) -> Optional[NamedNode]:
#========================================================
    for pattern, datatype in DATETIME_DATATYPES:
        if pattern.match(value.strip()):
            return datatype
    return None

#===============================================================================

@dataclass
class PendingLiteral:
    subject: Subject
    predicates: list[NamedNode]
    list_mapping: ListMapping
    in_list: bool
    datatype: Optional[NamedNode] = None
    language: Optional[str] = None
    xml_literal: bool = False
    infer_datetime: bool = False
    parts: list[str] = field(default_factory=list)

@dataclass
class ElementFrame:
    name: str
    context: EvaluationContext
    subject: Optional[Subject]
    list_mapping: ListMapping
    pending: Optional[PendingLiteral] = None

#===============================================================================

def first_of(*nodes: Optional[Subject]) -> Optional[Subject]:
    for node in nodes:
        if node is not None:
            return node
    return None

#===============================================================================

class RdfaProcessor:
    def __init__(self, base_iri: str, content_type: str, emit: Callable[[Quad], None],
                 options: Optional[RdfaOptions]=None):
        self.__options = options or RdfaOptions()
        self.__html = not is_xml_content(content_type)
        self.__emit_quad = emit
        self.__blank_nodes = BlankNodes()
        self.__resolver = CurieResolver(self.__blank_nodes)
        document_base = urldefrag(base_iri).url
        try:
            base_node = NamedNode(document_base)
        except ValueError as e:
            raise Issue(f'Invalid base IRI <{base_iri}>: {e}')
        blank_node = self.__blank_nodes.fresh if self.__options.list_style == 'collection' else None
        self.__initial_context = EvaluationContext.initial(document_base, base_node,
                                                           self.__options.initial_prefixes,
                                                           self.__options.initial_terms,
                                                           ListMapping(None, blank_node))
        self.__stack: list[ElementFrame] = []
        self.__capturing: list[ElementFrame] = []

    def process(self, event: MarkupEvent):
    #=====================================
        if isinstance(event, StartTag):
            self.__start_element(event)
        elif isinstance(event, Text):
            self.__text(event.data)
        elif isinstance(event, EndTag):
            self.__end_element(event)
        else:
            raise InvariantViolation(f'Unexpected markup event: {event!r}')

    def finish(self):
    #================
        if len(self.__stack):
            raise InvariantViolation(f'Document ended with {len(self.__stack)} open elements')

    def __emit(self, subject: Subject, predicate: NamedNode, object: Object):
    #========================================================================
        self.__emit_quad(quad(subject, predicate, object))

    def __plain_literal(self, value: str, language: Optional[str]) -> Literal:
    #=========================================================================
        try:
            return literal(value, language=language)
        except AdvisoryIssue as issue:
            log.debug(f'Language dropped: {issue.reason}')
            return literal(value)

    def __typed_literal(self, value: str, datatype: NamedNode, language: Optional[str]) -> Literal:
    #==============================================================================================
        try:
            return literal(value, datatype=datatype)
        except AdvisoryIssue as issue:
            log.debug(f'Datatype {get_curie(datatype)} dropped: {issue.reason}')
            return self.__plain_literal(value, language)

    def __start_element(self, event: StartTag):
    #==========================================
        for frame in self.__capturing:
            if frame.pending.xml_literal:       # pyright: ignore[reportOptionalMemberAccess]
                frame.pending.parts.append(serialise_event(event))  # pyright: ignore[reportOptionalMemberAccess]

        attributes: dict[str, str] = event.attributes
        is_root = len(self.__stack) == 0
        parent = self.__stack[-1].context if not is_root else self.__initial_context

        base = parent.base
        if not self.__html and 'xml:base' in attributes:
            base = resolve_iri(base, attributes['xml:base'])

        vocab = parent.vocab
        if 'vocab' in attributes:
            if (value := attributes['vocab'].strip()):
                vocab = resolve_iri(base, value)
                if self.__options.vocabulary_usage_triples:
                    base_node = iri_node(urldefrag(base).url)
                    vocab_node = iri_node(vocab)
                    if base_node is not None and vocab_node is not None:
                        self.__emit(base_node, RDFA.usesVocabulary, vocab_node)
            else:
                vocab = None

        language = parent.language
        for name in ['xml:lang', 'lang']:
            if name in attributes:
                language = attributes[name].strip() or None
                break

        local = parent.derive(base=base, vocab=vocab, language=language,
                              prefixes=parent.with_prefixes(prefix_declarations(attributes)))

        has_rel = 'rel' in attributes
        has_rev = 'rev' in attributes
        has_property = 'property' in attributes
        has_typeof = 'typeof' in attributes
        content = attributes.get('content')
        from_datetime = False
        if content is None and self.__html and 'datetime' in attributes:
            content = attributes['datetime']
            from_datetime = True
        has_content = content is not None
        has_datatype = 'datatype' in attributes

        rel_value = attributes.get('rel', '')
        rev_value = attributes.get('rev', '')
        if self.__html and has_property:
            # Only CURIEs and IRIs count in `@rel` and `@rev` alongside `@property`
            rel_value = ' '.join(token for token in rel_value.split() if ':' in token)
            rev_value = ' '.join(token for token in rev_value.split() if ':' in token)
            has_rel = has_rel and rel_value != ''
            has_rev = has_rev and rev_value != ''
        rel = self.__resolver.terms(rel_value, local) if has_rel else []
        rev = self.__resolver.terms(rev_value, local) if has_rev else []

        about = self.__resource(attributes, 'about', local)
        if about is None and is_root:
            about = self.__resolver.resource('', local)
        elif (about is None and self.__html and has_typeof
          and event.name in ['head', 'body']):
            about = parent.parent_object
        resource = self.__resource(attributes, 'resource', local)
        href = self.__iri(attributes, 'href', local)
        src = self.__iri(attributes, 'src', local)

        skip = False
        new_subject: Optional[Subject] = None
        current_object: Optional[Subject] = None
        typed_resource: Optional[Subject] = None

        if not has_rel and not has_rev:
            if has_property and not has_content and not has_datatype:
                new_subject = first_of(about, parent.parent_object)
                if has_typeof:
                    if about is not None:
                        typed_resource = about
                    else:
                        typed_resource = first_of(resource, href, src)
                        if typed_resource is None:
                            typed_resource = self.__blank_nodes.fresh()
                    current_object = typed_resource
            else:
                new_subject = first_of(about, resource, href, src)
                if new_subject is None:
                    if has_typeof:
                        new_subject = self.__blank_nodes.fresh()
                    elif parent.parent_object is not None:
                        new_subject = parent.parent_object
                        skip = not has_property
                if has_typeof:
                    typed_resource = new_subject
        else:
            new_subject = about
            if has_typeof:
                typed_resource = new_subject
            if new_subject is None:
                new_subject = parent.parent_object
            current_object = first_of(resource, href, src)
            if current_object is None and has_typeof and about is None:
                current_object = self.__blank_nodes.fresh()
            if has_typeof and about is None:
                typed_resource = current_object

        if typed_resource is not None:
            for type_iri in self.__resolver.terms(attributes['typeof'], local):
                self.__emit(typed_resource, RDF.type, type_iri)

        if new_subject is not None and new_subject != parent.parent_object:
            list_mapping = ListMapping(None, parent.list_mapping.blank_node)
        else:
            list_mapping = parent.list_mapping.child()

        in_list = 'inlist' in attributes
        incomplete_triples: list[IncompleteTriple] = []
        if current_object is not None:
            for predicate in rel:
                if in_list:
                    list_mapping.append(predicate, current_object)
                else:
                    self.__emit(new_subject, predicate, current_object)     # pyright: ignore[reportArgumentType]
            for predicate in rev:
                self.__emit(current_object, predicate, new_subject)         # pyright: ignore[reportArgumentType]
        elif len(rel) or len(rev):
            for predicate in rel:
                if in_list:
                    list_mapping.ensure(predicate)
                    incomplete_triples.append(IncompleteTriple(predicate, Direction.NONE, list_mapping))
                else:
                    incomplete_triples.append(IncompleteTriple(predicate, Direction.FORWARD))
            for predicate in rev:
                incomplete_triples.append(IncompleteTriple(predicate, Direction.REVERSE))
            current_object = self.__blank_nodes.fresh()

        pending = None
        if has_property and new_subject is not None:
            predicates = self.__resolver.terms(attributes['property'], local)
            if len(predicates):
                pending = self.__property_value(event.name, attributes, local, new_subject,
                                                predicates, list_mapping, in_list,
                                                content, from_datetime, has_rel or has_rev,
                                                resource, href, src, typed_resource, about)

        if not skip and new_subject is not None:
            for incomplete in parent.incomplete_triples:
                if incomplete.direction == Direction.NONE:
                    incomplete.list_mapping.append(incomplete.predicate, new_subject)   # pyright: ignore[reportOptionalMemberAccess]
                elif incomplete.direction == Direction.FORWARD:
                    self.__emit(parent.parent_subject, incomplete.predicate, new_subject)  # pyright: ignore[reportArgumentType]
                else:
                    self.__emit(new_subject, incomplete.predicate, parent.parent_subject)  # pyright: ignore[reportArgumentType]

        if skip:
            context = local
        else:
            context = local.derive(
                parent_subject=first_of(new_subject, parent.parent_subject),
                parent_object=first_of(current_object, new_subject, parent.parent_subject),
                list_mapping=list_mapping,
                incomplete_triples=tuple(incomplete_triples))

        frame = ElementFrame(event.name, context, new_subject, list_mapping, pending)
        self.__stack.append(frame)
        if pending is not None:
            self.__capturing.append(frame)

    def __property_value(self, name: str, attributes: dict[str, str], context: EvaluationContext,
                         subject: Subject, predicates: list[NamedNode], list_mapping: ListMapping,
                         in_list: bool, content: Optional[str], from_datetime: bool, has_relation: bool,
                         resource: Optional[Subject], href: Optional[Subject], src: Optional[Subject],
                         typed_resource: Optional[Subject], about: Optional[Subject]) -> Optional[PendingLiteral]:
    #===========================================================================
        """
        Work out the property value of an element. A value available now
        is emitted and ``None`` returned; otherwise the returned pending
        literal is completed from the element's content when it closes.

        A typed literal has no language, even when one is in scope.
        """
        datatype_value = attributes.get('datatype')
        datatype = None
        if datatype_value is not None and datatype_value.strip():
            datatype = self.__resolver.term(datatype_value.strip(), context)
        pending = PendingLiteral(subject, predicates, list_mapping, in_list, language=context.language)
        value: Optional[Object] = None

        if datatype is not None and datatype not in XML_LITERAL_DATATYPES:
            if content is None:
                pending.datatype = datatype
                return pending
            value = self.__typed_literal(content, datatype, context.language)
        elif datatype_value is not None and datatype_value.strip() == '':
            if content is None:
                return pending
            value = self.__plain_literal(content, context.language)
        elif datatype is not None:
            pending.datatype = datatype
            pending.xml_literal = True
            return pending
        elif content is not None:
            if from_datetime and (inferred := datetime_datatype(content)) is not None:
                value = self.__typed_literal(content, inferred, context.language)
            else:
                value = self.__plain_literal(content, context.language)
        elif not has_relation and (node := first_of(resource, href, src)) is not None:
            value = node
        elif 'typeof' in attributes and about is None and typed_resource is not None:
            value = typed_resource
        else:
            pending.infer_datetime = self.__html and name == 'time'
            return pending

        for predicate in predicates:
            if in_list:
                list_mapping.append(predicate, value)
            else:
                self.__emit(subject, predicate, value)
        return None

    def __complete_literal(self, pending: PendingLiteral):
    #=====================================================
        text = ''.join(pending.parts)
        if pending.datatype is not None:
            value = self.__typed_literal(text, pending.datatype, pending.language)
        elif pending.infer_datetime and (inferred := datetime_datatype(text)) is not None:
            value = self.__typed_literal(text, inferred, pending.language)
        else:
            value = self.__plain_literal(text, pending.language)
        for predicate in pending.predicates:
            if pending.in_list:
                pending.list_mapping.append(predicate, value)
            else:
                self.__emit(pending.subject, predicate, value)

    def __text(self, data: str):
    #===========================
        for frame in self.__capturing:
            pending: PendingLiteral = frame.pending      # pyright: ignore[reportAssignmentType]
            pending.parts.append(serialise_event(Text(data)) if pending.xml_literal else data)

    def __end_element(self, event: EndTag):
    #======================================
        if len(self.__stack) == 0:
            raise InvariantViolation(f'Unexpected end of element: {event.name}')
        frame = self.__stack.pop()
        if frame.name != event.name:
            raise InvariantViolation(f'Element {frame.name} closed by {event.name}')
        if frame.pending is not None:
            self.__capturing.remove(frame)
            self.__complete_literal(frame.pending)
        for capturing in self.__capturing:
            if capturing.pending.xml_literal:       # pyright: ignore[reportOptionalMemberAccess]
                capturing.pending.parts.append(serialise_event(event))  # pyright: ignore[reportOptionalMemberAccess]
        for statement in frame.list_mapping.flush_all(frame.subject):
            self.__emit_quad(statement)

    def __iri(self, attributes: dict[str, str], name: str, context: EvaluationContext) -> Optional[NamedNode]:
    #=========================================================================================================
        if (value := attributes.get(name)) is None:
            return None
        return self.__resolver.iri(value, context)

    def __resource(self, attributes: dict[str, str], name: str, context: EvaluationContext) -> Optional[Subject]:
    #============================================================================================================
        if (value := attributes.get(name)) is None:
            return None
        return self.__resolver.resource(value, context)

#===============================================================================
#===============================================================================
