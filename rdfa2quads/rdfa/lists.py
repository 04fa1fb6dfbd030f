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

from ..rdf import BlankNode, NamedNode, Object, Quad, Subject, quad
from ..rdf.namespace import RDF
from ..utils import InvariantViolation

#===============================================================================

class ListMapping:
    """
    The list mapping of an element's evaluation context.

    Mappings chain to the enclosing mappings that share the same subject.
    A new list is always created on the outermost mapping of the chain,
    which owns it and flushes it when its element closes.

    Without a blank node factory, a flushed list gives one statement per
    member, in document order, all sharing subject and predicate. With one,
    the list is written as an RDF collection.
    """
    def __init__(self, parent: Optional['ListMapping']=None,
                       blank_node: Optional[Callable[[], BlankNode]]=None):
        self.__parent = parent
        self.__blank_node = blank_node
        self.__lists: dict[NamedNode, list[Object]] = {}
        self.__flushed = False

    @property
    def blank_node(self) -> Optional[Callable[[], BlankNode]]:
        return self.__blank_node

    @property
    def flushed(self) -> bool:
        return self.__flushed

    def __find(self, predicate: NamedNode) -> Optional[list[Object]]:
    #================================================================
        mapping = self
        while mapping is not None:
            if (members := mapping.__lists.get(predicate)) is not None:
                return members
            mapping = mapping.__parent
        return None

    def __contains__(self, predicate: NamedNode) -> bool:
    #====================================================
        return self.__find(predicate) is not None

    def child(self) -> 'ListMapping':
    #================================
        return ListMapping(self, self.__blank_node)

    def ensure(self, predicate: NamedNode) -> list[Object]:
    #======================================================
        if self.__flushed:
            raise InvariantViolation(f'List for <{predicate.value}> used after it was flushed')
        if (members := self.__find(predicate)) is None:
            owner = self
            while owner.__parent is not None:
                owner = owner.__parent
            members = []
            owner.__lists[predicate] = members
        return members

    def append(self, predicate: NamedNode, value: Object):
    #=====================================================
        self.ensure(predicate).append(value)

    def flush_all(self, subject: Optional[Subject]) -> list[Quad]:
    #=============================================================
        if self.__flushed:
            return []
        self.__flushed = True
        if len(self.__lists) == 0:
            return []
        if subject is None:
            raise InvariantViolation('Lists have no subject to attach to')
        statements = []
        for predicate, members in self.__lists.items():
            if len(members) == 0:
                statements.append(quad(subject, predicate, RDF.nil))
            elif self.__blank_node is None:
                statements.extend(quad(subject, predicate, member) for member in members)
            else:
                statements.extend(self.__collection(subject, predicate, members))
        return statements

    def __collection(self, subject: Subject, predicate: NamedNode, members: list[Object]) -> list[Quad]:
    #===================================================================================================
        nodes = [self.__blank_node() for _ in members]      # pyright: ignore[reportOptionalCall]
        statements = [quad(subject, predicate, nodes[0])]
        for n, member in enumerate(members):
            statements.append(quad(nodes[n], RDF.first, member))
            rest = nodes[n + 1] if n + 1 < len(nodes) else RDF.nil
            statements.append(quad(nodes[n], RDF.rest, rest))
        return statements

#===============================================================================
#===============================================================================
