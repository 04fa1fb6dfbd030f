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

from typing import Iterator, Optional, Self, Sequence, TypeAlias

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..codec import decode_utf8
from ..utils import Issue

from . import BlankNode, DefaultGraph, Literal, NamedNode, Quad, Triple
from .namespace import NAMESPACES

#===============================================================================

ResultType: TypeAlias = BlankNode | Literal | NamedNode | None
ResultRow: TypeAlias = dict[str, ResultType]

#===============================================================================

class RdfGraph:
    def __init__(self, namespaces: Optional[dict[str, str]]=None):
        self.__graph = oxigraph.Store()
        self.__namespaces = dict(NAMESPACES) if namespaces is None else namespaces
        self.__sparql_prefixes = '\n'.join([
            f'PREFIX {prefix}: <{ns_uri}>' for prefix, ns_uri in self.__namespaces.items()
        ])

    def __contains__(self, triple: Triple) -> bool:
    #==============================================
        try:
            self.__graph.quads_for_pattern(triple.subject, triple.predicate, triple.object).__next__()
            return True
        except StopIteration:
            return False

    def __len__(self) -> int:
    #========================
        return len(self.__graph)

    def add(self, triple: Triple) -> Self:
    #=====================================
        self.__graph.add(Quad(triple.subject, triple.predicate, triple.object, DefaultGraph()))
        return self

    def is_empty(self) -> bool:
    #==========================
        return len(self.__graph) == 0

    def statements(self) -> Iterator[Quad]:
    #======================================
        return self.__graph.quads_for_pattern(None, None, None)

    def objects(self, subject: Optional[BlankNode|NamedNode]=None,
                      predicate: Optional[NamedNode]=None) -> list[BlankNode|Literal|NamedNode]:
    #=============================================================
        return [stmt.object for stmt in self.__graph.quads_for_pattern(subject, predicate, None)]

    def query(self, query: str) -> Sequence[ResultRow]:
    #==================================================
        query = f'{self.__sparql_prefixes}\n{query}'
        try:
            rows = self.__graph.query(query)
            keys = [var.value for var in rows.variables]    # pyright: ignore[reportAttributeAccessIssue]
            return [ { k: row[k] for k in keys } for row in rows ]  # pyright: ignore[reportGeneralTypeIssues]
        except Exception as e:
            raise Issue(f'{e}: {query}')

    def serialise(self, format: oxigraph.RdfFormat=oxigraph.RdfFormat.TURTLE) -> str:
    #================================================================================
        data = self.__graph.dump(format=format, from_graph=DefaultGraph(),
                                 prefixes=self.__namespaces)
        return decode_utf8(data)    # pyright: ignore[reportArgumentType]

#===============================================================================
#===============================================================================
