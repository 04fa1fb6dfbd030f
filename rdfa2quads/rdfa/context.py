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

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Self

#===============================================================================

from ..rdf import NamedNode, Subject
from .lists import ListMapping

#===============================================================================

class Direction(Enum):
    FORWARD = 'forward'
    REVERSE = 'reverse'
    NONE = 'none'

@dataclass(frozen=True)
class IncompleteTriple:
    predicate: NamedNode
    direction: Direction
    list_mapping: Optional[ListMapping] = None

#===============================================================================

@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation state inherited by an element's children.

    A context is never changed once made; children get a new context
    derived from their parent's, sharing any mappings left unchanged.
    """
    base: str
    parent_subject: Optional[Subject]
    parent_object: Optional[Subject]
    prefixes: Mapping[str, str]
    terms: Mapping[str, str]
    vocab: Optional[str]
    language: Optional[str]
    list_mapping: ListMapping
    incomplete_triples: tuple[IncompleteTriple, ...] = ()

    @classmethod
    def initial(cls, base: str, subject: Subject, prefixes: Mapping[str, str],
                terms: Mapping[str, str], list_mapping: ListMapping) -> Self:
    #=========================================================================
        return cls(base=base,
                   parent_subject=subject,
                   parent_object=None,
                   prefixes=MappingProxyType(dict(prefixes)),
                   terms=MappingProxyType(dict(terms)),
                   vocab=None,
                   language=None,
                   list_mapping=list_mapping)

    def derive(self, **changes) -> Self:
    #===================================
        return replace(self, **changes)

    def with_prefixes(self, declarations: dict[str, str]) -> Mapping[str, str]:
    #==========================================================================
        if len(declarations) == 0:
            return self.prefixes
        return MappingProxyType({**self.prefixes, **declarations})

#===============================================================================
#===============================================================================
