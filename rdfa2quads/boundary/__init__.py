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
Delivery of extracted quads to a consumer on the far side of a runtime
boundary, such as JavaScript when running under Pyodide.

Terms cross the boundary as plain records, never as live objects, and each
quad is delivered before the next markup event is processed. A host without
real timers or threads gets a scheduler whose deferred tasks run at once, in
the order they were scheduled, and a cancellation signal that is checked
between markup events.
"""

#===============================================================================

from collections import deque, namedtuple
import sys
from typing import Any, Callable, Optional, TypeAlias

#===============================================================================

from ..markup import normalise_content_type
from ..rdf import Quad, Term, TermKind, isLiteral, term_kind
from ..rdfa import RdfaOptions, extract
from ..utils import AdvisoryIssue, Issue, ParseCancelled, log, make_issue

#===============================================================================

TermRecord = namedtuple('TermRecord', 'kind, value, language, datatype')

QuadConsumer: TypeAlias = Callable[[Any, Any, Any, Any], None]

#===============================================================================

def term_record(term: Term) -> TermRecord:
#=========================================
    kind = term_kind(term)
    if kind == TermKind.DEFAULT_GRAPH:
        return TermRecord(kind.value, '', None, None)
    elif isLiteral(term):
        return TermRecord(kind.value, term.value, term.language or None, term.datatype.value)    # pyright: ignore[reportAttributeAccessIssue]
    return TermRecord(kind.value, term.value, None, None)   # pyright: ignore[reportAttributeAccessIssue]

def term_to_record(term: Term) -> Any:
#=====================================
    """
    A term as a record with ``kind``, ``value``, ``language`` and ``datatype``
    fields: a ``dict``, or a JavaScript object when running under Pyodide.
    """
    record = term_record(term)._asdict()
    if 'pyodide' in sys.modules:
        import js                               # pyright: ignore[reportMissingImports]
        from pyodide.ffi import to_js           # pyright: ignore[reportMissingImports]
        return to_js(record, dict_converter=js.Object.fromEntries)
    return record

#===============================================================================

class DeferredScheduler:
    """
    Tasks are run as soon as they are scheduled, unless a task is already
    running, when they are queued and run after it in scheduling order.
    """
    def __init__(self):
        self.__tasks: deque[tuple[Callable, tuple]] = deque()
        self.__draining = False

    @property
    def pending(self) -> int:
        return len(self.__tasks)

    def call_soon(self, callback: Callable, *args):
    #==============================================
        self.__tasks.append((callback, args))
        self.drain()

    def call_later(self, delay: float, callback: Callable, *args):
    #=============================================================
        # There are no timers so the delay is ignored
        self.call_soon(callback, *args)

    def drain(self):
    #===============
        if self.__draining:
            return
        self.__draining = True
        try:
            while len(self.__tasks):
                callback, args = self.__tasks.popleft()
                callback(*args)
        finally:
            self.__draining = False

#===============================================================================

class CancellationSignal:
    def __init__(self):
        self.__aborted = False
        self.__reason: Optional[str] = None

    @property
    def aborted(self) -> bool:
        return self.__aborted

    @property
    def reason(self) -> Optional[str]:
        return self.__reason

    def abort(self, reason: Optional[str]=None):
    #===========================================
        if not self.__aborted:
            self.__aborted = True
            self.__reason = reason

    def throw_if_aborted(self):
    #==========================
        if self.__aborted:
            raise ParseCancelled(self.__reason or 'Parse cancelled')

#===============================================================================

def is_advisory(error: Exception) -> bool:
#=========================================
    return isinstance(error, AdvisoryIssue)

#===============================================================================

def parse(markup: str, base_iri: str, content_type: Optional[str], on_quad: QuadConsumer,
          signal: Optional[CancellationSignal]=None, options: Optional[RdfaOptions]=None) -> dict[str, Any]:
#===============================================================================
    """
    Extract the RDFa of ``markup``, calling ``on_quad(subject, predicate, object, graph)``
    with the term records of each quad.

    Never raises. The result is ``{'success': True}``, or ``{'success': False,
    'error': message}`` when parsing failed. A failing consumer is logged and
    parsing continues; quads delivered before a failure remain delivered.
    """
    scheduler = DeferredScheduler()
    signal = signal or CancellationSignal()
    delivered = 0

    def deliver(statement: Quad):
        nonlocal delivered
        records = [term_to_record(term) for term in (statement.subject, statement.predicate,
                                                     statement.object, statement.graph_name)]
        delivered += 1
        try:
            on_quad(*records)
        except Exception as e:
            log.warning(f'Quad consumer failed: {make_issue(e).reason}')

    try:
        if not isinstance(markup, str):
            raise Issue(f'Markup must be text, not {type(markup).__name__}')
        if not isinstance(base_iri, str):
            raise Issue(f'Base IRI must be text, not {type(base_iri).__name__}')
        extract(markup, base_iri, normalise_content_type(content_type),
                lambda statement: scheduler.call_soon(deliver, statement),
                options=options, before_event=signal.throw_if_aborted)
    except Exception as e:
        if is_advisory(e):
            log.debug(f'Ignored: {make_issue(e).reason}')
            return {'success': True}
        issue = make_issue(e)
        log.error(f'RDFa parse failed after {delivered} quads: {issue.reason}')
        return {'success': False, 'error': issue.reason}
    log.debug(f'Delivered {delivered} quads')
    return {'success': True}

#===============================================================================
#===============================================================================
