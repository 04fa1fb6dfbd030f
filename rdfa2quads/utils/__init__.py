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

import logging
from typing import Any

#===============================================================================

import structlog
from structlog.dev import BRIGHT, GREEN, RESET_ALL

#===============================================================================

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=True)
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO)
)

log = structlog.get_logger()

#===============================================================================

def set_debug(debug: bool=True):
#===============================
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))

def pretty_log(s: Any) -> str:
#=============================
    return f'{RESET_ALL}{GREEN}{str(s)}{RESET_ALL}{BRIGHT}'

#===============================================================================
#===============================================================================

class Issue(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.__reason = reason

    @property
    def reason(self):
        return self.__reason

def make_issue(e: Exception) -> Issue:
#=====================================
    if isinstance(e, Issue):
        return e
    issue = Issue(str(e) or e.__class__.__name__)
    issue.__traceback__ = e.__traceback__
    return issue

#===============================================================================

class AdvisoryIssue(Issue):
    """
    A conformance nitpick that never reaches the caller, e.g. a term the
    RDF model rejects. The statement concerned is dropped.
    """
    pass

class MarkupError(Issue):
    """Markup that cannot be tokenised at all."""
    pass

class InvariantViolation(Issue):
    pass

class ParseCancelled(Issue):
    pass

#===============================================================================

"""
Generate names for lxml.etree.
"""
class XMLNamespace:
    def __init__(self, ns: str):
        self.__ns = ns

    def __str__(self):
        return self.__ns

    def __call__(self, attr: str='') -> str:
        return f'{{{self.__ns}}}{attr}'

    def __getattr__(self, attr: str) -> str:
        return f'{{{self.__ns}}}{attr}'

#===============================================================================
#===============================================================================
