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

from rdfa2quads.version import __version__

#===============================================================================

from rdfa2quads.boundary import CancellationSignal, parse
from rdfa2quads.parser import RdfaParseException, RdfaParser, get_version, rdfa_to_triple_array
from rdfa2quads.rdfa import RdfaOptions

#===============================================================================

__all__ = [
    '__version__',
    'CancellationSignal',
    'RdfaOptions',
    'RdfaParseException',
    'RdfaParser',
    'get_version',
    'parse',
    'rdfa_to_triple_array',
]

#===============================================================================
#===============================================================================
