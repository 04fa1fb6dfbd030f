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

from pathlib import Path
import sys
from typing import Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from rdfa2quads.version import __version__

from rdfa2quads.markup import CONTENT_TYPES
from rdfa2quads.parser import RdfaParseException, RdfaParser, content_type_for
from rdfa2quads.rdfa import LIST_STYLES, RdfaOptions
from rdfa2quads.utils import log, pretty_log, set_debug

#===============================================================================

OUTPUT_FORMATS = {
    '.nt': oxigraph.RdfFormat.N_TRIPLES,
    '.rdf': oxigraph.RdfFormat.RDF_XML,
    '.ttl': oxigraph.RdfFormat.TURTLE,
}

#===============================================================================

def rdfa2quads(source: Path, base: Optional[str], content_type: Optional[str],
               list_style: str, output: Optional[Path]) -> int:
#=============================================================================
    if not source.exists():
        raise IOError(f'Missing RDFa source file: {source}')
    with open(source, encoding='utf-8') as fp:
        content = fp.read()
    base = base or source.resolve().as_uri()
    content_type = content_type or content_type_for(source)
    graph = RdfaParser(RdfaOptions(list_style=list_style)).parse(content, base, content_type)
    log.info(f'Loaded {len(graph)} statements from {pretty_log(source)}')
    if output is None:
        sys.stdout.write(graph.serialise())
    else:
        format = OUTPUT_FORMATS.get(output.suffix.lower(), oxigraph.RdfFormat.TURTLE)
        with open(output, 'w', encoding='utf-8') as fp:
            fp.write(graph.serialise(format))
        log.info(f'Saved {pretty_log(output)}')
    return len(graph)

#===============================================================================

def main(argv: Optional[list[str]]=None):
    import argparse
    parser = argparse.ArgumentParser(description='Extract RDFa from HTML and XHTML documents')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--debug', action='store_true', help='Log conditions that were ignored while parsing')
    parser.add_argument('--base', metavar='BASE_IRI', help="Base IRI of the document (default: the file's URI)")
    parser.add_argument('--content-type', choices=CONTENT_TYPES, help='Content type (default: from the file extension)')
    parser.add_argument('--list-style', choices=LIST_STYLES, default='members', help='How lists are written (default: members)')
    parser.add_argument('--output', metavar='OUTPUT_FILE', help='Save statements to a .ttl, .nt or .rdf file instead of printing Turtle')
    parser.add_argument('source', metavar='RDFA_SOURCE', help='Input HTML or XHTML file')

    args = parser.parse_args(argv)
    set_debug(args.debug)

    try:
        rdfa2quads(Path(args.source), args.base, args.content_type, args.list_style,
                   Path(args.output) if args.output else None)
    except (IOError, RdfaParseException) as e:
        log.error(str(e))
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
