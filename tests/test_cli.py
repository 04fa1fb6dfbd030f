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

from rdfa2quads.__main__ import main, rdfa2quads

#===============================================================================

PAGE = """<html>
  <body>
    <div about="#alice" typeof="foaf:Person">
      <span property="foaf:name">Alice</span>
    </div>
  </body>
</html>
"""

#===============================================================================

def test_writes_turtle(tmp_path):
    source = tmp_path / 'page.html'
    source.write_text(PAGE, encoding='utf-8')
    output = tmp_path / 'page.ttl'
    main([str(source), '--base', 'http://ex/', '--output', str(output)])
    turtle = output.read_text(encoding='utf-8')
    assert '<http://ex/#alice>' in turtle
    assert '"Alice"' in turtle

def test_writes_ntriples(tmp_path):
    source = tmp_path / 'page.html'
    source.write_text(PAGE, encoding='utf-8')
    output = tmp_path / 'page.nt'
    main([str(source), '--base', 'http://ex/', '--output', str(output)])
    lines = sorted(output.read_text(encoding='utf-8').strip().split('\n'))
    assert lines == [
        '<http://ex/#alice> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> <http://xmlns.com/foaf/0.1/Person> .',
        '<http://ex/#alice> <http://xmlns.com/foaf/0.1/name> "Alice" .',
    ]

def test_default_base_is_file_uri(tmp_path, capsys):
    source = tmp_path / 'page.html'
    source.write_text(PAGE, encoding='utf-8')
    assert rdfa2quads(source, None, None, 'members', None) == 2
    assert f'{source.resolve().as_uri()}#alice' in capsys.readouterr().out

def test_missing_source(tmp_path):
    with pytest.raises(SystemExit) as exit:
        main([str(tmp_path / 'missing.html')])
    assert exit.value.code == 1

def test_unparseable_source(tmp_path):
    source = tmp_path / 'page.xhtml'
    source.write_text('<html><body></html>', encoding='utf-8')
    with pytest.raises(SystemExit) as exit:
        main([str(source)])
    assert exit.value.code == 1

#===============================================================================
#===============================================================================
