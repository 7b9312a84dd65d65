#===============================================================================
#
#  CellDL and bondgraph tools
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

from rdfmodel import IdentityDict, IdentitySet, Resource

#===============================================================================
#===============================================================================

def test_identity_set():
#=======================
    first = Resource('http://example.org/a')
    second = Resource('http://example.org/a')
    items = IdentitySet([first, second, first])
    assert len(items) == 2
    assert first in items and second in items
    assert Resource('http://example.org/a') not in items
    items.discard(first)
    assert list(items) == [second]
    assert list(items)[0] is second

def test_identity_dict():
#========================
    first = Resource()
    second = Resource()
    mapping: IdentityDict[Resource, str] = IdentityDict()
    mapping[first] = 'first'
    mapping[second] = 'second'
    assert len(mapping) == 2
    assert mapping[first] == 'first'
    assert mapping.get(Resource()) is None
    del mapping[first]
    assert first not in mapping
    with pytest.raises(KeyError):
        del mapping[first]
    assert list(mapping) == [second]

#===============================================================================
#===============================================================================
