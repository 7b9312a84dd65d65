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

from rdfmodel import RdfModel, Resource, compute_references
from rdfmodel.model.references import reference_cycles, references_graph
from rdfmodel.rdf.namespace import Namespace

#===============================================================================

EX = Namespace('http://example.org/')

#===============================================================================

def link(model: RdfModel, source: Resource, target: Resource):
#=============================================================
    model.add_property(source, EX.refersTo, target)

def referrers(references, resource: Resource) -> list[Resource]:
#===============================================================
    return list(references[resource])

def same_resources(actual: list[Resource], expected: list[Resource]) -> bool:
#===========================================================================
    return sorted(map(id, actual)) == sorted(map(id, expected))

#===============================================================================
#===============================================================================

def test_cycle_terminates():
#===========================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    link(model, a, b)
    link(model, b, a)
    references = model.compute_references()
    assert len(references) == 2
    assert same_resources(referrers(references, b), [a])
    assert same_resources(referrers(references, a), [b])

def test_self_reference():
#=========================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    link(model, a, a)
    references = model.compute_references()
    assert same_resources(referrers(references, a), [a])

def test_diamond_aggregation():
#==============================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    c = model.locate_resource(EX.c)
    link(model, a, c)
    link(model, b, c)
    references = model.compute_references()
    assert len(references) == 1
    assert same_resources(referrers(references, c), [a, b])

def test_referrers_found_after_first_visit():
#============================================
    model = RdfModel()
    c = model.create_resource()
    b = model.create_resource()
    a = model.create_resource()
    link(model, a, b)
    link(model, b, c)
    link(model, a, c)
    link(model, c, a)
    references = model.compute_references()
    assert same_resources(referrers(references, a), [c])
    assert same_resources(referrers(references, b), [a])
    assert same_resources(referrers(references, c), [a, b])

def test_repeated_edges_are_not_duplicated():
#============================================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    link(model, a, b)
    link(model, a, b)
    model.add_property(a, EX.other, b)
    references = model.compute_references()
    assert same_resources(referrers(references, b), [a])

def test_literals_are_not_referenced():
#======================================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    model.add_property(a, EX.name, 'A')
    assert len(model.compute_references()) == 0

def test_single_root():
#======================
    model = RdfModel()
    x = model.locate_resource(EX.x)
    y = model.locate_resource(EX.y)
    z = model.locate_resource(EX.z)
    link(model, x, y)
    link(model, y, z)
    references = model.compute_references(root=y)
    assert y not in references
    assert same_resources(referrers(references, z), [y])

def test_single_root_reaches_through_cycle():
#============================================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    link(model, a, b)
    link(model, b, a)
    references = compute_references([b])
    assert same_resources(referrers(references, a), [b])
    assert same_resources(referrers(references, b), [a])

def test_identity_not_equality():
#================================
    model = RdfModel()
    target = model.locate_resource(EX.target)
    first = Resource(EX.source)
    second = Resource(EX.source)
    assert first == second
    link(model, first, target)
    link(model, second, target)
    references = compute_references([first, second])
    assert same_resources(referrers(references, target), [first, second])

def test_blank_nodes_are_separate_referrers():
#=============================================
    model = RdfModel()
    target = model.locate_resource(EX.target)
    blanks = [model.create_resource() for _ in range(3)]
    for blank in blanks:
        link(model, blank, target)
    references = model.compute_references()
    assert same_resources(referrers(references, target), blanks)

def test_deep_chain():
#=====================
    model = RdfModel()
    chain = [model.create_resource() for _ in range(10000)]
    for source, target in zip(chain, chain[1:]):
        link(model, source, target)
    references = compute_references([chain[0]])
    assert len(references) == len(chain) - 1
    assert chain[0] not in references
    assert same_resources(referrers(references, chain[-1]), [chain[-2]])

#===============================================================================

def test_references_graph():
#===========================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    c = model.create_resource()
    link(model, a, b)
    link(model, b, a)
    link(model, a, c)
    G = references_graph(model.compute_references())
    assert set(G.nodes) == {a.serial, b.serial, c.serial}
    assert set(G.edges) == {(a.serial, b.serial), (b.serial, a.serial), (a.serial, c.serial)}
    assert G.nodes[c.serial]['resource'] is c

def test_reference_cycles():
#===========================
    model = RdfModel()
    a = model.locate_resource(EX.a)
    b = model.locate_resource(EX.b)
    c = model.locate_resource(EX.c)
    link(model, a, b)
    link(model, b, a)
    link(model, b, c)
    cycles = reference_cycles(model.compute_references())
    assert len(cycles) == 1
    assert same_resources(cycles[0], [a, b])

#===============================================================================
#===============================================================================
