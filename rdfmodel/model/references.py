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

"""
Reverse references: for each resource, the resources having a property with
it as value.

The traversal is depth first over resource valued properties, using an
explicit stack. A single ``visited`` set is shared by all starting resources
so that every resource has its properties expanded exactly once, however many
times it is reached and whatever cycles the graph contains.
"""

#===============================================================================

from collections.abc import Iterable
from typing import Optional

#===============================================================================

import networkx as nx

#===============================================================================

from .identity import IdentityDict, IdentitySet
from .resource import Resource

#===============================================================================

type ReferenceMap = IdentityDict[Resource, IdentitySet[Resource]]

#===============================================================================
#===============================================================================

def compute_references(resources: Iterable[Resource],
                       references: Optional[ReferenceMap]=None) -> ReferenceMap:
#==========================================================================
    if references is None:
        references = IdentityDict()
    visited: IdentitySet[Resource] = IdentitySet()
    for start in resources:
        stack = [start]
        while len(stack):
            resource = stack.pop()
            if resource in visited:
                continue
            visited.add(resource)
            for pair in resource.properties:
                if isinstance(value := pair.value, Resource):
                    if (referrers := references.get(value)) is None:
                        referrers = IdentitySet()
                        references[value] = referrers
                    referrers.add(resource)
                    if value not in visited:
                        stack.append(value)
    return references

#===============================================================================

def references_graph(references: ReferenceMap) -> nx.DiGraph:
#============================================================
    G = nx.DiGraph()
    for resource, referrers in references.items():
        G.add_node(resource.serial, resource=resource)
        for referrer in referrers:
            G.add_node(referrer.serial, resource=referrer)
            G.add_edge(referrer.serial, resource.serial)
    return G

def reference_cycles(references: ReferenceMap) -> list[list[Resource]]:
#======================================================================
    G = references_graph(references)
    return [[G.nodes[node]['resource'] for node in cycle]
                for cycle in nx.simple_cycles(G)]

#===============================================================================
#===============================================================================
