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

from collections import namedtuple
from typing import Any, Iterator, Optional, Self

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import Issue

from .namespace import NAMESPACES

#===============================================================================

BlankNode = oxigraph.BlankNode
Literal = oxigraph.Literal
NamedNode = oxigraph.NamedNode

#===============================================================================

def blankNode(value: Optional[str]=None) -> BlankNode:
    return BlankNode(value)

def literal(value: str|int|float|bool, datatype: Optional[NamedNode]=None, language: Optional[str]=None) -> Literal:
    if language is not None:
        return Literal(value, language=language)
    return Literal(value, datatype=datatype)

def namedNode(uri: str) -> NamedNode:
    return NamedNode(uri)

#===============================================================================

def isBlankNode(node: Any) -> bool:
    return isinstance(node, BlankNode)

def isLiteral(node: Any) -> bool:
    return isinstance(node, Literal)

def isNamedNode(node: Any) -> bool:
    return isinstance(node, NamedNode)

#===============================================================================

type Term = BlankNode | Literal | NamedNode

Triple = namedtuple('Triple', 'subject, predicate, object')

#===============================================================================

class RdfGraph:
    def __init__(self, namespaces: Optional[dict[str, str]]=None):
        self.__graph = oxigraph.Store()
        self.__namespaces = dict(namespaces) if namespaces is not None else dict(NAMESPACES)

    def __contains__(self, triple: Triple) -> bool:
    #==============================================
        try:
            self.__graph.quads_for_pattern(triple.subject, triple.predicate, triple.object).__next__()
            return True
        except StopIteration:
            return False

    def __len__(self) -> int:
        return len(self.__graph)

    def add(self, triple: Triple) -> Self:
    #=====================================
        self.__graph.add(oxigraph.Quad(triple.subject, triple.predicate, triple.object))
        return self

    def load(self, base_iri: Optional[str], source: str):
    #====================================================
        try:
            self.__graph.load(input=source, format=oxigraph.RdfFormat.TURTLE, base_iri=base_iri)
        except (SyntaxError, ValueError) as e:
            raise Issue(f'Cannot load RDF from {base_iri}: {e}')

    def serialise(self, base_iri: Optional[str]=None) -> str:
    #========================================================
        prefixes = dict(self.__namespaces)
        if base_iri is not None:
            prefixes[''] = f'{base_iri}#'
        bytes = self.__graph.dump(format=oxigraph.RdfFormat.TURTLE,
                                  from_graph=oxigraph.DefaultGraph(),
                                  prefixes=prefixes)
        return bytes.decode('utf-8')    # pyright: ignore[reportOptionalMemberAccess]

    def triples(self) -> Iterator[Triple]:
    #=====================================
        for quad in self.__graph.quads_for_pattern(None, None, None):
            yield Triple(quad.subject, quad.predicate, quad.object)

#===============================================================================
#===============================================================================
