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
from enum import Enum
import itertools
from typing import Optional, Self

#===============================================================================

from ..rdf.namespace import NIL_RESOURCE_URI, RDF, container_member_index

from .identity import IdentitySet
from .literal import Literal

#===============================================================================
#===============================================================================

class ResourceKind(Enum):
    RESOURCE = 'resource'
    LIST     = 'list'
    BAG      = 'bag'
    SEQUENCE = 'sequence'

CONTAINER_KINDS = (ResourceKind.BAG, ResourceKind.SEQUENCE)

#===============================================================================

PropertyValuePair = namedtuple('PropertyValuePair', 'property, value')

#===============================================================================

_serials = itertools.count(1)

#===============================================================================

class Resource:
    """
    A node of the graph, either named by a URI or a blank node.

    A resource is only ever the same node as itself. Named resources compare
    equal when their URIs are equal, a blank node is only equal to itself.
    """
    def __init__(self, uri: Optional[str]=None, kind: ResourceKind=ResourceKind.RESOURCE):
        if uri is not None and not isinstance(uri, str):
            raise TypeError(f'Resource URI must be a string, not {type(uri).__name__}')
        self.__uri = uri
        self.__kind = kind
        self.__serial = next(_serials)
        self.__properties: list[PropertyValuePair] = []

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Resource):
            return NotImplemented
        return self.__uri is not None and self.__uri == other.__uri

    def __hash__(self):
        if self.__uri is not None:
            return hash(self.__uri)
        return object.__hash__(self)

    def __repr__(self):
        return f'<{self.__uri}>' if self.__uri is not None else f'_:b{self.__serial}'

    def __str__(self):
        return self.__uri if self.__uri is not None else f'_:b{self.__serial}'

    @property
    def is_blank(self) -> bool:
        return self.__uri is None

    @property
    def is_named(self) -> bool:
        return self.__uri is not None

    @property
    def kind(self) -> ResourceKind:
        return self.__kind

    @property
    def properties(self) -> tuple[PropertyValuePair, ...]:
        return tuple(self.__properties)

    @property
    def property_count(self) -> int:
        return len(self.__properties)

    @property
    def serial(self) -> int:
        return self.__serial

    @property
    def types(self) -> list['Resource']:
        return [value for value in self.property_values(RDF.type)
                    if isinstance(value, Resource)]

    @property
    def uri(self) -> Optional[str]:
        return self.__uri

    def add_property(self, property: 'Resource', value: 'RdfObject') -> Self:
    #========================================================================
        if not isinstance(property, Resource):
            raise TypeError(f'Property must be a Resource, not {type(property).__name__}')
        if not isinstance(value, (Resource, Literal)):
            raise TypeError(f'Property value must be a Resource or Literal, not {type(value).__name__}')
        self.__properties.append(PropertyValuePair(property, value))
        return self

    def has_type(self, type_uri: str) -> bool:
    #=========================================
        return any(type.uri == type_uri for type in self.types)

    def property_value(self, property_uri: str) -> Optional['RdfObject']:
    #====================================================================
        for pair in self.__properties:
            if pair.property.uri == property_uri:
                return pair.value
        return None

    def property_values(self, property_uri: str) -> list['RdfObject']:
    #=================================================================
        return [pair.value for pair in self.__properties
                    if pair.property.uri == property_uri]

    def items(self) -> list['RdfObject']:
    #====================================
        if self.__kind == ResourceKind.LIST:
            return self.__list_items()
        elif self.__kind in CONTAINER_KINDS:
            members = [(index, pair.value) for pair in self.__properties
                        if pair.property.uri is not None
                        and (index := container_member_index(pair.property.uri)) is not None]
            return [value for _, value in sorted(members, key=lambda member: member[0])]
        raise TypeError(f'Resource {self} is not a list or container')

    def __list_items(self) -> list['RdfObject']:
    #===========================================
        items = []
        seen: IdentitySet[Resource] = IdentitySet()
        node: Optional[RdfObject] = self
        while (isinstance(node, Resource)
           and node.uri != NIL_RESOURCE_URI
           and node not in seen):
            seen.add(node)
            if (first := node.property_value(RDF.first)) is None:
                break
            items.append(first)
            node = node.property_value(RDF.rest)
        return items

#===============================================================================

type RdfObject = Resource | Literal

#===============================================================================
#===============================================================================
