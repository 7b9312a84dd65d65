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

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional

#===============================================================================

from ..rdf.namespace import BAG_CLASS_NAME, LIST_CLASS_NAME, SEQ_CLASS_NAME
from ..rdf.namespace import NIL_RESOURCE_URI, RDF, RDF_NAMESPACE_URI, XML_LITERAL_DATATYPE_URI
from ..rdf.namespace import container_member_index, container_member_uri, split_uri
from ..utils import InvalidArgument, log

from .factory import FactoryRegistry, ResourceFactory, TypedLiteralFactory
from .identity import IdentityDict, IdentitySet
from .literal import Literal, PlainLiteral, TypedLiteral, XMLLiteral
from .references import ReferenceMap, compute_references
from .resource import CONTAINER_KINDS, PropertyValuePair, RdfObject, Resource, ResourceKind
from .roots import RootPredicate, is_root_resource, label
from .store import ResourceStore

#===============================================================================

_BUILTIN_TYPE_KINDS = {
    BAG_CLASS_NAME: ResourceKind.BAG,
    LIST_CLASS_NAME: ResourceKind.LIST,
    SEQ_CLASS_NAME: ResourceKind.SEQUENCE,
}

#===============================================================================
#===============================================================================

class RdfModel:
    """
    An in-memory RDF data model.

    Resources should be created through the model, which keeps the factories
    registered for resource type namespaces and typed literal datatype
    namespaces. The model itself constructs the built-in RDF resources
    (``rdf:nil``, ``rdf:Bag``, ``rdf:Seq`` and ``rdf:List``) and the
    ``rdf:XMLLiteral`` datatype, although a factory registered for the RDF
    namespace takes precedence.

    By default a typed literal factory for XML Schema datatypes is registered.
    """
    def __init__(self, base_uri: Optional[str]=None, root_predicate: Optional[RootPredicate]=None,
                 register_defaults: bool=True):
        self.__base_uri = base_uri
        self.__registry = FactoryRegistry()
        self.__store = ResourceStore()
        self.__root_predicate = root_predicate if root_predicate is not None else is_root_resource
        if register_defaults:
            from ..xmlschema import XMLSchemaTypedLiteralFactory
            self.__registry.register_typed_literal_factory(XMLSchemaTypedLiteralFactory.namespace,
                                                           XMLSchemaTypedLiteralFactory())

    @property
    def base_uri(self) -> Optional[str]:
        return self.__base_uri

    @property
    def registry(self) -> FactoryRegistry:
        return self.__registry

    @property
    def store(self) -> ResourceStore:
        return self.__store

    def register_resource_factory(self, namespace: str, factory: ResourceFactory):
    #=============================================================================
        self.__registry.register_resource_factory(namespace, factory)

    def unregister_resource_factory(self, namespace: str):
    #=====================================================
        self.__registry.unregister_resource_factory(namespace)

    def register_typed_literal_factory(self, namespace: str, factory: TypedLiteralFactory):
    #======================================================================================
        self.__registry.register_typed_literal_factory(namespace, factory)

    def unregister_typed_literal_factory(self, namespace: str):
    #==========================================================
        self.__registry.unregister_typed_literal_factory(namespace)

    #===========================================================================

    @property
    def resource_count(self) -> int:
        return self.__store.resource_count

    @property
    def resources(self) -> Iterator[Resource]:
        return self.__store.resources

    def add_resource(self, resource: Resource):
    #==========================================
        self.__store.add_resource(resource)

    def get_resource(self, uri: Optional[str]) -> Optional[Resource]:
    #================================================================
        return self.__store.get_resource(uri)

    #===========================================================================

    def is_root_resource(self, resource: Resource) -> bool:
    #======================================================
        return self.__root_predicate(resource)

    def root_resources(self, key: Optional[Callable[[Resource], Any]]=None) -> list[Resource]:
    #=========================================================================================
        roots = [resource for resource in self.__store.resources
                    if self.__root_predicate(resource)]
        if key is not None:
            roots.sort(key=key)
        return roots

    def compute_references(self, root: Optional[Resource]=None) -> ReferenceMap:
    #===========================================================================
        if root is not None:
            return compute_references([root])
        return compute_references(self.__store.resources)

    #===========================================================================

    def locate_resource(self, uri: str) -> Resource:
    #===============================================
        return self.locate_typed_resource(uri, None)

    def locate_typed_resource(self, uri: str, type_uri: Optional[str]) -> Resource:
    #==============================================================================
        if (resource := self.__store.get_resource(uri)) is None:
            resource = self.create_typed_resource(uri, type_uri)
        return resource

    def create_resource(self, uri: Optional[str]=None) -> Resource:
    #==============================================================
        return self.create_typed_resource(uri, None)

    def create_typed_resource(self, uri: Optional[str], type_uri: Optional[str]) -> Resource:
    #========================================================================================
        if type_uri is not None:
            (type_namespace, type_local_name) = split_uri(type_uri)
        else:
            (type_namespace, type_local_name) = (None, None)
        resource = self.create_typed_resource_from_factory(uri, type_namespace, type_local_name)
        if resource is None:
            resource = Resource(uri)
        self.__store.add_resource(resource)
        if type_uri is not None:
            self.add_type(resource, type_uri)
        return resource

    def create_typed_resource_from_factory(self, uri: Optional[str], type_namespace: Optional[str],
                                           type_local_name: Optional[str]) -> Optional[Resource]:
    #=========================================================================================
        resource = None
        if (factory := self.__registry.resource_factory(type_namespace)) is not None:
            resource = factory.create_resource(uri, type_namespace, type_local_name)    # pyright: ignore[reportArgumentType]
            if resource is None:
                log.debug(f'Resource factory for {type_namespace} declined {type_local_name}')
        if resource is None:
            if uri == NIL_RESOURCE_URI:
                resource = Resource(NIL_RESOURCE_URI, ResourceKind.LIST)
            elif (type_namespace == RDF_NAMESPACE_URI
              and (kind := _BUILTIN_TYPE_KINDS.get(type_local_name)) is not None):   # pyright: ignore[reportArgumentType]
                resource = Resource(uri, kind)
        if resource is not None:
            self.__store.add_resource(resource)
        return resource

    def create_typed_literal(self, lexical_form: str, datatype_uri: Optional[str]) -> TypedLiteral:
    #==============================================================================================
        if datatype_uri is None:
            raise InvalidArgument('A datatype must be given to create a typed literal')
        (datatype_namespace, _) = split_uri(datatype_uri)
        typed_literal = None
        if (factory := self.__registry.typed_literal_factory(datatype_namespace)) is not None:
            typed_literal = factory.create_typed_literal(lexical_form, datatype_uri)
        if typed_literal is None and datatype_uri == XML_LITERAL_DATATYPE_URI:
            typed_literal = XMLLiteral(lexical_form)
        if typed_literal is None:
            typed_literal = TypedLiteral(lexical_form, datatype_uri, lexical_form)
        return typed_literal

    #===========================================================================

    def add_property(self, resource: Resource, property_uri: str, value: 'RdfObject|str') -> Resource:
    #===============================================================================================
        if isinstance(value, str):
            value = PlainLiteral(value)
        return resource.add_property(self.locate_resource(property_uri), value)

    def add_type(self, resource: Resource, type_uri: str) -> Resource:
    #=================================================================
        return resource.add_property(self.locate_resource(RDF.type),
                                     self.locate_resource(type_uri))

    def add_item(self, container: Resource, value: 'RdfObject|str') -> Resource:
    #=========================================================================
        if container.kind not in CONTAINER_KINDS:
            raise InvalidArgument(f'Resource {container} is not a bag or sequence')
        index = max((container_member_index(pair.property.uri) or 0
                        for pair in container.properties if pair.property.uri is not None), default=0)
        return self.add_property(container, container_member_uri(index + 1), value)

    def create_list(self, values: Iterable['RdfObject|str']) -> Resource:
    #==================================================================
        items = list(values)
        if len(items) == 0:
            return self.locate_resource(NIL_RESOURCE_URI)
        head = self.__create_list_node()
        node = head
        for n, value in enumerate(items):
            self.add_property(node, RDF.first, value)
            if n < len(items) - 1:
                rest = self.__create_list_node()
            else:
                rest = self.locate_resource(NIL_RESOURCE_URI)
            self.add_property(node, RDF.rest, rest)
            node = rest
        return head

    def __create_list_node(self) -> Resource:
    #=======================================
        if (node := self.create_typed_resource_from_factory(None, RDF_NAMESPACE_URI, LIST_CLASS_NAME)) is None:
            node = Resource(None, ResourceKind.LIST)
            self.__store.add_resource(node)
        return node

#===============================================================================
#===============================================================================

__all__ = [
    'FactoryRegistry',
    'IdentityDict',
    'IdentitySet',
    'Literal',
    'PlainLiteral',
    'PropertyValuePair',
    'RdfModel',
    'RdfObject',
    'ReferenceMap',
    'Resource',
    'ResourceFactory',
    'ResourceKind',
    'ResourceStore',
    'RootPredicate',
    'TypedLiteral',
    'TypedLiteralFactory',
    'XMLLiteral',
    'compute_references',
    'is_root_resource',
    'label',
]

#===============================================================================
#===============================================================================
