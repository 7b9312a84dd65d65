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

from typing import Optional, Protocol, runtime_checkable

#===============================================================================

from ..utils import log

from .literal import TypedLiteral
from .resource import Resource

#===============================================================================
#===============================================================================

@runtime_checkable
class ResourceFactory(Protocol):
    def create_resource(self, uri: Optional[str], type_namespace: str, type_local_name: str) -> Optional[Resource]:
        """
        Create a resource for a type in the namespace the factory is registered
        for, or return ``None`` to let the model construct a default one.
        """
        ...

@runtime_checkable
class TypedLiteralFactory(Protocol):
    def create_typed_literal(self, lexical_form: str, datatype_uri: str) -> Optional[TypedLiteral]:
        """
        Map a lexical form to a typed literal with a datatype from the namespace
        the factory is registered for, or return ``None`` to abstain.
        """
        ...

#===============================================================================
#===============================================================================

class FactoryRegistry:
    def __init__(self):
        self.__resource_factories: dict[str, ResourceFactory] = {}
        self.__typed_literal_factories: dict[str, TypedLiteralFactory] = {}

    def register_resource_factory(self, namespace: str, factory: ResourceFactory):
    #=============================================================================
        if not isinstance(factory, ResourceFactory):
            raise TypeError(f'{type(factory).__name__} is not a ResourceFactory')
        self.__resource_factories[namespace] = factory
        log.debug(f'Registered resource factory for {namespace}')

    def unregister_resource_factory(self, namespace: str):
    #=====================================================
        if self.__resource_factories.pop(namespace, None) is not None:
            log.debug(f'Unregistered resource factory for {namespace}')

    def resource_factory(self, namespace: Optional[str]) -> Optional[ResourceFactory]:
    #=================================================================================
        if namespace is None:
            return None
        return self.__resource_factories.get(namespace)

    def register_typed_literal_factory(self, namespace: str, factory: TypedLiteralFactory):
    #======================================================================================
        if not isinstance(factory, TypedLiteralFactory):
            raise TypeError(f'{type(factory).__name__} is not a TypedLiteralFactory')
        self.__typed_literal_factories[namespace] = factory
        log.debug(f'Registered typed literal factory for {namespace}')

    def unregister_typed_literal_factory(self, namespace: str):
    #==========================================================
        if self.__typed_literal_factories.pop(namespace, None) is not None:
            log.debug(f'Unregistered typed literal factory for {namespace}')

    def typed_literal_factory(self, namespace: Optional[str]) -> Optional[TypedLiteralFactory]:
    #==========================================================================================
        if namespace is None:
            return None
        factory = self.__typed_literal_factories.get(namespace)
        # Vocabularies such as RDF and XML Schema differ in whether a namespace
        # ends with its fragment separator
        if factory is None and len(namespace) > 1 and namespace.endswith('#'):
            factory = self.__typed_literal_factories.get(namespace[:-1])
        return factory

#===============================================================================
#===============================================================================
