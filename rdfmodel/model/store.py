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

from collections.abc import Iterator
from typing import Optional

#===============================================================================

from .identity import IdentitySet
from .resource import Resource

#===============================================================================
#===============================================================================

class ResourceStore:
    def __init__(self):
        self.__resources: IdentitySet[Resource] = IdentitySet()
        self.__named_resources: dict[str, Resource] = {}

    def __contains__(self, resource: object) -> bool:
        return resource in self.__resources

    def __iter__(self) -> Iterator[Resource]:
        return iter(self.__resources)

    def __len__(self) -> int:
        return len(self.__resources)

    @property
    def resource_count(self) -> int:
        return len(self.__resources)

    @property
    def resources(self) -> Iterator[Resource]:
        return iter(self.__resources)

    def add_resource(self, resource: Resource):
    #==========================================
        if not isinstance(resource, Resource):
            raise TypeError(f'Can only store a Resource, not {type(resource).__name__}')
        self.__resources.add(resource)
        if resource.uri is not None:
            self.__named_resources[resource.uri] = resource

    def get_resource(self, uri: Optional[str]) -> Optional[Resource]:
    #================================================================
        if uri is None:
            return None
        return self.__named_resources.get(uri)

#===============================================================================
#===============================================================================
