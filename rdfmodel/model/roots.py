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

from typing import Callable, Optional

#===============================================================================

from ..rdf.namespace import RDFS

from .literal import Literal
from .resource import Resource

#===============================================================================

type RootPredicate = Callable[[Resource], bool]

#===============================================================================
#===============================================================================

def label(resource: Resource) -> Optional[Literal]:
#==================================================
    for value in resource.property_values(RDFS.label):
        if isinstance(value, Literal):
            return value
    return None

#===============================================================================

def is_root_resource(resource: Resource) -> bool:
#================================================
    """
    Whether a resource should be presented at the root of a hierarchy.

    Named resources with properties qualify (a property or type resource has
    none of its own), as does anything with a label.
    """
    ## Ideally we would know whether a resource is being used as a property
    ## and how many references there are to it
    return ((resource.is_named and resource.property_count > 0)
         or label(resource) is not None)

#===============================================================================
#===============================================================================
