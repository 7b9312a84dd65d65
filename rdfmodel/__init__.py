"""

An in-memory RDF resource model
===============================

Resources and literals are created through an ``RdfModel``, which keeps:

    * a store of every resource, keyed on identity, with named resources
      also indexed by URI;
    * the resource factories registered for type namespaces and the typed
      literal factories registered for datatype namespaces.

The model can also compute, for every resource, the set of resources that
reference it, and choose the resources to show at the root of a hierarchy.

"""

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

from .model import IdentityDict, IdentitySet, Literal, PlainLiteral, RdfModel, Resource
from .model import ResourceFactory, ResourceKind, TypedLiteral, TypedLiteralFactory, XMLLiteral
from .model import compute_references, is_root_resource
from .utils import InvalidArgument, Issue
from .version import __version__

#===============================================================================
