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

from typing import Optional

#===============================================================================

import rdflib

#===============================================================================

from ..model.literal import TypedLiteral
from ..rdf.namespace import XML_SCHEMA_NAMESPACE_URI, XSD_NAMESPACE_URI
from ..utils import log

#===============================================================================
#===============================================================================

class XMLSchemaTypedLiteralFactory:
    """
    Typed literals for the XML Schema datatypes, using ``rdflib``'s
    lexical-to-value mappings (e.g. ``xsd:integer`` gives an ``int``,
    ``xsd:date`` a ``datetime.date``).

    The factory abstains for datatypes outside XML Schema, for those that
    ``rdflib`` has no mapping for, and for ill-typed lexical forms.
    """
    namespace = XML_SCHEMA_NAMESPACE_URI

    def create_typed_literal(self, lexical_form: str, datatype_uri: str) -> Optional[TypedLiteral]:
    #==============================================================================================
        if not datatype_uri.startswith(XSD_NAMESPACE_URI):
            return None
        typed = rdflib.Literal(lexical_form, datatype=rdflib.URIRef(datatype_uri))
        if typed.value is None or typed.ill_typed:
            log.debug(f'No XML Schema value for "{lexical_form}"^^<{datatype_uri}>')
            return None
        return TypedLiteral(typed.value, datatype_uri, lexical_form)

#===============================================================================
#===============================================================================
