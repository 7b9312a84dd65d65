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
#===============================================================================

"""
Generate URIs within a namespace, e.g. ``RDF.type`` or ``RDF('_1')``.
"""
class Namespace:
    def __init__(self, ns: str):
        self.__ns = ns

    def __str__(self):
        return self.__ns

    def __call__(self, name: str='') -> str:
        return f'{self.__ns}{name}'

    def __getattr__(self, name: str) -> str:
        if name.startswith('__'):
            raise AttributeError(name)
        return f'{self.__ns}{name}'

    def __contains__(self, uri: str) -> bool:
        return uri.startswith(self.__ns)

    @property
    def uri(self) -> str:
        return self.__ns

#===============================================================================

RDF_NAMESPACE_URI = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
RDFS_NAMESPACE_URI = 'http://www.w3.org/2000/01/rdf-schema#'

# XML Schema names its namespace without a trailing fragment separator but
# datatype URIs are formed by appending `#` and the datatype name
XML_SCHEMA_NAMESPACE_URI = 'http://www.w3.org/2001/XMLSchema'
XSD_NAMESPACE_URI = f'{XML_SCHEMA_NAMESPACE_URI}#'

RDF = Namespace(RDF_NAMESPACE_URI)
RDFS = Namespace(RDFS_NAMESPACE_URI)
XSD = Namespace(XSD_NAMESPACE_URI)

#===============================================================================

NAMESPACES = {
    'rdf': RDF_NAMESPACE_URI,
    'rdfs': RDFS_NAMESPACE_URI,
    'xsd': XSD_NAMESPACE_URI,
    'owl': 'http://www.w3.org/2002/07/owl#',
    'foaf': 'http://xmlns.com/foaf/0.1/',
}

#===============================================================================

NIL_RESOURCE_URI = RDF.nil
XML_LITERAL_DATATYPE_URI = RDF.XMLLiteral

BAG_CLASS_NAME = 'Bag'
LIST_CLASS_NAME = 'List'
SEQ_CLASS_NAME = 'Seq'

CONTAINER_MEMBER_PREFIX = '_'

#===============================================================================
#===============================================================================

def get_curie(uri: str) -> str:
#==============================
    for prefix, ns_uri in NAMESPACES.items():
        if uri.startswith(ns_uri):
            return f'{prefix}:{uri[len(ns_uri):]}'
    return uri

def split_uri(uri: str) -> tuple[Optional[str], str]:
#====================================================
    if (index := uri.rfind('#')) < 0:
        index = uri.rfind('/')
    if index < 0:
        return (None, uri)
    return (uri[:index+1], uri[index+1:])

#===============================================================================

def container_member_uri(index: int) -> str:
#===========================================
    return RDF(f'{CONTAINER_MEMBER_PREFIX}{index}')

def container_member_index(uri: str) -> Optional[int]:
#=====================================================
    if uri.startswith(RDF_NAMESPACE_URI):
        name = uri[len(RDF_NAMESPACE_URI):]
        if name.startswith(CONTAINER_MEMBER_PREFIX) and name[1:].isdecimal():
            return int(name[1:])
    return None

#===============================================================================
#===============================================================================
