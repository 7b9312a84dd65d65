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
Move statements between an ``RdfGraph`` and an ``RdfModel``.

Loading goes through the model's construction API: subjects with an
``rdf:type`` are created with that type so that registered resource factories
apply, and each distinct blank node becomes one blank resource.
"""

#===============================================================================

from typing import Optional

#===============================================================================

from ..model import IdentityDict, PlainLiteral, RdfModel, RdfObject, Resource, TypedLiteral
from ..utils import Issue

from . import BlankNode, NamedNode, RdfGraph, Term, Triple
from . import blankNode, isBlankNode, isLiteral, isNamedNode, literal, namedNode
from .namespace import RDF, XSD, split_uri

#===============================================================================
#===============================================================================

class _ModelLoader:
    def __init__(self, model: RdfModel):
        self.__model = model
        self.__blank_nodes: dict[str, Resource] = {}

    def load(self, triples: list[Triple]):
    #=====================================
        # Every typed subject exists before any type or property value is located
        for triple in triples:
            if (triple.predicate.value == RDF.type
            and isNamedNode(triple.object)
            and self.__known_resource(triple.subject) is None):
                self.__create_typed_subject(triple.subject, triple.object.value)
        for triple in triples:
            subject = self.__resource(triple.subject)
            property = self.__model.locate_resource(triple.predicate.value)
            subject.add_property(property, self.__object(triple.object))

    def __create_typed_subject(self, term: Term, type_uri: str):
    #===========================================================
        uri = self.__subject_uri(term)
        (type_namespace, type_local_name) = split_uri(type_uri)
        resource = self.__model.create_typed_resource_from_factory(uri, type_namespace, type_local_name)
        if resource is None:
            resource = self.__model.create_resource(uri)
        if isBlankNode(term):
            self.__blank_nodes[term.value] = resource

    def __known_resource(self, term: Term) -> Optional[Resource]:
    #============================================================
        if isBlankNode(term):
            return self.__blank_nodes.get(term.value)
        return self.__model.get_resource(self.__subject_uri(term))

    def __object(self, term: Term) -> RdfObject:
    #===========================================
        if isLiteral(term):
            if term.language is not None:                       # pyright: ignore[reportAttributeAccessIssue]
                return PlainLiteral(term.value, term.language)  # pyright: ignore[reportAttributeAccessIssue]
            elif term.datatype.value == XSD.string:             # pyright: ignore[reportAttributeAccessIssue]
                return PlainLiteral(term.value)
            return self.__model.create_typed_literal(term.value, term.datatype.value)   # pyright: ignore[reportAttributeAccessIssue]
        return self.__resource(term)

    def __resource(self, term: Term) -> Resource:
    #============================================
        if isBlankNode(term):
            if (resource := self.__blank_nodes.get(term.value)) is None:
                resource = self.__model.create_resource()
                self.__blank_nodes[term.value] = resource
            return resource
        return self.__model.locate_resource(self.__subject_uri(term))   # pyright: ignore[reportArgumentType]

    @staticmethod
    def __subject_uri(term: Term) -> Optional[str]:
    #==============================================
        if isBlankNode(term):
            return None
        elif isNamedNode(term):
            return term.value
        raise Issue(f'Unsupported RDF term as subject or object: {term}')

#===============================================================================

def model_from_graph(graph: RdfGraph, model: Optional[RdfModel]=None) -> RdfModel:
#=================================================================================
    if model is None:
        model = RdfModel()
    _ModelLoader(model).load(list(graph.triples()))
    return model

def load_model(source: str, base_iri: Optional[str]=None, model: Optional[RdfModel]=None) -> RdfModel:
#=====================================================================================================
    graph = RdfGraph()
    graph.load(base_iri, source)
    if model is None:
        model = RdfModel(base_uri=base_iri)
    return model_from_graph(graph, model)

#===============================================================================
#===============================================================================

def graph_from_model(model: RdfModel) -> RdfGraph:
#=================================================
    graph = RdfGraph()
    blank_nodes: IdentityDict[Resource, BlankNode] = IdentityDict()

    def resource_term(resource: Resource) -> BlankNode|NamedNode:
        if resource.uri is not None:
            return namedNode(resource.uri)
        if (node := blank_nodes.get(resource)) is None:
            node = blankNode()
            blank_nodes[resource] = node
        return node

    for resource in model.resources:
        for pair in resource.properties:
            if pair.property.uri is None:
                raise Issue(f'Property of {resource} is a blank node')
            if isinstance(pair.value, Resource):
                value_term = resource_term(pair.value)
            elif isinstance(pair.value, TypedLiteral):
                value_term = literal(pair.value.lexical_form, datatype=namedNode(pair.value.datatype_uri))
            elif isinstance(pair.value, PlainLiteral):
                value_term = literal(pair.value.lexical_form, language=pair.value.language)
            else:
                raise Issue(f'Unsupported property value: {pair.value!r}')
            graph.add(Triple(resource_term(resource), namedNode(pair.property.uri), value_term))
    return graph

#===============================================================================
#===============================================================================
