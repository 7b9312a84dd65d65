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

from typing import Any, Optional

#===============================================================================

import lxml.etree as etree

#===============================================================================

from ..rdf.namespace import XML_LITERAL_DATATYPE_URI
from ..utils import etree_from_string

#===============================================================================
#===============================================================================

class Literal:
    def __init__(self, lexical_form: str):
        if not isinstance(lexical_form, str):
            raise TypeError(f'Lexical form must be a string, not {type(lexical_form).__name__}')
        self.__lexical_form = lexical_form

    def __str__(self):
        return self.__lexical_form

    @property
    def lexical_form(self) -> str:
        return self.__lexical_form

#===============================================================================

class PlainLiteral(Literal):
    def __init__(self, lexical_form: str, language: Optional[str]=None):
        super().__init__(lexical_form)
        self.__language = language.lower() if language else None

    def __eq__(self, other):
        if not isinstance(other, PlainLiteral):
            return NotImplemented
        return (self.lexical_form == other.lexical_form
            and self.__language == other.__language)

    def __hash__(self):
        return hash((self.lexical_form, self.__language))

    def __repr__(self):
        if self.__language is not None:
            return f'"{self.lexical_form}"@{self.__language}'
        return f'"{self.lexical_form}"'

    @property
    def language(self) -> Optional[str]:
        return self.__language

#===============================================================================

class TypedLiteral(Literal):
    def __init__(self, value: Any, datatype_uri: str, lexical_form: Optional[str]=None):
        super().__init__(lexical_form if lexical_form is not None else str(value))
        self.__value = value
        self.__datatype_uri = datatype_uri

    def __eq__(self, other):
        if not isinstance(other, TypedLiteral):
            return NotImplemented
        return (self.__datatype_uri == other.__datatype_uri
            and self.__value == other.__value)

    def __hash__(self):
        try:
            return hash((self.__datatype_uri, self.__value))
        except TypeError:
            return hash(self.__datatype_uri)

    def __repr__(self):
        return f'"{self.lexical_form}"^^<{self.__datatype_uri}>'

    @property
    def datatype_uri(self) -> str:
        return self.__datatype_uri

    @property
    def value(self) -> Any:
        return self.__value

#===============================================================================

class XMLLiteral(TypedLiteral):
    """
    An ``rdf:XMLLiteral``, the value of which is its markup.

    Two XML literals are equal when the canonical (C14N) forms of their markup
    are identical. Markup that isn't well formed is compared as text.
    """
    def __init__(self, lexical_form: str):
        super().__init__(lexical_form, XML_LITERAL_DATATYPE_URI, lexical_form)
        self.__canonical_form: Optional[str] = None

    def __eq__(self, other):
        if not isinstance(other, XMLLiteral):
            return NotImplemented
        return self.canonical_form == other.canonical_form

    def __hash__(self):
        return hash(self.canonical_form)

    @property
    def canonical_form(self) -> str:
    #===============================
        if self.__canonical_form is None:
            try:
                element = etree_from_string(f'<xml-literal>{self.lexical_form}</xml-literal>')
                self.__canonical_form = etree.tostring(element, method='c14n').decode('utf-8')
            except ValueError:
                self.__canonical_form = self.lexical_form
        return self.__canonical_form

#===============================================================================
#===============================================================================
