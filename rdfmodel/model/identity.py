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
Collections keyed on object identity rather than equality.

Named resources compare equal by URI, but two distinct objects are still
distinct graph nodes, and blank nodes have nothing but their identity. Sets
and maps of nodes must therefore never rely on ``__eq__`` and ``__hash__``.
"""

#===============================================================================

from collections.abc import Iterable, Iterator, MutableMapping, MutableSet
from typing import Optional

#===============================================================================
#===============================================================================

class IdentitySet[T](MutableSet[T]):
    def __init__(self, items: Optional[Iterable[T]]=None):
        self.__items: dict[int, T] = {}
        if items is not None:
            for item in items:
                self.add(item)

    def __contains__(self, item: object) -> bool:
        return id(item) in self.__items

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.__items.values()))

    def __len__(self) -> int:
        return len(self.__items)

    def __repr__(self) -> str:
        return f'IdentitySet({list(self.__items.values())!r})'

    def add(self, item: T):
    #======================
        self.__items.setdefault(id(item), item)

    def discard(self, item: T):
    #==========================
        self.__items.pop(id(item), None)

#===============================================================================

class IdentityDict[K, V](MutableMapping[K, V]):
    def __init__(self):
        self.__keys: dict[int, K] = {}
        self.__values: dict[int, V] = {}

    def __contains__(self, key: object) -> bool:
        return id(key) in self.__keys

    def __getitem__(self, key: K) -> V:
        try:
            return self.__values[id(key)]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: K, value: V):
        self.__keys[id(key)] = key
        self.__values[id(key)] = value

    def __delitem__(self, key: K):
        try:
            del self.__values[id(key)]
        except KeyError:
            raise KeyError(key) from None
        del self.__keys[id(key)]

    def __iter__(self) -> Iterator[K]:
        return iter(list(self.__keys.values()))

    def __len__(self) -> int:
        return len(self.__keys)

    def __repr__(self) -> str:
        return f'IdentityDict({list(self.items())!r})'

#===============================================================================
#===============================================================================
