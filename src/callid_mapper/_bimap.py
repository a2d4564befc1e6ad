"""
A very basic bidirectional map.

Keeps a forward (key -> value) and a reverse (value -> key) dict in lockstep
so either side can be resolved in O(1). ``None`` is never stored on either side.
"""

# Copyright 2025 Callid Mapper Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _same_value(value: Any) -> Hashable:
    return value


class BiMap(Generic[K, V]):
    """
    One-to-one map queryable by key or by value.

    Args:
        value_key: Maps a value to the key of the reverse dict (default: the
            value itself). Pass ``id`` to bind values by identity, which also
            accepts unhashable values.
    """

    def __init__(self, value_key: Optional[Callable[[V], Hashable]] = None):
        self._value_key = value_key or _same_value
        self._primary: Dict[K, V] = {}
        self._secondary: Dict[Hashable, K] = {}

    def put(self, key: Optional[K], value: Optional[V]) -> bool:
        """
        Bind ``key`` to ``value`` if neither side is already bound.

        Never overwrites an existing pair.

        Returns:
            bool: True if the pair was inserted, False if it was rejected
        """
        if key is None or value is None or key in self._primary:
            return False

        value_key = self._value_key(value)
        if value_key in self._secondary:
            return False

        self._primary[key] = value
        self._secondary[value_key] = key
        return True

    def remove(self, key: Optional[K]) -> bool:
        """Unbind ``key`` on both sides. Returns False if it was not bound."""
        if key is None or key not in self._primary:
            return False

        value = self._primary.pop(key)
        del self._secondary[self._value_key(value)]
        return True

    def remove_value(self, value: Optional[V]) -> bool:
        """Unbind whichever key maps to ``value``."""
        if value is None:
            return False
        return self.remove(self.get_key(value))

    def get_value(self, key: Optional[K]) -> Optional[V]:
        if key is None:
            return None
        return self._primary.get(key)

    def get_key(self, value: Optional[V]) -> Optional[K]:
        if value is None:
            return None
        return self._secondary.get(self._value_key(value))

    def clear(self) -> None:
        self._primary.clear()
        self._secondary.clear()

    def __len__(self) -> int:
        return len(self._primary)

    def __contains__(self, key: object) -> bool:
        return key in self._primary
