"""
Tests for the bidirectional map.
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

import pytest

from callid_mapper._bimap import BiMap


@pytest.fixture
def bimap():
    return BiMap()


def test_put_binds_both_directions(bimap):
    """Test that a successful put is visible from either side."""
    assert bimap.put("a", 1) is True

    assert bimap.get_value("a") == 1
    assert bimap.get_key(1) == "a"
    assert len(bimap) == 1
    assert "a" in bimap


def test_put_rejects_duplicate_key(bimap):
    """Test that an existing key is never overwritten."""
    bimap.put("a", 1)

    assert bimap.put("a", 2) is False
    assert bimap.get_value("a") == 1
    assert bimap.get_key(2) is None
    assert len(bimap) == 1


def test_put_rejects_duplicate_value(bimap):
    """Test that a value can only be bound to one key."""
    bimap.put("a", 1)

    assert bimap.put("b", 1) is False
    assert bimap.get_key(1) == "a"
    assert bimap.get_value("b") is None


@pytest.mark.parametrize("key, value", [(None, 1), ("a", None), (None, None)])
def test_put_rejects_none(bimap, key, value):
    """Test that None is never stored on either side."""
    assert bimap.put(key, value) is False
    assert len(bimap) == 0


def test_remove_clears_reverse_entry(bimap):
    """Test that removing a key leaves no dangling reverse entry."""
    bimap.put("a", 1)

    assert bimap.remove("a") is True
    assert bimap.get_value("a") is None
    assert bimap.get_key(1) is None
    assert len(bimap) == 0

    # Both sides are free again
    assert bimap.put("b", 1) is True
    assert bimap.put("a", 2) is True


def test_remove_missing_key(bimap):
    """Test that removing an absent or None key is a quiet no-op."""
    bimap.put("a", 1)

    assert bimap.remove("missing") is False
    assert bimap.remove(None) is False
    assert bimap.get_value("a") == 1


def test_remove_value(bimap):
    """Test removal by value."""
    bimap.put("a", 1)
    bimap.put("b", 2)

    assert bimap.remove_value(1) is True
    assert bimap.get_value("a") is None
    assert bimap.get_value("b") == 2

    assert bimap.remove_value(1) is False
    assert bimap.remove_value(None) is False


def test_lookups_of_unbound(bimap):
    """Test that unbound lookups return None rather than raising."""
    assert bimap.get_value("nope") is None
    assert bimap.get_key("nope") is None
    assert bimap.get_value(None) is None
    assert bimap.get_key(None) is None


def test_clear(bimap):
    """Test that clear empties both directions."""
    bimap.put("a", 1)
    bimap.put("b", 2)

    bimap.clear()

    assert len(bimap) == 0
    assert bimap.get_value("a") is None
    assert bimap.get_key(2) is None


def test_default_binds_equal_values_as_one():
    """Test that without a value_key, equal values share one reverse slot."""
    bimap = BiMap()

    assert bimap.put("x", (1, 2)) is True
    assert bimap.put("y", (1, 2)) is False


def test_identity_value_key_separates_equal_values():
    """Test that value_key=id binds equal but distinct values separately."""
    bimap = BiMap(value_key=id)
    first, second = [1, 2], [1, 2]

    assert bimap.put("x", first) is True
    assert bimap.put("y", second) is True
    assert bimap.put("z", first) is False
    assert bimap.get_key(first) == "x"
    assert bimap.get_key(second) == "y"
    assert bimap.get_key([1, 2]) is None


def test_identity_value_key_remove():
    """Test that removal by key or value clears the identity-keyed reverse side."""
    bimap = BiMap(value_key=id)
    first, second = {"n": 1}, {"n": 1}
    bimap.put("x", first)
    bimap.put("y", second)

    assert bimap.remove("x") is True
    assert bimap.get_key(first) is None
    assert bimap.remove_value(second) is True
    assert bimap.get_key(second) is None
    assert len(bimap) == 0


if __name__ == "__main__":
    pytest.main([__file__])
