"""
Call identifier minting for Callid Mapper.

Identifiers have the form ``<prefix>@<n>`` where ``n`` comes from a
monotonically increasing counter that is never reset.
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

import threading

ID_SEPARATOR = "@"


class IdCounter:
    """Monotonic counter with an atomic increment."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The last number handed out (0 before the first ``next()``)."""
        return self._value

    def next(self) -> int:
        """
        Increment the counter and return the new value.

        Returns:
            int: A number never returned before by this counter
        """
        with self._lock:
            self._value += 1
            return self._value


_process_counter = IdCounter()


def process_counter() -> IdCounter:
    """
    Get the counter shared by every mapper in this process.

    Returns:
        IdCounter: The process-wide counter
    """
    return _process_counter


def make_prefix(prefix: str) -> str:
    """Append the separator to a raw prefix, e.g. ``"TC"`` -> ``"TC@"``."""
    return f"{prefix}{ID_SEPARATOR}"


def format_call_id(prefix: str, number: int) -> str:
    """
    Build a call identifier.

    Args:
        prefix: Identifier prefix, already ending with the separator
        number: Counter value

    Returns:
        str: Identifier in format "<prefix><number>"
    """
    return f"{prefix}{number}"
