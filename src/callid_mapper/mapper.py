"""
Map live call objects to unique string IDs.

IDs are generated when a call is added and handed to external callers in
place of the call object itself. Every operation except the two ID
predicates must run on the mapper's designated thread.
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

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from ._bimap import BiMap
from ._ids import IdCounter, format_call_id, make_prefix, process_counter
from ._thread import ThreadChecker
from .config import SCOPE_PROCESS, MapperConfig

tracer = trace.get_tracer(__name__)


class CallIdMapper:
    """
    Bidirectional registry of call ID <-> call object.

    Args:
        prefix: Raw ID prefix; the "@" separator is appended
        counter: ID counter (default: a fresh per-mapper counter)
        thread_checker: Designated-thread capability (default: main thread)

    Raises:
        ThreadAffinityError: If constructed off the designated thread
    """

    def __init__(
        self,
        prefix: str,
        *,
        counter: Optional[IdCounter] = None,
        thread_checker: Optional[ThreadChecker] = None,
    ):
        self._thread_checker = thread_checker or ThreadChecker()
        self._thread_checker.check()

        # Calls are bound by identity; they may be unhashable or compare equal.
        self._calls: BiMap[str, Any] = BiMap(value_key=id)
        self._prefix = make_prefix(prefix)
        self._counter = counter if counter is not None else IdCounter()

    @classmethod
    def from_config(
        cls,
        config: Optional[MapperConfig] = None,
        thread_checker: Optional[ThreadChecker] = None,
    ) -> "CallIdMapper":
        """Build a mapper from a MapperConfig (default: read from the environment)."""
        config = config or MapperConfig.from_env()
        counter = process_counter() if config.counter_scope == SCOPE_PROCESS else None
        return cls(config.prefix, counter=counter, thread_checker=thread_checker)

    @property
    def prefix(self) -> str:
        """The ID prefix including the separator, e.g. ``"TC@"``."""
        return self._prefix

    def __len__(self) -> int:
        return len(self._calls)

    @contextmanager
    def _span(self, operation: str) -> Iterator[trace.Span]:
        with tracer.start_as_current_span(f"callid.{operation}") as span:
            span.set_attribute("callid.prefix", self._prefix)
            try:
                self._thread_checker.check()
                yield span
                span.set_attribute("callid.registry_size", len(self._calls))
                span.set_status(Status(StatusCode.OK))
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                raise

    def replace_call(self, new_call: Any, call_to_replace: Any) -> Optional[str]:
        """
        Rebind the ID of ``call_to_replace`` to ``new_call``.

        The old pair is removed before the new one is inserted. Nothing
        changes if ``call_to_replace`` is unbound or ``new_call`` is already
        bound to another ID.

        Returns:
            Optional[str]: The reused ID, or None if nothing was replaced
        """
        with self._span("replace_call") as span:
            call_id = self._calls.get_key(call_to_replace)
            if call_id is not None:
                span.set_attribute("callid.id", call_id)

            if new_call is call_to_replace and call_id is not None:
                span.set_attribute("callid.result", "unchanged")
                return call_id
            if call_id is None or new_call is None or self._calls.get_key(new_call) is not None:
                span.set_attribute("callid.result", "rejected")
                return None

            self._calls.remove(call_id)
            self._calls.put(call_id, new_call)
            span.set_attribute("callid.result", "replaced")
            return call_id

    def add_call(self, call: Any, call_id: Optional[str] = None) -> Optional[str]:
        """
        Bind ``call`` to ``call_id``, or to a newly generated ID.

        A duplicate ID or an already-registered call leaves the mapper unchanged.

        Returns:
            Optional[str]: The bound ID, or None if the call was not added
        """
        if call is None:
            return None

        with self._span("add_call") as span:
            if call_id is None:
                call_id = self._new_id()
            span.set_attribute("callid.id", call_id)

            added = self._calls.put(call_id, call)
            span.set_attribute("callid.result", "added" if added else "rejected")
            return call_id if added else None

    def remove_call(self, call: Any) -> bool:
        """Unbind whichever ID maps to ``call``."""
        if call is None:
            return False

        with self._span("remove_call") as span:
            call_id = self._calls.get_key(call)
            if call_id is not None:
                span.set_attribute("callid.id", call_id)
            removed = self._calls.remove_value(call)
            span.set_attribute("callid.result", "removed" if removed else "missing")
            return removed

    def remove_call_id(self, call_id: Optional[str]) -> bool:
        """Unbind ``call_id``; a no-op if it is not bound."""
        with self._span("remove_call_id") as span:
            if call_id is not None:
                span.set_attribute("callid.id", call_id)
            removed = self._calls.remove(call_id)
            span.set_attribute("callid.result", "removed" if removed else "missing")
            return removed

    def get_call_id(self, call: Any) -> Optional[str]:
        if call is None:
            return None
        self._thread_checker.check()
        return self._calls.get_key(call)

    def get_call(self, raw_id: Any) -> Optional[Any]:
        """
        Resolve an externally supplied token to a call.

        Anything that is not a string, or fails both ID predicates, resolves
        to None.
        """
        self._thread_checker.check()

        if not isinstance(raw_id, str):
            return None
        if not self.is_valid_call_id(raw_id) and not self.is_valid_conference_id(raw_id):
            return None

        return self._calls.get_value(raw_id)

    def clear(self) -> None:
        with self._span("clear"):
            self._calls.clear()

    def is_valid_call_id(self, call_id: Optional[str]) -> bool:
        # No thread check needed, the prefix never changes.
        return call_id is not None and call_id.startswith(self._prefix)

    def is_valid_conference_id(self, call_id: Optional[str]) -> bool:
        return call_id is not None

    def get_new_id(self) -> str:
        """
        Generate a new ID without binding it.

        Returns:
            str: ID in format "<prefix>@<n>"
        """
        self._thread_checker.check()
        return self._new_id()

    def _new_id(self) -> str:
        return format_call_id(self._prefix, self._counter.next())
