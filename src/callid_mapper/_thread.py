"""
Single-writer thread contract for call registries.

A ThreadChecker is bound to one designated thread (the process main thread
unless told otherwise). Registry operations call ``check()`` first; running
anywhere else is a programming error and raises ThreadAffinityError.
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
from typing import Optional


class ThreadAffinityError(Exception):
    """Raised when a registry operation runs off its designated thread."""
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Must be called on thread '{expected}', not '{actual}'")


class ThreadChecker:
    """
    Capability bound to the thread allowed to touch a registry.

    Args:
        owner: The designated thread (default: ``threading.main_thread()``)
    """

    def __init__(self, owner: Optional[threading.Thread] = None):
        self._owner = owner if owner is not None else threading.main_thread()

    @property
    def owner(self) -> threading.Thread:
        return self._owner

    def is_owner(self) -> bool:
        """Return True if the calling thread is the designated one."""
        return threading.current_thread() is self._owner

    def check(self) -> None:
        """
        Assert that the calling thread is the designated one.

        Raises:
            ThreadAffinityError: If called from any other thread
        """
        if not self.is_owner():
            raise ThreadAffinityError(self._owner.name, threading.current_thread().name)

    @classmethod
    def for_current_thread(cls) -> "ThreadChecker":
        """Bind a checker to whichever thread is calling."""
        return cls(threading.current_thread())
