"""
Callid Mapper - map live call objects to opaque, prefix-scoped string IDs.

Example:
    mapper = CallIdMapper("TC")
    call_id = mapper.add_call(call)      # "TC@1"
    mapper.get_call(call_id) is call     # True
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

from ._bimap import BiMap
from ._ids import ID_SEPARATOR, IdCounter, process_counter
from ._thread import ThreadAffinityError, ThreadChecker
from .config import MapperConfig
from .mapper import CallIdMapper

__version__ = "0.1.0"

__all__ = [
    "BiMap",
    "CallIdMapper",
    "ID_SEPARATOR",
    "IdCounter",
    "MapperConfig",
    "ThreadAffinityError",
    "ThreadChecker",
    "process_counter",
]
