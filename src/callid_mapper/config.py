"""
Environment-driven configuration for Callid Mapper.

Reads ``CALLID_PREFIX`` and ``CALLID_COUNTER_SCOPE``.
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

import os
import warnings

DEFAULT_PREFIX = "TC"

SCOPE_INSTANCE = "instance"
SCOPE_PROCESS = "process"
COUNTER_SCOPES = (SCOPE_INSTANCE, SCOPE_PROCESS)

ENV_VARS = {
    "CALLID_PREFIX": "Call identifier prefix",
    "CALLID_COUNTER_SCOPE": "Identifier counter scope (instance|process)",
}


class MapperConfig:
    """Settings used to build a CallIdMapper."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, counter_scope: str = SCOPE_INSTANCE):
        if counter_scope not in COUNTER_SCOPES:
            raise ValueError(
                f"counter_scope must be one of {', '.join(COUNTER_SCOPES)}, got '{counter_scope}'"
            )
        self.prefix = prefix
        self.counter_scope = counter_scope

    @classmethod
    def from_env(cls) -> "MapperConfig":
        """
        Build a config from environment variables.

        An unknown ``CALLID_COUNTER_SCOPE`` falls back to "instance" with a warning.

        Returns:
            MapperConfig: The effective configuration
        """
        prefix = os.getenv("CALLID_PREFIX") or DEFAULT_PREFIX
        scope = (os.getenv("CALLID_COUNTER_SCOPE") or SCOPE_INSTANCE).strip().lower()

        if scope not in COUNTER_SCOPES:
            warnings.warn(
                f"Unknown CALLID_COUNTER_SCOPE '{scope}', using '{SCOPE_INSTANCE}'",
                UserWarning,
            )
            scope = SCOPE_INSTANCE

        return cls(prefix=prefix, counter_scope=scope)

    def __repr__(self) -> str:
        return f"MapperConfig(prefix={self.prefix!r}, counter_scope={self.counter_scope!r})"
