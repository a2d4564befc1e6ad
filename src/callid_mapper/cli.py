"""
Callid Mapper CLI - mint, validate and self-test call identifiers.
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
import sys
import warnings
from typing import List, Optional

import click

from . import __version__
from .config import ENV_VARS, MapperConfig
from .mapper import CallIdMapper


# ANSI color codes for terminal output
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    END = '\033[0m'


def print_status(message: str, status: str, details: str = "") -> None:
    """Print a formatted status message with color coding."""
    if status == "OK":
        status_color = Colors.GREEN
        status_symbol = "✅"
    elif status == "WARN":
        status_color = Colors.YELLOW
        status_symbol = "⚠️ "
    elif status == "FAIL":
        status_color = Colors.RED
        status_symbol = "❌"
    else:
        status_color = Colors.BLUE
        status_symbol = "ℹ️ "

    click.echo(f"{status_symbol} {Colors.BOLD}{message}{Colors.END}: {status_color}{status}{Colors.END}")
    if details:
        click.echo(f"   {Colors.CYAN}{details}{Colors.END}")


class PlaceholderCall:
    """Stand-in call object used by ``mint`` and ``doctor``."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"PlaceholderCall({self.name!r})"


def mint_ids(prefix: str, count: int) -> List[str]:
    """Register ``count`` placeholder calls and return their identifiers."""
    mapper = CallIdMapper(prefix)
    ids = []
    for i in range(count):
        call_id = mapper.add_call(PlaceholderCall(f"call-{i + 1}"))
        if call_id is not None:
            ids.append(call_id)
    return ids


def check_environment_variables() -> bool:
    """Report the configuration variables. Fails only on an unusable config."""
    print_status("Environment Variables", "INFO", "Checking Callid Mapper configuration...")

    for var, description in ENV_VARS.items():
        value = os.getenv(var)
        if value:
            print_status(f"  {var}", "OK", f"{description}: {value}")
        else:
            print_status(f"  {var}", "WARN", f"{description} not set, using default")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        config = MapperConfig.from_env()

    for warning in caught:
        print_status("  Configuration", "FAIL", str(warning.message))
    if caught:
        return False

    print_status("  Effective Config", "OK", repr(config))
    return True


def check_registry_roundtrip(prefix: Optional[str] = None) -> bool:
    """Exercise add, resolve, replace, remove and clear on a scratch mapper."""
    try:
        if prefix is None:
            # Config problems are reported by check_environment_variables.
            with warnings.catch_warnings():
                warnings.simplefilter("ignore")
                prefix = MapperConfig.from_env().prefix
        mapper = CallIdMapper(prefix)
        first, second = PlaceholderCall("first"), PlaceholderCall("second")

        call_id = mapper.add_call(first)
        ok = (
            call_id is not None
            and mapper.is_valid_call_id(call_id)
            and mapper.get_call(call_id) is first
            and mapper.replace_call(second, first) == call_id
            and mapper.get_call(call_id) is second
            and mapper.get_call_id(first) is None
            and mapper.remove_call(second)
            and mapper.get_call(call_id) is None
        )
        mapper.add_call(first)
        mapper.clear()
        ok = ok and len(mapper) == 0
    except Exception as e:
        print_status("Registry Self-Test", "FAIL", f"Unexpected error: {str(e)}")
        return False

    if ok:
        print_status("Registry Self-Test", "OK", f"Round trip passed for prefix '{mapper.prefix}'")
    else:
        print_status("Registry Self-Test", "FAIL", "Registry returned an unexpected result")
    return ok


@click.group()
@click.version_option(version=__version__, prog_name="callid")
def cli():
    """Callid Mapper - opaque identifiers for live call objects."""
    pass


@cli.command()
@click.option("--prefix", "-p", envvar="CALLID_PREFIX", default="TC", show_default=True,
              help="Identifier prefix (the '@' separator is appended)")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of identifiers to mint")
def mint(prefix: str, count: int):
    """Mint identifiers for COUNT placeholder calls."""
    for call_id in mint_ids(prefix, count):
        click.echo(call_id)


@cli.command()
@click.argument("call_id")
@click.option("--prefix", "-p", envvar="CALLID_PREFIX", default="TC", show_default=True,
              help="Identifier prefix (the '@' separator is appended)")
def check(call_id: str, prefix: str):
    """
    Validate CALL_ID against a prefix.

    Exits with status 1 if CALL_ID is not a valid call identifier.
    """
    mapper = CallIdMapper(prefix)
    valid_call = mapper.is_valid_call_id(call_id)

    print_status("Call ID", "OK" if valid_call else "FAIL",
                 f"'{call_id}' {'starts' if valid_call else 'does not start'} with '{mapper.prefix}'")
    print_status("Conference ID", "OK" if mapper.is_valid_conference_id(call_id) else "FAIL")

    if not valid_call:
        sys.exit(1)


@cli.command()
def doctor():
    """
    Run health checks for Callid Mapper configuration.

    Checks environment variables and runs a registry self-test.
    """
    click.echo(f"\n{Colors.BOLD}{Colors.BLUE}Callid Mapper Doctor{Colors.END}\n")

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Registry Self-Test", check_registry_roundtrip),
    ]

    results = []
    for check_name, check_func in checks:
        try:
            results.append((check_name, check_func()))
        except Exception as e:
            print_status(check_name, "FAIL", f"Unexpected error: {str(e)}")
            results.append((check_name, False))

    passed = sum(1 for _, result in results if result)
    total = len(results)

    if passed == total:
        click.echo(f"\n{Colors.GREEN}All checks passed ({passed}/{total}){Colors.END}")
        sys.exit(0)
    else:
        click.echo(f"\n{Colors.YELLOW}{passed}/{total} checks passed{Colors.END}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
