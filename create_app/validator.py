"""npm package-name validation.

Implements the naming rules the npm registry applies to package names.  The
result distinguishes hard errors (the name was never valid) from warnings
(the name was valid for old packages but is no longer accepted for new ones).
A new project must be free of both.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import quote

from create_app.errors import InvalidNameError

MAX_NAME_LENGTH = 214

BLACKLISTED_NAMES: frozenset[str] = frozenset({"node_modules", "favicon.ico"})

# Node.js core modules.  Publishing under one of these names shadows the
# built-in for anyone who installs it.
NODE_BUILTINS: frozenset[str] = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

_SPECIAL_CHARS = re.compile(r"[~'!()*]")
_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")

# Characters JavaScript's encodeURIComponent leaves untouched.
_URI_SAFE = "-_.!~*'()"


@dataclass
class NameValidation:
    """Outcome of :func:`validate_package_name`."""

    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors


def _is_url_friendly(value: str) -> bool:
    return quote(value, safe=_URI_SAFE) == value


def validate_package_name(name: str) -> NameValidation:
    """Check *name* against the npm registry naming rules.

    Examples::

        validate_package_name("my-app").valid_for_new_packages   -> True
        validate_package_name("MyApp").warnings
            -> ["name can no longer contain capital letters"]
        validate_package_name(".app").errors
            -> ["name cannot start with a period"]
    """
    result = NameValidation(name=name)
    errors = result.errors
    warnings = result.warnings

    if not name:
        errors.append("name length must be greater than zero")

    if name.startswith("."):
        errors.append("name cannot start with a period")

    if name.startswith("_"):
        errors.append("name cannot start with an underscore")

    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in BLACKLISTED_NAMES:
        errors.append(f"{name.lower()} is a blacklisted name")

    if name.lower() in NODE_BUILTINS:
        warnings.append(f"{name.lower()} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )

    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")

    if _SPECIAL_CHARS.search(name.split("/")[-1]):
        warnings.append(
            "name can no longer contain special characters (\"~'!()*\")"
        )

    if name and not _is_url_friendly(name):
        match = _SCOPED_NAME.match(name)
        scoped_ok = (
            match is not None
            and match.group(1) is not None
            and _is_url_friendly(match.group(1))
            and _is_url_friendly(match.group(2))
        )
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return result


def check_app_name(name: str, reserved: Iterable[str] = ()) -> NameValidation:
    """Validate *name* for a brand-new project.

    Args:
        name: Candidate project name (the target directory's base name).
        reserved: Dependency names declared by the template.  A project may
            not share a name with one of its own dependencies.

    Returns:
        The (clean) validation result.

    Raises:
        InvalidNameError: If the name has any error or warning, or is reserved.
    """
    result = validate_package_name(name)
    if not result.valid_for_new_packages:
        raise InvalidNameError(name, result.errors, result.warnings)

    reserved_names = sorted(set(reserved))
    if name in reserved_names:
        raise InvalidNameError(
            name,
            errors=[
                f'"{name}" is a dependency of the template; choose a name '
                f"other than: {', '.join(reserved_names)}"
            ],
        )
    return result
