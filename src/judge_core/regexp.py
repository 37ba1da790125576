"""Best-effort translation of server-side (Ruby-dialect) patterns.

The server serialises a pattern as ``(?flags-flags:body)``, e.g.
``(?i-mx:\\A[a-z]+\\z)``. :func:`convert_pattern` unwraps that envelope and
rewrites the handful of constructs whose spelling differs in Python.

What is translated:

- enabled flags: ``i`` → ``re.IGNORECASE``, ``m`` (dot matches newline) →
  ``re.DOTALL``, ``x`` → ``re.VERBOSE``;
- ``^`` and ``$`` always anchor at line boundaries, so ``re.MULTILINE`` is
  always on;
- ``\\z`` → ``\\Z``; ``\\h``/``\\H`` → hex digit classes;
- named groups ``(?<name>...)`` → ``(?P<name>...)`` and ``\\k<name>`` →
  ``(?P=name)``.

Known limits: ``\\Z`` keeps Python meaning (absolute end, no trailing newline
allowance); POSIX bracket classes, ``\\G``, ``\\R``, ``\\X``, ``\\p{...}``
properties, conditionals and subexpression calls are not translated and
either fail to compile (:class:`PatternTranslationError`) or match
differently. Nothing beyond the list above is approximated.
"""

from __future__ import annotations

import functools
import re

from .primitives.exceptions import PatternTranslationError

_ENVELOPE = re.compile(r"\A\(\?([mix]*)(?:-([mix]*))?:(.*)\)\Z", re.DOTALL)
_NAMED_GROUP = re.compile(r"\(\?<(?![=!])(\w+)>")
_BACKREFERENCE = re.compile(r"k<(\w+)>")

_FLAGS = {"i": re.IGNORECASE, "m": re.DOTALL, "x": re.VERBOSE}

_ESCAPES = {
    "z": (r"\Z", r"\Z"),
    "h": ("[0-9a-fA-F]", "0-9a-fA-F"),
    "H": ("[^0-9a-fA-F]", None),
}


def _split_envelope(source: str) -> tuple[str, int]:
    match = _ENVELOPE.match(source)
    if match is None:
        return source, 0
    enabled, _disabled, body = match.groups()
    flags = 0
    for flag in enabled:
        flags |= _FLAGS[flag]
    return body, flags


def _rewrite(body: str, source: str) -> str:
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            backref = _BACKREFERENCE.match(body, i + 1)
            if backref is not None and not in_class:
                out.append(f"(?P={backref.group(1)})")
                i = backref.end()
                continue
            if nxt in _ESCAPES:
                outside, inside = _ESCAPES[nxt]
                replacement = inside if in_class else outside
                if replacement is None:
                    raise PatternTranslationError(source, f"\\{nxt} inside a class")
                out.append(replacement)
            else:
                out.append(body[i : i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            # A leading ']' (or '^]') is a literal member, not the class end.
            if body.startswith("^]", i + 1):
                out.append("[^]")
                i += 3
                continue
            if body.startswith("]", i + 1):
                out.append("[]")
                i += 2
                continue
        elif char == "(":
            named = _NAMED_GROUP.match(body, i)
            if named is not None:
                out.append(f"(?P<{named.group(1)}>")
                i = named.end()
                continue
        out.append(char)
        i += 1
    return "".join(out)


@functools.lru_cache(maxsize=256)
def convert_pattern(source: str) -> re.Pattern[str]:
    """Compile a server-side pattern into a Python regex.

    Raises:
        PatternTranslationError: If the translated pattern does not compile.
    """
    body, flags = _split_envelope(source)
    translated = _rewrite(body, source)
    try:
        return re.compile(translated, flags | re.MULTILINE)
    except re.error as exc:
        raise PatternTranslationError(source, str(exc)) from exc


def matches(source: str, value: str) -> bool:
    """Return whether *value* contains a match for the pattern *source*."""
    return convert_pattern(source).search(value) is not None
