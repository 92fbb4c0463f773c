"""Route pattern compiler for ``:param`` style paths.

Compiles patterns such as ``/blog/:id``, ``/files/:path*`` or
``/user(.html)?`` into anchored regular expressions.  Semantics follow the
path-to-regexp 1.x defaults used by single-page application routers:

- ``:name`` captures one segment, ``:name(\\d+)`` uses a custom pattern
- modifiers ``?`` (optional), ``*`` (zero or more), ``+`` (one or more)
- ``(...)`` is an unnamed capture group, a lone ``*`` matches anything
- matching is case-insensitive, anchored at the end, and tolerates a
  single trailing ``/`` (non-strict)

Public API::

    from wren.routes.pattern import compile_path, is_dynamic_route

    compile_path("/blog/:id").match("/blog/1")   # {"id": "1"}
    is_dynamic_route("/blog/:id")                # True
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TypeAlias

# Group 1: escaped char.  Groups 2-7: prefix, name, custom pattern,
# unnamed group, modifier, lone asterisk.
_TOKEN_RE = re.compile(
    r"(\\.)"
    r"|([/.])?(?:(?:\:(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?|(\*))"
)

_ESCAPE_STRING_RE = re.compile(r"([.+*?=^!:${}()\[\]|/\\])")
_ESCAPE_GROUP_RE = re.compile(r"([=!:$/()])")

_DEFAULT_DELIMITER = "/"


@dataclass(frozen=True, slots=True)
class PathToken:
    """A parameter token parsed from a route pattern.

    Attributes:
        name: Parameter name, or a positional index for unnamed groups.
        prefix: ``/`` or ``.`` preceding the parameter, or empty.
        delimiter: Segment delimiter the default pattern stops at.
        optional: True for ``?`` and ``*`` modifiers.
        repeat: True for ``+`` and ``*`` modifiers.
        partial: True when the parameter is followed by a literal that is
            not its own prefix (e.g. ``/:a-:b``).
        asterisk: True for a lone ``*`` wildcard.
        pattern: Regular expression body for the captured value.

    """

    name: str | int
    prefix: str
    delimiter: str
    optional: bool
    repeat: bool
    partial: bool
    asterisk: bool
    pattern: str


Token: TypeAlias = str | PathToken


def _escape_string(value: str) -> str:
    return _ESCAPE_STRING_RE.sub(r"\\\1", value)


def _escape_group(value: str) -> str:
    return _ESCAPE_GROUP_RE.sub(r"\\\1", value)


def parse_path(path: str) -> list[Token]:
    """Split a route pattern into literal strings and parameter tokens.

    ``/blog/:id``      -> ``["/blog", PathToken(name="id", prefix="/", ...)]``
    ``/user(.html)?``  -> ``["/user", PathToken(name=0, optional=True, ...)]``

    """
    tokens: list[Token] = []
    key = 0
    index = 0
    literal = ""

    for m in _TOKEN_RE.finditer(path):
        literal += path[index:m.start()]
        index = m.end()

        escaped, prefix, name, capture, group, modifier, asterisk = m.groups()
        if escaped:
            literal += escaped[1]
            continue

        following = path[index] if index < len(path) else None

        if literal:
            tokens.append(literal)
            literal = ""

        if name is None:
            token_name: str | int = key
            key += 1
        else:
            token_name = name

        delimiter = prefix or _DEFAULT_DELIMITER
        body = capture or group
        if body:
            pattern = _escape_group(body)
        elif asterisk:
            pattern = ".*"
        else:
            pattern = f"[^{_escape_string(delimiter)}]+?"

        tokens.append(PathToken(
            name=token_name,
            prefix=prefix or "",
            delimiter=delimiter,
            optional=modifier in ("?", "*"),
            repeat=modifier in ("+", "*"),
            partial=prefix is not None and following is not None and following != prefix,
            asterisk=bool(asterisk),
            pattern=pattern,
        ))

    if index < len(path):
        literal += path[index:]
    if literal:
        tokens.append(literal)

    return tokens


def _tokens_to_regex(tokens: list[Token]) -> str:
    route = ""
    for token in tokens:
        if isinstance(token, str):
            route += _escape_string(token)
            continue

        prefix = _escape_string(token.prefix)
        capture = f"(?:{token.pattern})"
        if token.repeat:
            capture += f"(?:{prefix}{capture})*"
        if token.optional:
            if not token.partial:
                capture = f"(?:{prefix}({capture}))?"
            else:
                capture = f"{prefix}({capture})?"
        else:
            capture = f"{prefix}({capture})"
        route += capture

    delimiter = _escape_string(_DEFAULT_DELIMITER)
    if route.endswith(delimiter):
        route = route[: -len(delimiter)]
    # Non-strict: one trailing delimiter is allowed, anchored at the end.
    return f"^{route}(?:{delimiter}(?=\\Z))?\\Z"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled route pattern.

    Attributes:
        source: The original route pattern.
        regex: Compiled, anchored, case-insensitive expression.
        keys: Parameter tokens in capture-group order.

    """

    source: str
    regex: re.Pattern[str]
    keys: tuple[PathToken, ...]

    def match(self, path: str) -> dict[str | int, str | None] | None:
        """Match a concrete URL path, returning captured params or *None*."""
        m = self.regex.match(path)
        if m is None:
            return None
        return {key.name: value for key, value in zip(self.keys, m.groups(), strict=True)}


@lru_cache(maxsize=512)
def compile_path(path: str) -> PathPattern:
    """Compile a route pattern into a :class:`PathPattern`.

    Results are cached; patterns are immutable once compiled.

    Raises:
        re.error: If a custom parameter pattern is not a valid expression.

    """
    tokens = parse_path(path)
    keys = tuple(t for t in tokens if isinstance(t, PathToken))
    regex = re.compile(_tokens_to_regex(tokens), re.IGNORECASE)
    return PathPattern(source=path, regex=regex, keys=keys)


def is_dynamic_route(path: str | None) -> bool:
    """Return True if any ``/``-delimited segment of *path* starts with ``:``.

    ``/blog/:id``  -> True
    ``/about``     -> False
    ``None``       -> False

    """
    if not path:
        return False
    return any(segment.startswith(":") for segment in path.split("/"))
