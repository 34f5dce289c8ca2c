"""Layered style resolution: defaults, draw-call substitutions, feature overrides.

A rendered primitive gets its style from three ordered layers:

* the per-kind default table (``DefaultStyles``),
* a draw-call list of substitutions, each a partial ``{kind: {attr: value}}``
  map merged over the defaults,
* the feature's own list of flat ``{attr: value}`` overrides.

Substitutions and overrides are paired positionally, so a feature can be
drawn several times (e.g. once as a fill and once as an outline).
"""

import logging
from collections.abc import Mapping
from itertools import zip_longest
from types import MappingProxyType

from .constants import DEFAULT_FEATURE_STYLES
from .models import GeometryKind

logger = logging.getLogger(__name__)


class StyleError(ValueError):
    """A style entry that is not a usable attribute map."""


def validate_style_map(entry) -> dict:
    """Return a copy of a flat ``{attribute: value}`` map or raise StyleError."""
    if not isinstance(entry, Mapping):
        raise StyleError(f"style must be a mapping, got {type(entry).__name__}")
    bad = [k for k in entry if not isinstance(k, str)]
    if bad:
        raise StyleError(f"style attribute names must be strings, got {bad!r}")
    return dict(entry)


def validate_substitution(entry) -> dict:
    """Return a ``{kind name: style map}`` copy of a substitution entry.

    Keys that are not geometry kinds are dropped.  The value for a known
    kind must itself be a style map.
    """
    if not isinstance(entry, Mapping):
        raise StyleError(f"substitution must be a mapping, got {type(entry).__name__}")
    result = {}
    for key, value in entry.items():
        if GeometryKind.lookup(key) is None:
            continue
        try:
            result[key] = validate_style_map(value)
        except StyleError as e:
            raise StyleError(f"{key}: {e}") from e
    return result


class DefaultStyles(Mapping):
    """Read-only per-kind default style table."""

    def __init__(self, table=None):
        table = DEFAULT_FEATURE_STYLES if table is None else table
        self._table = MappingProxyType({
            kind: MappingProxyType(validate_style_map(style))
            for kind, style in table.items()
        })

    def __getitem__(self, kind):
        if isinstance(kind, GeometryKind):
            kind = kind.value
        return self._table[kind]

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return f"DefaultStyles({dict(self._table)!r})"

    def get_style(self, kind) -> dict:
        """Default attributes for ``kind``, or an empty map for unknown kinds."""
        try:
            return dict(self[kind])
        except KeyError:
            return {}

    def with_overrides(self, table) -> 'DefaultStyles':
        """Return a new table with per-kind attributes merged over this one."""
        merged = {kind: dict(style) for kind, style in self._table.items()}
        for kind, style in validate_substitution(table).items():
            merged[kind] = {**merged.get(kind, {}), **style}
        return DefaultStyles(merged)


DEFAULT_STYLES = DefaultStyles()


def resolve_styles(kind, defaults: DefaultStyles = DEFAULT_STYLES,
                   substitutions=None, overrides=None) -> list[dict]:
    """Merge the three style layers into one style per requested rendering.

    Returns ``max(len(bases), len(overrides))`` new dicts, where ``bases`` is
    one default-merged style per valid substitution (or just the default
    when there are none).  Overrides win over substitutions, which win
    over defaults.  Malformed entries are logged and skipped.
    """
    kind = GeometryKind(kind)
    default = defaults.get_style(kind)

    bases = []
    for entry in substitutions or ():
        try:
            subs = validate_substitution(entry)
        except StyleError as e:
            logger.warning(f"Skipping invalid style substitution: {e}")
            continue
        bases.append({**default, **subs.get(kind.value, {})})
    if not bases:
        bases = [default]

    flat = []
    for entry in overrides or ():
        try:
            flat.append(validate_style_map(entry))
        except StyleError as e:
            logger.warning(f"Ignoring invalid feature style: {e}")
            flat.append({})

    return [
        {**(base if base is not None else default), **(override or {})}
        for override, base in zip_longest(flat, bases)
    ]
