"""The htmx attribute catalogue.

Maps each logical behaviour name to its wire key and value rule. The wire
keys must match what the htmx client library looks for, so this table is
the single place they are spelled out.

The table is built once at import and exposed read-only through
``MappingProxyType``; lookups from any number of threads need no locking.

"""

from __future__ import annotations

import difflib
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from htmxkit.exceptions import UnknownAttributeError
from htmxkit.nodes.attributes import Attribute


class ValueRule(Enum):
    """How a behaviour turns caller input into an attribute value."""

    IDENTITY = "identity"  # str passed through verbatim, no validation
    BOOLEAN = "boolean"  # True -> "true", False -> "false"
    FIXED = "fixed"  # input ignored; always fixed_value


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """Definition of one htmx behaviour.

    Attributes:
        name: Logical name used with make() (``"swap_oob"``).
        key: Wire key emitted in markup (``"hx-swap-oob"``).
        rule: Value rule applied by build().
        fixed_value: Literal used by the FIXED rule.
    """

    name: str
    key: str
    rule: ValueRule = ValueRule.IDENTITY
    fixed_value: str = "true"

    def build(self, value: object = None) -> Attribute:
        """Apply the value rule and return the attribute.

        Raises:
            TypeError: If an IDENTITY behaviour gets a non-string or a
                BOOLEAN behaviour gets a non-bool.
        """
        if self.rule is ValueRule.FIXED:
            return Attribute(self.key, self.fixed_value)
        if self.rule is ValueRule.BOOLEAN:
            # Exact bool only; truthy non-bools are rejected.
            if not isinstance(value, bool):
                raise TypeError(f"{self.key} expects a bool, got {type(value).__name__}")
            return Attribute(self.key, "true" if value else "false")
        if not isinstance(value, str):
            raise TypeError(f"{self.key} expects a str, got {type(value).__name__}")
        return Attribute(self.key, value)


def _spec(name: str, rule: ValueRule = ValueRule.IDENTITY) -> AttributeSpec:
    return AttributeSpec(name=name, key="hx-" + name.replace("_", "-"), rule=rule)


_SPECS: tuple[AttributeSpec, ...] = (
    # Requests
    _spec("get"),
    _spec("post"),
    _spec("put"),
    _spec("delete"),
    _spec("patch"),
    # Targeting and swapping
    _spec("target"),
    _spec("swap"),
    _spec("swap_oob"),
    # Events
    _spec("trigger"),
    # Loading states
    _spec("indicator"),
    _spec("disabled_elt"),
    # Request configuration
    _spec("headers"),
    _spec("vals"),
    _spec("include"),
    _spec("params"),
    # Navigation and history
    _spec("boost", ValueRule.BOOLEAN),
    _spec("push_url"),
    _spec("replace_url"),
    # User interaction
    _spec("confirm"),
    _spec("prompt"),
    # Extensions and response selection
    _spec("ext"),
    _spec("select"),
    _spec("select_oob"),
    _spec("sync"),
    _spec("encoding"),
    _spec("validate", ValueRule.FIXED),
    # Server push
    _spec("sse"),
    _spec("ws"),
    _spec("preserve", ValueRule.FIXED),
    _spec("disinherit"),
)

HTMX_ATTRIBUTES: MappingProxyType[str, AttributeSpec] = MappingProxyType(
    {spec.name: spec for spec in _SPECS}
)
_BY_KEY: MappingProxyType[str, AttributeSpec] = MappingProxyType(
    {spec.key: spec for spec in _SPECS}
)


def lookup(name: str) -> AttributeSpec:
    """Resolve a behaviour by logical name or wire key.

    Accepts ``"swap_oob"``, ``"swap-oob"`` and ``"hx-swap-oob"`` alike.

    Raises:
        UnknownAttributeError: If nothing matches; carries a close-match
            suggestion when one exists.
        TypeError: If *name* is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"attribute name must be a str, got {type(name).__name__}")
    normalized = name.strip().lower()
    spec = _BY_KEY.get(normalized)
    if spec is None:
        spec = HTMX_ATTRIBUTES.get(normalized.replace("-", "_"))
    if spec is None:
        candidates = difflib.get_close_matches(
            normalized.removeprefix("hx-").replace("-", "_"), list(HTMX_ATTRIBUTES), n=1
        )
        raise UnknownAttributeError(name, candidates[0] if candidates else None)
    return spec


def make(name: str, value: object = None) -> Attribute:
    """Build the attribute for behaviour *name* with *value*.

    Example:
        >>> make("boost", True)
        Attribute(key='hx-boost', value='true')
        >>> make("validate")
        Attribute(key='hx-validate', value='true')
    """
    return lookup(name).build(value)


def names() -> Iterator[str]:
    """Logical names in catalogue order."""
    return iter(HTMX_ATTRIBUTES)


__all__ = [
    "HTMX_ATTRIBUTES",
    "AttributeSpec",
    "ValueRule",
    "lookup",
    "make",
    "names",
]
