"""htmx attribute registry and helpers.

Two ways to get an attribute:

- Typed helpers: ``hx_get("/api/todos")``, ``hx_boost(True)``, ``hx_validate()``.
- By name: ``make("get", "/api/todos")``, ``make("hx-swap-oob", "true")``.

Both go through the same :data:`HTMX_ATTRIBUTES` table, so the wire keys
cannot drift between them.

"""

from htmxkit.attributes.helpers import (
    hx_boost,
    hx_confirm,
    hx_delete,
    hx_disabled_elt,
    hx_disinherit,
    hx_encoding,
    hx_ext,
    hx_get,
    hx_headers,
    hx_include,
    hx_indicator,
    hx_params,
    hx_patch,
    hx_post,
    hx_preserve,
    hx_prompt,
    hx_push_url,
    hx_put,
    hx_replace_url,
    hx_select,
    hx_select_oob,
    hx_sse,
    hx_swap,
    hx_swap_oob,
    hx_sync,
    hx_target,
    hx_trigger,
    hx_validate,
    hx_vals,
    hx_ws,
)
from htmxkit.attributes.registry import (
    HTMX_ATTRIBUTES,
    AttributeSpec,
    ValueRule,
    lookup,
    make,
    names,
)

__all__ = [
    "HTMX_ATTRIBUTES",
    "AttributeSpec",
    "ValueRule",
    "hx_boost",
    "hx_confirm",
    "hx_delete",
    "hx_disabled_elt",
    "hx_disinherit",
    "hx_encoding",
    "hx_ext",
    "hx_get",
    "hx_headers",
    "hx_include",
    "hx_indicator",
    "hx_params",
    "hx_patch",
    "hx_post",
    "hx_preserve",
    "hx_prompt",
    "hx_push_url",
    "hx_put",
    "hx_replace_url",
    "hx_select",
    "hx_select_oob",
    "hx_sse",
    "hx_swap",
    "hx_swap_oob",
    "hx_sync",
    "hx_target",
    "hx_trigger",
    "hx_validate",
    "hx_vals",
    "hx_ws",
    "lookup",
    "make",
    "names",
]
