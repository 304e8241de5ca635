"""Introspection of the headers htmx sends with every request.

htmx marks its requests with ``HX-*`` headers. Handlers use them to decide
between a full page and a fragment:

    details = HtmxDetails.from_headers(request.headers)
    if details:
        return render(todo_rows(store.list()))   # fragment for htmx
    return render_document(index_page(store))    # full page load

Header reference:
    HX-Request                  "true" on every htmx request
    HX-Boosted                  "true" if the element had hx-boost
    HX-Target                   id of the target element, if any
    HX-Trigger                  id of the element that triggered the request
    HX-Trigger-Name             name of the triggering element
    HX-Current-URL              browser URL when the request was made
    HX-Prompt                   user response to hx-prompt
    HX-History-Restore-Request  "true" on history cache misses

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


def _flag(raw: str | None) -> bool:
    return raw is not None and raw.strip().lower() == "true"


@dataclass(frozen=True, slots=True)
class HtmxDetails:
    """Parsed htmx request headers. Truthy only for htmx requests."""

    request: bool = False
    boosted: bool = False
    target: str | None = None
    trigger: str | None = None
    trigger_name: str | None = None
    current_url: str | None = None
    prompt: str | None = None
    history_restore_request: bool = False

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> HtmxDetails:
        """Build from any header mapping; header names match case-insensitively."""
        lowered = {key.lower(): value for key, value in headers.items()}
        get = lowered.get
        return cls(
            request=_flag(get("hx-request")),
            boosted=_flag(get("hx-boosted")),
            target=get("hx-target") or None,
            trigger=get("hx-trigger") or None,
            trigger_name=get("hx-trigger-name") or None,
            current_url=get("hx-current-url") or None,
            prompt=get("hx-prompt") or None,
            history_restore_request=_flag(get("hx-history-restore-request")),
        )

    def __bool__(self) -> bool:
        return self.request


__all__ = ["HtmxDetails"]
