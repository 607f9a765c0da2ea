"""Tracker-parameter removal for pasted links."""

from __future__ import annotations

import logging
from urllib.parse import unquote_plus, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

# Query parameters used only for marketing / analytics attribution
TRACKING_PARAMS: frozenset[str] = frozenset(
    {
        "utm_source",
        "utm_medium",
        "utm_campaign",
        "utm_term",
        "utm_content",
        "gclid",
        "fbclid",
        "mc_cid",
        "mc_eid",
        "igshid",
        "si",
    },
)


def _keep_param(pair: str) -> bool:
    name, sep, value = pair.partition("=")
    if not sep or not value:
        return False
    return unquote_plus(name).lower() not in TRACKING_PARAMS


def strip_trackers(url: str) -> str:
    """Return *url* without tracking parameters or parameters with empty values.

    Surviving parameters keep their original spelling and order.  When no
    parameter survives the ``?`` is dropped as well.  Anything that does not
    parse as a URL is returned unchanged.
    """
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        logger.debug("Not a parseable URL %r: %s", url, exc)
        return url

    if "?" not in url.split("#", 1)[0]:
        return url

    kept = [pair for pair in parts.query.split("&") if _keep_param(pair)]
    cleaned = urlunsplit(parts._replace(query="&".join(kept)))
    # urlunsplit drops an empty fragment
    if url.endswith("#") and not parts.fragment:
        cleaned += "#"
    return cleaned
