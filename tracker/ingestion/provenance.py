"""Source provenance helpers: confidence inference and URL validation."""

from __future__ import annotations

from urllib.parse import urlparse

from tracker.schemas.records import Confidence

# Government sources and official records: any host with a "gov" label
# (fec.gov, crsreports.congress.gov, gov.uk).
HIGH_CONFIDENCE_LABEL: str = "gov"

# Research institutions and established watchdogs.
MEDIUM_CONFIDENCE_DOMAINS: tuple[str, ...] = (
    "brennancenter.org",
    "opensecrets.org",
    "cpj.org",
    "aclu.org",
)


def _hostname(url: str) -> str:
    try:
        return (urlparse((url or "").strip()).hostname or "").lower()
    except ValueError:
        return ""


def infer_confidence(source_url: str) -> Confidence:
    """Infer a confidence level from the kind of source a URL points at.

    Government → high; known research/watchdog organisations → medium;
    everything else (news articles, blogs) → low. Only the hostname is
    matched, so a path such as /governance-blog does not count.
    """
    host = _hostname(source_url)
    if not host:
        return Confidence.low
    if HIGH_CONFIDENCE_LABEL in host.split("."):
        return Confidence.high
    if any(host == d or host.endswith("." + d) for d in MEDIUM_CONFIDENCE_DOMAINS):
        return Confidence.medium
    return Confidence.low


def validate_source_url(url: str) -> bool:
    """Return True if url is an absolute http(s) URL."""
    if not url or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
