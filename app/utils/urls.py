import re
from urllib.parse import urlsplit

SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
FORBIDDEN_HOST_CHARS = re.compile(r"[\s#%/<>?@\\^|\[\]\"]")
CANONICAL_SCHEME = "https"


class InvalidUrlError(ValueError):
    pass


def coerce_scheme(url: str) -> str:
    url = url.strip()
    if not SCHEME_PATTERN.match(url):
        url = f"https://{url}"
    return url


def _split_host_and_path(url: str) -> tuple[str, str]:
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()
    if not host or FORBIDDEN_HOST_CHARS.search(host):
        raise InvalidUrlError(f"URL host is missing or malformed: {url!r}")
    # Raises ValueError for a non-numeric or out-of-range port.
    parts.port
    if ":" in host:
        host = f"[{host}]"
    return host, parts.path


def normalize_url(url: str) -> str:
    """Canonical identity of a website URL.

    ``https://`` is assumed when no scheme is given and an ``http`` scheme is
    folded onto ``https``. The host is lowercased, port, query and fragment are
    dropped and trailing slashes are stripped from the path (the root path
    stays ``/``). Input that cannot be parsed comes back trimmed, with the
    scheme prefix applied, instead of raising.
    """
    coerced = coerce_scheme(url)
    try:
        host, path = _split_host_and_path(coerced)
    except ValueError:
        return coerced
    path = path.rstrip("/") or "/"
    return f"{CANONICAL_SCHEME}://{host}{path}"
