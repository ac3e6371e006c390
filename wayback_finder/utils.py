import re

_SCHEME_RE = re.compile(r"^https?://")


def normalize_target(value: str) -> str:
    """Strip the http(s) scheme and one trailing slash so equivalent forms query alike."""
    return _SCHEME_RE.sub("", value.strip(), count=1).removesuffix("/")
