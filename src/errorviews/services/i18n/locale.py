"""Request locale negotiation."""

from starlette.requests import Request

LOCALE_STATE_ATTR = "locale"


def normalize_locale(tag: str) -> str:
    """Normalize a locale tag: ``zh-cn`` -> ``zh_CN``, ``EN`` -> ``en``."""
    parts = tag.strip().replace("-", "_").split("_")
    language = parts[0].lower()
    if len(parts) == 1:
        return language
    region = parts[1].upper() if len(parts[1]) == 2 else parts[1]
    return "_".join([language, region, *parts[2:]])


def parse_accept_language(header: str | None) -> list[str]:
    """
    Parse an Accept-Language header into locales ordered by preference.

    Entries with ``q=0``, wildcards and malformed weights are skipped.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for position, item in enumerate(header.split(",")):
        tag, _, params = item.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        weighted.append((-quality, position, normalize_locale(tag)))

    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(request: Request | None, default_locale: str = "en", query_param: str | None = "lang") -> str:
    """
    Pick the locale for a request.

    Order: locale stored on ``request.state`` by the locale middleware, the
    query parameter (e.g. ``?lang=zh``), the Accept-Language header, then
    ``default_locale``.
    """
    if request is None:
        return normalize_locale(default_locale)

    stored = getattr(request.state, LOCALE_STATE_ATTR, None)
    if stored:
        return str(stored)

    if query_param:
        requested = request.query_params.get(query_param)
        if requested and requested.strip():
            return normalize_locale(requested)

    preferred = parse_accept_language(request.headers.get("accept-language"))
    if preferred:
        return preferred[0]

    return normalize_locale(default_locale)
