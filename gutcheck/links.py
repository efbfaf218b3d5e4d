"""
Next-step links for a chosen name

Static reference URLs; only the domain search depends on the name.
"""

from typing import Dict
from urllib.parse import quote

from .normalizer import normalize

DOMAIN_SEARCH_URL = "https://www.namecheap.com/domains/registration/results/?domain="
LANDING_PAGE_URL = "https://carrd.co/"
LOGO_URL = "https://www.canva.com/"
TRADEMARK_SEARCH_URL = "https://www.uspto.gov/trademarks/search"

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def build_domain_link(name: str) -> str:
    compact = normalize(name).replace(' ', '')
    return DOMAIN_SEARCH_URL + quote(compact, safe=_URI_SAFE)


def build_landing_page_link() -> str:
    return LANDING_PAGE_URL


def build_logo_link() -> str:
    return LOGO_URL


def build_trademark_search_link() -> str:
    return TRADEMARK_SEARCH_URL


def build_next_step_links(name: str) -> Dict[str, str]:
    """All four links, keyed domain / landing_page / logo / trademark"""
    return {
        'domain': build_domain_link(name),
        'landing_page': build_landing_page_link(),
        'logo': build_logo_link(),
        'trademark': build_trademark_search_link(),
    }
