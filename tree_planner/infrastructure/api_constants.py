"""
API endpoint constants and configuration.

Upstream catalog endpoint paths live here so the catalog client does not
hard-code them. The upstream speaks the same wire contract this service
exposes.
"""


class CatalogAPIEndpoints:
    """Catalog service endpoint paths."""

    BASE = "/api"

    BARANGAYS = f"{BASE}/barangays"
    TREES = f"{BASE}/trees"


class APIConstants:
    """General API configuration constants."""

    # HTTP Headers
    CONTENT_TYPE_JSON = "application/json"
