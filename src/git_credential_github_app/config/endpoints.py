from __future__ import annotations

from dataclasses import dataclass

PUBLIC_DOMAIN = "github.com"
PUBLIC_REST_URL = "https://api.github.com/"
PUBLIC_UPLOADS_URL = "https://uploads.github.com/"


@dataclass(frozen=True)
class ApiEndpoints:
    domain: str
    rest_url: str
    uploads_url: str

    @property
    def is_enterprise(self) -> bool:
        return self.domain != PUBLIC_DOMAIN


def endpoints_for_domain(domain: str | None) -> ApiEndpoints:
    """Return the REST and upload roots for github.com or an Enterprise host.

    Enterprise roots keep their trailing slash so relative API paths join
    below ``/api/v3/`` instead of replacing it.
    """
    if not domain or domain == PUBLIC_DOMAIN:
        return ApiEndpoints(
            domain=PUBLIC_DOMAIN,
            rest_url=PUBLIC_REST_URL,
            uploads_url=PUBLIC_UPLOADS_URL,
        )
    base_url = f"https://{domain}"
    return ApiEndpoints(
        domain=domain,
        rest_url=f"{base_url}/api/v3/",
        uploads_url=f"{base_url}/api/uploads/",
    )
