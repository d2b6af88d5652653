"""GitHub API client for fetching releases."""

import httpx

from selfupdate.core.config import SelfUpdateConfig, get_config
from selfupdate.core.errors import SelfUpdateError
from selfupdate.models.release import Release


class GitHubError(SelfUpdateError):
    """Error from GitHub API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class InvalidSlugError(SelfUpdateError, ValueError):
    """Repository slug is not in owner/name form."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Invalid slug format. It should be 'owner/name': {slug}")


def parse_slug(slug: str) -> tuple[str, str]:
    """Split an ``owner/name`` slug into (owner, name)."""
    parts = slug.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidSlugError(slug)
    return parts[0], parts[1]


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(
        self,
        config: SelfUpdateConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        config = config or get_config()
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if config.api_token:
            headers["Authorization"] = f"Bearer {config.api_token}"

        self.client = httpx.Client(
            base_url=config.api_base_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self.client.close()

    def _get(self, url: str, params: dict | None = None) -> httpx.Response:
        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            raise GitHubError(f"Request to GitHub API failed: {e}") from e

        if response.status_code == 404:
            raise GitHubError(f"Not found: {response.request.url}", status_code=404)
        if response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0":
            raise GitHubError("GitHub API rate limit exceeded", status_code=403)
        if response.is_error:
            raise GitHubError(
                f"GitHub API returned HTTP {response.status_code} for {response.request.url}",
                status_code=response.status_code,
            )
        return response

    def list_releases(self, owner: str, repo: str, per_page: int = 100) -> list[Release]:
        """Get all releases for a repository, in the order the API returns them."""
        releases = []
        url: str | None = f"/repos/{owner}/{repo}/releases"
        params: dict | None = {"per_page": per_page}

        while url:
            response = self._get(url, params=params)
            releases.extend(Release.from_api_response(data) for data in response.json())

            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

        return releases
