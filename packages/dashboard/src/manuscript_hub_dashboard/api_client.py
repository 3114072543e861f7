"""HTTP client for the manuscript REST API.

One method per (role, resource, verb). Every method performs a single
request and either returns the parsed JSON body or raises ``APIError``
carrying the server's ``message`` (or a per-operation fallback). There are
no retries and no caching.
"""

from typing import Any, Optional

import httpx

from manuscript_hub_common import APIError, get_logger, get_settings
from manuscript_hub_dashboard.models import ManuscriptFile

logger = get_logger(__name__)

DEFAULT_FALLBACK = "Request failed"
SUBMIT_FALLBACK = "Failed to submit manuscript"
LIST_SUBMISSIONS_FALLBACK = "Failed to fetch submissions"
UPDATE_STATUS_FALLBACK = "Failed to update submission status"


def _error_message(response: httpx.Response) -> Optional[str]:
    """Extract the ``message`` field from an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


class ManuscriptHubClient:
    """Async HTTP client for the manuscript REST API.

    Example:
        >>> async with ManuscriptHubClient() as client:
        ...     submissions = await client.list_submissions()
        ...     await client.update_submission_status(submissions[0]["id"], "accepted")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API base URL. Defaults to the API_URL setting
                      (http://localhost:5001/api)
            token: Bearer token sent when a call does not pass its own.
                   Defaults to the API_TOKEN setting.
            timeout: Request timeout in seconds. Defaults to REQUEST_TIMEOUT.
        """
        settings = get_settings()
        self.base_url: str = base_url or settings.api_url
        self.token: Optional[str] = token if token is not None else settings.api_token
        self.timeout: float = timeout if timeout is not None else settings.request_timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ManuscriptHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers(self, token: Optional[str]) -> dict[str, str]:
        token = token or self.token
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        fallback: str = DEFAULT_FALLBACK,
        token: Optional[str] = None,
        **kwargs: Any,
    ) -> Any:
        """Issue one request and return the parsed JSON body.

        Raises:
            APIError: On non-2xx responses, network failures, or an
                      unparsable success body
        """
        client = await self._get_client()
        try:
            response = await client.request(method, path, headers=self._headers(token), **kwargs)
        except httpx.HTTPError as e:
            logger.warning("request_failed", method=method, endpoint=path, error=str(e))
            raise APIError(fallback, endpoint=path) from e

        if not response.is_success:
            message = _error_message(response) or fallback
            logger.warning(
                "request_rejected",
                method=method,
                endpoint=path,
                status_code=response.status_code,
                message=message,
            )
            raise APIError(message, status_code=response.status_code, endpoint=path)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise APIError(fallback, status_code=response.status_code, endpoint=path) from e

    # -------------------------------------------------------------------------
    # Author
    # -------------------------------------------------------------------------

    async def author_register(
        self,
        name: str,
        email: str,
        password: str,
        bio: Optional[str] = None,
    ) -> Any:
        payload: dict[str, Any] = {"name": name, "email": email, "password": password}
        if bio:
            payload["bio"] = bio
        return await self._request("POST", "/author/register", json=payload)

    async def author_login(self, email: str, password: str) -> Any:
        return await self._request(
            "POST", "/author/login", json={"email": email, "password": password}
        )

    async def submit_manuscript(
        self,
        *,
        manuscript: ManuscriptFile,
        title: str,
        category: str,
        synopsis: str,
        word_count: int,
        status: str,
        isbn: Optional[str] = None,
        token: Optional[str] = None,
    ) -> Any:
        """Create a submission from a multipart upload.

        Args:
            manuscript: File sent as the ``manuscript`` part
            title: Book title
            category: Category name
            synopsis: Synopsis text
            word_count: Declared word count
            status: "draft" or "pending"
            isbn: Optional ISBN, omitted from the payload when empty
            token: Bearer token overriding the client default

        Returns:
            The created submission as returned by the server.

        Raises:
            APIError: On API errors
        """
        data = {
            "title": title,
            "category": category,
            "synopsis": synopsis,
            "word_count": str(word_count),
            "status": status,
        }
        if isbn:
            data["isbn"] = isbn
        files = {
            "manuscript": (manuscript.name, manuscript.content, manuscript.content_type),
        }
        return await self._request(
            "POST",
            "/author/manuscripts",
            fallback=SUBMIT_FALLBACK,
            token=token,
            data=data,
            files=files,
        )

    async def list_author_manuscripts(self, token: Optional[str] = None) -> Any:
        return await self._request("GET", "/author/manuscripts", token=token)

    async def get_author_profile(self, token: Optional[str] = None) -> Any:
        return await self._request("GET", "/author/profile", token=token)

    async def get_author_royalties(self, token: Optional[str] = None) -> Any:
        return await self._request("GET", "/author/royalties", token=token)

    # -------------------------------------------------------------------------
    # Publisher
    # -------------------------------------------------------------------------

    async def publisher_register(
        self,
        name: str,
        email: str,
        password: str,
        company_name: Optional[str] = None,
    ) -> Any:
        payload: dict[str, Any] = {"name": name, "email": email, "password": password}
        if company_name:
            payload["company_name"] = company_name
        return await self._request("POST", "/publisher/register", json=payload)

    async def publisher_login(self, email: str, password: str) -> Any:
        return await self._request(
            "POST", "/publisher/login", json={"email": email, "password": password}
        )

    async def list_submissions(
        self,
        status: Optional[str] = None,
        token: Optional[str] = None,
    ) -> Any:
        """List submissions, optionally filtered by status.

        Args:
            status: Optional status filter (draft, pending, accepted, rejected)
            token: Bearer token overriding the client default

        Returns:
            JSON list of submission records.

        Raises:
            APIError: On API errors
        """
        params = {"status": status} if status else None
        return await self._request(
            "GET",
            "/publisher/submissions",
            fallback=LIST_SUBMISSIONS_FALLBACK,
            token=token,
            params=params,
        )

    async def update_submission_status(
        self,
        submission_id: int,
        status: str,
        token: Optional[str] = None,
    ) -> Any:
        """Set a submission's review status ("accepted" or "rejected").

        Transition rules are enforced by the server.

        Raises:
            APIError: On API errors
        """
        return await self._request(
            "PUT",
            f"/publisher/submissions/{submission_id}/status",
            fallback=UPDATE_STATUS_FALLBACK,
            token=token,
            json={"status": status},
        )

    async def get_publisher_analytics(self, token: Optional[str] = None) -> Any:
        return await self._request("GET", "/publisher/analytics", token=token)

    async def list_books(self, token: Optional[str] = None) -> Any:
        return await self._request("GET", "/publisher/books", token=token)

    async def create_book(self, data: dict[str, Any], token: Optional[str] = None) -> Any:
        return await self._request("POST", "/publisher/books", token=token, json=data)

    async def update_book(
        self,
        book_id: int,
        data: dict[str, Any],
        token: Optional[str] = None,
    ) -> Any:
        return await self._request("PUT", f"/publisher/books/{book_id}", token=token, json=data)
