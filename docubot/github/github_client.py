"""
GitHub REST client for Docubot
Fetches pull request data and lists, creates and updates issue comments
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from ..exceptions import UpstreamUnavailableError
from ..models import ExistingComment, PullRequestData, PullRequestFile

logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient:
    """
    Thin async wrapper over the GitHub REST API for a single repository
    """

    def __init__(self,
                 token: str,
                 repository: str,
                 api_url: str = "https://api.github.com",
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 timeout: float = 30.0):
        """
        Initialize GitHub client

        Args:
            token: GitHub token with pull request and issue comment access
            repository: Repository full name (owner/repo)
            api_url: REST API base URL (differs on GitHub Enterprise)
            transport: Optional httpx transport, mainly for tests
            timeout: Request timeout in seconds
        """
        self.owner, self.repo_name = repository.split("/", 1)
        self.api_url = api_url.rstrip("/")
        self.transport = transport
        self.timeout = timeout
        self.headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json"
        }

    @property
    def repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo_name}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(headers=self.headers, timeout=self.timeout, transport=self.transport)

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"GitHub API error: {e.response.status_code} - {e.response.text}")
            raise UpstreamUnavailableError("GitHub", str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"GitHub API request failed: {str(e)}")
            raise UpstreamUnavailableError("GitHub", str(e)) from e

    async def _get_all_pages(self, url: str) -> List[Dict[str, Any]]:
        """Follow page numbers until a short page is returned, keeping API order"""
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            batch = await self._request("GET", url, params={"per_page": PER_PAGE, "page": page})
            items.extend(batch)
            if len(batch) < PER_PAGE:
                return items
            page += 1

    async def get_pull_request(self, pr_number: int) -> PullRequestData:
        """
        Fetch pull request title, body and changed files

        Args:
            pr_number: Pull request number

        Returns:
            PullRequestData: Pull request details with file patches
        """
        logger.info(f"Fetching PR #{pr_number} from {self.owner}/{self.repo_name}")
        pr = await self._request("GET", f"{self.repo_url}/pulls/{pr_number}")
        files = await self.list_pull_request_files(pr_number)

        return PullRequestData(
            number=pr_number,
            title=pr.get("title") or "",
            body=pr.get("body") or "",
            files=files
        )

    async def list_pull_request_files(self, pr_number: int) -> List[PullRequestFile]:
        """List all files changed in a pull request"""
        data = await self._get_all_pages(f"{self.repo_url}/pulls/{pr_number}/files")
        return [
            PullRequestFile(
                filename=f.get("filename", ""),
                status=f.get("status") or "modified",
                patch=f.get("patch")
            )
            for f in data
        ]

    async def list_comments(self, issue_number: int) -> List[ExistingComment]:
        """List all comments on an issue or pull request, in API order"""
        data = await self._get_all_pages(f"{self.repo_url}/issues/{issue_number}/comments")
        return [ExistingComment(id=c["id"], body=c.get("body") or "") for c in data]

    async def create_comment(self, issue_number: int, body: str) -> Dict[str, Any]:
        """Post a new comment on an issue or pull request"""
        result = await self._request("POST", f"{self.repo_url}/issues/{issue_number}/comments", json={"body": body})
        logger.info(f"Successfully posted comment to PR #{issue_number}")
        return result

    async def update_comment(self, comment_id: Union[int, str], body: str) -> Dict[str, Any]:
        """Replace the body of an existing comment"""
        result = await self._request("PATCH", f"{self.repo_url}/issues/comments/{comment_id}", json={"body": body})
        logger.info(f"Successfully updated comment {comment_id}")
        return result


__all__ = ["GitHubClient", "PER_PAGE"]
