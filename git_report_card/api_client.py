"""GitHub API client for making authenticated single-page requests."""

import logging
from typing import Any, Dict

import requests

from .exceptions import NetworkError

GITHUB_API_URL = 'https://api.github.com'


class GitHubAPIClient:
    """Handles GitHub REST API requests.

    Every request is attempted exactly once; any failure is raised as a
    NetworkError.
    """

    def __init__(self, token: str = None, base_url: str = GITHUB_API_URL,
                 session: requests.Session = None):
        """Initialize the GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            base_url: API root URL
            session: Optional pre-built session (mainly for tests)
        """
        self.token = token
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})

        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Dict = None) -> Any:
        """GET an API path and decode its JSON body.

        Args:
            path: Path relative to the API root, e.g. 'repos/o/r/pulls'
            params: Query parameters

        Returns:
            Decoded JSON response

        Raises:
            NetworkError: On connection failure, non-2xx status or invalid JSON
        """
        url = self.url_for(path)
        logging.debug(f"GET {url} {params or ''}")
        try:
            response = self.session.get(url, params=params)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

        status = response.status_code
        if not 200 <= status < 300:
            raise NetworkError(f"GitHub API request to {url} failed", url=url, status_code=status)

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON in response from {url}", url=url, status_code=status) from e
