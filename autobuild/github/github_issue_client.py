# -
# #%L
# Component Autobuild
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import requests

from autobuild.domains.reporting.issue_tracker import IssueTracker
from autobuild.github.constants import GITHUB_MAX_ISSUE_BODY_SIZE, GITHUB_REQUEST_TIMEOUT
from autobuild.utils import debug_log, log


class GitHubIssueClient(IssueTracker):
    """
    Creates issues through the GitHub REST API.

    The token is passed per call and only placed in the request headers;
    it is never stored on the client or logged.
    """

    def __init__(self, api_url: str = "https://api.github.com", user_agent: str = "component-autobuild"):
        """
        Initialize the GitHub issue client.

        Args:
            api_url: GitHub API base URL (for Enterprise support)
            user_agent: User agent string to identify the client
        """
        self.api_url = api_url.rstrip("/")
        self.user_agent = user_agent

    def _get_headers(self, token: str) -> dict:
        return {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

    def create_issue(self, token: str, repository: str, title: str, body: str) -> bool:
        api_url = f"{self.api_url}/repos/{repository}/issues"
        if len(body) > GITHUB_MAX_ISSUE_BODY_SIZE:
            body = body[:GITHUB_MAX_ISSUE_BODY_SIZE - 20] + "\n\n...[truncated]"
        payload = {"title": title, "body": body}

        try:
            debug_log(f"Making POST request to: {api_url}")
            response = requests.post(api_url, headers=self._get_headers(token), json=payload,
                                     timeout=GITHUB_REQUEST_TIMEOUT)
            debug_log(f"Issue API Response Status Code: {response.status_code}")

            if response.status_code == 201:
                issue_url = ""
                try:
                    issue_url = response.json().get("html_url", "")
                except ValueError:
                    debug_log("Issue API response carried no JSON body")
                log(f"Created issue {issue_url}".rstrip())
                return True

            log(f"Unexpected status code {response.status_code} from issues API: {response.text}", is_error=True)
            return False
        except requests.exceptions.RequestException as e:
            log(f"Error creating issue: {e}", is_error=True)
            return False
