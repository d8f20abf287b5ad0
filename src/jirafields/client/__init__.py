"""Remote field sources."""

from jirafields.client.jira import JiraFieldClient
from jirafields.client.provider import RemoteFieldSource

__all__ = ["JiraFieldClient", "RemoteFieldSource"]
