"""
GitHub package for Docubot
"""

from .github_client import GitHubClient

__all__ = ["GitHubClient"]
