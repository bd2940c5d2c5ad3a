"""Pydantic models for GitHub API payloads and exported records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """Subset of the /users/{login} payload."""

    model_config = ConfigDict(extra="ignore")

    login: str
    public_repos: int = Field(default=0, description="Number of public repositories")
    followers: int = Field(default=0, description="Number of followers")


class Repository(BaseModel):
    """Subset of a /users/{login}/repos entry."""

    model_config = ConfigDict(extra="ignore")

    name: str
    forks_count: int = Field(default=0, description="Number of forks of this repository")
    created_at: datetime
    updated_at: datetime


class UserRecord(BaseModel):
    """One entry of the exported users.json array.

    Distribution strings are flattened to a single line.
    """

    login: str
    public_repos: int
    followers: int
    languages_distribution: str
    forks_count: int
    activity: str
