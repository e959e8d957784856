"""Data models for percona-digests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperatorProfile:
    name: str
    github_repo: str
    docs_base_url: str
    docs_pattern: str  # file name with one %s placeholder for the version
    config_file: str

    @property
    def display_name(self) -> str:
        return f"Percona {self.name.upper()} Operator"

    def release_notes_url(self, version: str) -> str:
        return f"{self.docs_base_url}/{self.docs_pattern % version}"
