"""GitHub release models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ReleaseInfo:
    tag_name: str = ""
    published_at: str = ""
    prerelease: bool = False
    draft: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> ReleaseInfo:
        if not d:
            return cls()
        return cls(
            tag_name=d.get("tag_name") or "",
            published_at=d.get("published_at") or "",
            prerelease=bool(d.get("prerelease")),
            draft=bool(d.get("draft")),
        )

    @property
    def is_stable(self) -> bool:
        return not (self.prerelease or self.draft)

    @property
    def version(self) -> str:
        """Tag name with a single leading 'v' removed ("v1.18.0" -> "1.18.0")."""
        if self.tag_name.startswith("v"):
            return self.tag_name[1:]
        return self.tag_name
