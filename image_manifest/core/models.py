"""Data models for manifest records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageRecord:
    """One manifest entry: where the image lives and what to call it."""

    src: str  # root-relative web path, always forward slashes
    title: str

    def to_dict(self) -> dict:
        return {
            "src": self.src,
            "title": self.title,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ImageRecord":
        return cls(
            src=data["src"],
            title=data.get("title", ""),
        )
