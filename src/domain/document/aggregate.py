"""Document prototype."""
from typing import Any, Dict, List, Set

from pydantic import Field, field_validator

from src.domain.base.prototype import PrototypeModel


class Document(PrototypeModel):
    """
    A document with content, images, formatting and annotations.

    Documents are prototypes: a configured document is cloned and the clone
    edited, leaving the original untouched.
    """

    title: str
    content: str = ""
    images: List[str] = Field(default_factory=list)
    formatting: Dict[str, Any] = Field(default_factory=dict)
    annotations: List[str] = Field(default_factory=list)
    tags: Set[str] = Field(default_factory=set)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Document title must not be blank")
        return v

    def add_image(self, image: str) -> "Document":
        self.images.append(image)
        return self

    def annotate(self, note: str) -> "Document":
        self.annotations.append(note)
        return self

    def set_format(self, key: str, value: Any) -> "Document":
        self.formatting[key] = value
        return self

    def add_tag(self, tag: str) -> "Document":
        self.tags.add(tag)
        return self
