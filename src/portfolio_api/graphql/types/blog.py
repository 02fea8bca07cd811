"""
Blog GraphQL type definitions
"""

import strawberry

from ...documents import BlogPostDocument, ContentBlockDocument


@strawberry.type
class ContentBlockOutput:
    """Content block exposed with its value flattened into a single string."""

    block_type: str
    value: str

    @classmethod
    def from_document(cls, document: ContentBlockDocument) -> "ContentBlockOutput":
        return cls(block_type=document.block_type, value=document.display_value())


@strawberry.type
class BlogPost:
    """Blog post type for GraphQL API."""

    title: str
    slug: str
    author: str
    date: str
    tags: list[str]
    status: str
    excerpt: str
    created_at: str
    updated_at: str

    # Original blocks, string or list values intact
    blocks: strawberry.Private[list[ContentBlockDocument]]

    def _render_blocks(self) -> list[ContentBlockOutput]:
        return [ContentBlockOutput.from_document(block) for block in self.blocks]

    @strawberry.field
    def content(self) -> list[ContentBlockOutput]:
        """Content blocks with list values joined by a comma and a space."""
        return self._render_blocks()

    @strawberry.field(name="contentBlocks")
    def content_blocks(self) -> list[ContentBlockOutput]:
        """Same as ``content``."""
        return self._render_blocks()

    @classmethod
    def from_document(cls, document: BlogPostDocument) -> "BlogPost":
        return cls(
            title=document.title,
            slug=document.slug,
            author=document.author,
            date=document.date,
            tags=list(document.tags),
            status=document.status,
            excerpt=document.excerpt,
            created_at=document.created_at,
            updated_at=document.updated_at,
            blocks=list(document.content),
        )
