"""
Work GraphQL type definitions
"""

import strawberry

from ...documents import CurrentWorkDocument, ManifestoDocument, ProjectDocument


@strawberry.type
class Project:
    """Portfolio project."""

    email: str
    title: str
    description: str
    url: str
    background_image: str

    @classmethod
    def from_document(cls, document: ProjectDocument) -> "Project":
        return cls(
            email=document.email,
            title=document.title,
            description=document.description,
            url=document.url,
            background_image=document.background_image,
        )


@strawberry.type
class Manifesto:
    """Manifesto section; sections are ordered by ``order``."""

    section_name: str
    content: list[str]
    order: int

    @classmethod
    def from_document(cls, document: ManifestoDocument) -> "Manifesto":
        return cls(
            section_name=document.section_name,
            content=list(document.content),
            order=document.order,
        )


@strawberry.type
class CurrentWork:
    title: str
    company: str
    company_website: str
    description: list[str]
    tags: list[str]

    @classmethod
    def from_document(cls, document: CurrentWorkDocument) -> "CurrentWork":
        return cls(
            title=document.title,
            company=document.company,
            company_website=document.company_website,
            description=list(document.description),
            tags=list(document.tags),
        )
