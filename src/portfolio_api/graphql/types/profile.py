"""
Profile GraphQL type definitions
"""

import strawberry

from ...documents import (
    IntroductionDocument,
    PersonalDocument,
    SocialMediaDocument,
    UserDocument,
)


@strawberry.type
class Introduction:
    """Introduction card shown on the landing page."""

    title: str
    icon: str

    @classmethod
    def from_document(cls, document: IntroductionDocument) -> "Introduction":
        return cls(title=document.title, icon=document.icon)


@strawberry.type
class Personal:
    """Personal bio of the portfolio owner."""

    email: str
    job_description: str
    life_story: str
    why_do_this: str
    background_url: str

    @classmethod
    def from_document(cls, document: PersonalDocument) -> "Personal":
        return cls(
            email=document.email,
            job_description=document.job_description,
            life_story=document.life_story,
            why_do_this=document.why_do_this,
            background_url=document.background_url,
        )


@strawberry.type
class SocialMedia:
    url: str
    social_media_type: str

    @classmethod
    def from_document(cls, document: SocialMediaDocument) -> "SocialMedia":
        return cls(url=document.url, social_media_type=document.social_media_type)


@strawberry.type
class User:
    """User type for GraphQL API."""

    email: str
    full_name: str
    contact_number: str
    website: str

    @classmethod
    def from_document(cls, document: UserDocument) -> "User":
        return cls(
            email=document.email,
            full_name=document.full_name,
            contact_number=document.contact_number,
            website=document.website,
        )
