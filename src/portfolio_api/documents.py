"""
Document models for portfolio content.

These Pydantic models describe the shape each MongoDB document must have
before it is exposed through GraphQL. Multi-word fields are stored in
camelCase and mapped to snake_case with explicit aliases. Validation is
strict: strings must be strings, integers must be integers, and unknown
fields are ignored.
"""

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from .errors import ConversionError

DocumentT = TypeVar("DocumentT", bound="PortfolioDocument")

# GraphQL Int is a signed 32-bit integer
Int32 = Annotated[StrictInt, Field(ge=-(2**31), le=2**31 - 1)]

CONTENT_SEPARATOR = ", "


class PortfolioDocument(BaseModel):
    """Base class for read-only portfolio documents."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )


class IntroductionDocument(PortfolioDocument):
    title: StrictStr
    icon: StrictStr


class PersonalDocument(PortfolioDocument):
    email: StrictStr
    job_description: StrictStr = Field(alias="jobDescription")
    life_story: StrictStr = Field(alias="lifeStory")
    why_do_this: StrictStr = Field(alias="whyDothis")
    background_url: StrictStr = Field(alias="backgroundUrl")


class ProjectDocument(PortfolioDocument):
    email: StrictStr
    title: StrictStr
    description: StrictStr
    url: StrictStr
    background_image: StrictStr = Field(alias="backgroundImage")


class SkillsOverviewDocument(PortfolioDocument):
    email: StrictStr
    title: StrictStr
    icon: StrictStr


class SkillsDocument(PortfolioDocument):
    name: StrictStr
    mastery: Int32
    skill_type: StrictStr = Field(alias="skillType")


class SocialMediaDocument(PortfolioDocument):
    url: StrictStr
    social_media_type: StrictStr = Field(alias="socialMediaType")


class SoftSkillsDocument(PortfolioDocument):
    name: StrictStr
    description: StrictStr
    icon: StrictStr


class UserDocument(PortfolioDocument):
    email: StrictStr
    full_name: StrictStr = Field(alias="fullName")
    contact_number: StrictStr = Field(alias="contactNumber")
    website: StrictStr


class ManifestoDocument(PortfolioDocument):
    section_name: StrictStr = Field(alias="sectionName")
    content: list[StrictStr]
    order: Int32


class CurrentWorkDocument(PortfolioDocument):
    title: StrictStr
    company: StrictStr
    company_website: StrictStr = Field(alias="companyWebsite")
    description: list[StrictStr]
    tags: list[StrictStr]


def flatten_content_value(value: str | list[str]) -> str:
    """Render a content value as a single display string.

    Lists are joined with ", ". Strings are returned unchanged.
    """
    if isinstance(value, str):
        return value
    return CONTENT_SEPARATOR.join(value)


class ContentBlockDocument(PortfolioDocument):
    """A blog post content block whose value is a string or a list of strings."""

    block_type: StrictStr = Field(alias="type")
    # Decoded as a string first, then as a list of strings
    value: StrictStr | list[StrictStr] = Field(union_mode="left_to_right")

    def display_value(self) -> str:
        return flatten_content_value(self.value)


class BlogPostDocument(PortfolioDocument):
    title: StrictStr
    slug: StrictStr
    author: StrictStr
    date: StrictStr
    content: list[ContentBlockDocument]
    tags: list[StrictStr]
    status: StrictStr
    excerpt: StrictStr
    created_at: StrictStr = Field(alias="createdAt")
    updated_at: StrictStr = Field(alias="updatedAt")


def convert(raw: Mapping[str, Any], model: type[DocumentT]) -> DocumentT:
    """Validate a raw document into ``model``.

    Raises:
        ConversionError: If a required field is missing or has the wrong type
    """
    if not isinstance(raw, Mapping):
        raise ConversionError(model.__name__, f"expected a mapping, got {type(raw).__name__}")
    document_id = raw.get("_id")
    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        raise ConversionError(model.__name__, str(e), document_id=document_id) from e


__all__ = [
    "BlogPostDocument",
    "ContentBlockDocument",
    "CurrentWorkDocument",
    "IntroductionDocument",
    "ManifestoDocument",
    "PersonalDocument",
    "PortfolioDocument",
    "ProjectDocument",
    "SkillsDocument",
    "SkillsOverviewDocument",
    "SocialMediaDocument",
    "SoftSkillsDocument",
    "UserDocument",
    "convert",
    "flatten_content_value",
]
