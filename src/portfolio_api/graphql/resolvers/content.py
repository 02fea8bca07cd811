"""
Resolvers for portfolio content.

Every resolver is a declaration: which collection to read, which document
model to validate against and which GraphQL type to build. The shared
helpers run the fetch pipeline and turn fetch failures into field errors.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import strawberry
from graphql import GraphQLError
from pymongo.asynchronous.database import AsyncDatabase

from ...database.collections import Collection
from ...database.connection import get_database
from ...database.pipeline import fetch_all, fetch_first
from ...documents import (
    BlogPostDocument,
    CurrentWorkDocument,
    IntroductionDocument,
    ManifestoDocument,
    PersonalDocument,
    PortfolioDocument,
    ProjectDocument,
    SkillsDocument,
    SkillsOverviewDocument,
    SocialMediaDocument,
    SoftSkillsDocument,
    UserDocument,
)
from ...errors import QueryError, StoreConnectionError
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.blog import BlogPost
    from ..types.profile import Introduction, Personal, SocialMedia, User
    from ..types.skills import Skills, SkillsOverview, SoftSkills
    from ..types.work import CurrentWork, Manifesto, Project

logger = get_logger(__name__)

DocumentT = TypeVar("DocumentT", bound=PortfolioDocument)
OutputT = TypeVar("OutputT")


def get_database_from_info(info: strawberry.Info) -> AsyncDatabase:
    """Use the database handle injected into the request context, else the shared one."""
    context = info.context if isinstance(info.context, dict) else {}
    database = context.get("database")
    if database is None:
        return get_database()
    return database


def fetch_error(message: str, error: Exception) -> GraphQLError:
    """Build a field error carrying the underlying failure as ``details``."""
    return GraphQLError(message, extensions={"details": str(error)})


async def resolve_list(
    info: strawberry.Info,
    collection: Collection,
    model: type[DocumentT],
    to_output: Callable[[DocumentT], OutputT],
    label: str,
) -> list[OutputT]:
    """Fetch every owner document in ``collection`` and build the output list."""
    try:
        database = get_database_from_info(info)
        documents = await fetch_all(database, collection, model)
    except (StoreConnectionError, QueryError) as e:
        logger.error("Failed to fetch content", collection=collection.value, error=str(e))
        raise fetch_error(f"Failed to fetch {label}", e) from e

    return [to_output(document) for document in documents]


async def resolve_one(
    info: strawberry.Info,
    collection: Collection,
    model: type[DocumentT],
    to_output: Callable[[DocumentT], OutputT],
    label: str,
    filters: dict[str, Any],
) -> OutputT | None:
    """Fetch the first owner document matching ``filters``, or None."""
    try:
        database = get_database_from_info(info)
        document = await fetch_first(database, collection, model, filters)
    except (StoreConnectionError, QueryError) as e:
        logger.error("Failed to fetch content", collection=collection.value, error=str(e))
        raise fetch_error(f"Failed to fetch {label}", e) from e

    if document is None:
        logger.info("Content not found", collection=collection.value, **filters)
        return None
    return to_output(document)


# Query resolvers
async def resolve_introductions(info: strawberry.Info) -> list[Introduction]:
    from ..types.profile import Introduction

    return await resolve_list(
        info,
        Collection.INTRODUCTIONS,
        IntroductionDocument,
        Introduction.from_document,
        "introductions",
    )


async def resolve_personals(info: strawberry.Info) -> list[Personal]:
    from ..types.profile import Personal

    return await resolve_list(
        info, Collection.PERSONALS, PersonalDocument, Personal.from_document, "personals"
    )


async def resolve_projects(info: strawberry.Info) -> list[Project]:
    from ..types.work import Project

    return await resolve_list(
        info, Collection.PROJECTS, ProjectDocument, Project.from_document, "projects"
    )


async def resolve_skills_overview(info: strawberry.Info) -> list[SkillsOverview]:
    from ..types.skills import SkillsOverview

    return await resolve_list(
        info,
        Collection.SKILLS_OVERVIEW,
        SkillsOverviewDocument,
        SkillsOverview.from_document,
        "skills overview",
    )


async def resolve_skills(info: strawberry.Info) -> list[Skills]:
    from ..types.skills import Skills

    return await resolve_list(
        info, Collection.SKILLS, SkillsDocument, Skills.from_document, "skills"
    )


async def resolve_social_media(info: strawberry.Info) -> list[SocialMedia]:
    from ..types.profile import SocialMedia

    return await resolve_list(
        info,
        Collection.SOCIAL_MEDIAS,
        SocialMediaDocument,
        SocialMedia.from_document,
        "social medias",
    )


async def resolve_soft_skills(info: strawberry.Info) -> list[SoftSkills]:
    from ..types.skills import SoftSkills

    return await resolve_list(
        info, Collection.SOFT_SKILLS, SoftSkillsDocument, SoftSkills.from_document, "soft skills"
    )


async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.profile import User

    return await resolve_list(info, Collection.USERS, UserDocument, User.from_document, "users")


async def resolve_manifestos(info: strawberry.Info) -> list[Manifesto]:
    from ..types.work import Manifesto

    return await resolve_list(
        info, Collection.MANIFESTOS, ManifestoDocument, Manifesto.from_document, "manifestos"
    )


async def resolve_current_work(info: strawberry.Info) -> list[CurrentWork]:
    from ..types.work import CurrentWork

    return await resolve_list(
        info,
        Collection.CURRENT_WORK,
        CurrentWorkDocument,
        CurrentWork.from_document,
        "current work",
    )


async def resolve_blog_posts(info: strawberry.Info) -> list[BlogPost]:
    from ..types.blog import BlogPost

    return await resolve_list(
        info, Collection.BLOG_POSTS, BlogPostDocument, BlogPost.from_document, "blog posts"
    )


async def resolve_blog_post_by_slug(info: strawberry.Info, slug: str) -> BlogPost | None:
    from ..types.blog import BlogPost

    return await resolve_one(
        info,
        Collection.BLOG_POSTS,
        BlogPostDocument,
        BlogPost.from_document,
        "blog post",
        {"slug": slug},
    )
