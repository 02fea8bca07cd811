"""
Root GraphQL query definitions
"""

import strawberry

from ..types.blog import BlogPost
from ..types.profile import Introduction, Personal, SocialMedia, User
from ..types.skills import Skills, SkillsOverview, SoftSkills
from ..types.work import CurrentWork, Manifesto, Project


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def introductions(self, info: strawberry.Info) -> list[Introduction]:
        """Get introduction cards."""
        from ..resolvers.content import resolve_introductions

        return await resolve_introductions(info)

    @strawberry.field
    async def personals(self, info: strawberry.Info) -> list[Personal]:
        """Get the owner's personal bio."""
        from ..resolvers.content import resolve_personals

        return await resolve_personals(info)

    @strawberry.field
    async def projects(self, info: strawberry.Info) -> list[Project]:
        """Get portfolio projects."""
        from ..resolvers.content import resolve_projects

        return await resolve_projects(info)

    @strawberry.field
    async def skills_overview(self, info: strawberry.Info) -> list[SkillsOverview]:
        """Get skill area summaries."""
        from ..resolvers.content import resolve_skills_overview

        return await resolve_skills_overview(info)

    @strawberry.field
    async def skills(self, info: strawberry.Info) -> list[Skills]:
        """Get technical skills."""
        from ..resolvers.content import resolve_skills

        return await resolve_skills(info)

    @strawberry.field
    async def social_media(self, info: strawberry.Info) -> list[SocialMedia]:
        """Get social media links."""
        from ..resolvers.content import resolve_social_media

        return await resolve_social_media(info)

    @strawberry.field
    async def soft_skills(self, info: strawberry.Info) -> list[SoftSkills]:
        """Get soft skills."""
        from ..resolvers.content import resolve_soft_skills

        return await resolve_soft_skills(info)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get the owner's contact details."""
        from ..resolvers.content import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def manifestos(self, info: strawberry.Info) -> list[Manifesto]:
        """Get manifesto sections."""
        from ..resolvers.content import resolve_manifestos

        return await resolve_manifestos(info)

    @strawberry.field
    async def current_work(self, info: strawberry.Info) -> list[CurrentWork]:
        """Get current positions."""
        from ..resolvers.content import resolve_current_work

        return await resolve_current_work(info)

    @strawberry.field
    async def blog_posts(self, info: strawberry.Info) -> list[BlogPost]:
        """Get all blog posts."""
        from ..resolvers.content import resolve_blog_posts

        return await resolve_blog_posts(info)

    @strawberry.field
    async def blog_post(self, info: strawberry.Info, slug: str) -> BlogPost | None:
        """Get a blog post by its slug."""
        from ..resolvers.content import resolve_blog_post_by_slug

        return await resolve_blog_post_by_slug(info, slug)
