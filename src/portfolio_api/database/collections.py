"""
Known MongoDB collections holding portfolio content
"""

from enum import Enum

from ..errors import QueryError


class Collection(str, Enum):
    """Collection names, one per content type."""

    INTRODUCTIONS = "introductions"
    PERSONALS = "personals"
    PROJECTS = "projects"
    SKILLS_OVERVIEW = "skillsoverview"
    SKILLS = "skills"
    SOCIAL_MEDIAS = "socialmedias"
    SOFT_SKILLS = "softskills"
    USERS = "users"
    MANIFESTOS = "manifestos"
    CURRENT_WORK = "currentwork"
    BLOG_POSTS = "blogposts"


def resolve_collection(name: "Collection | str") -> Collection:
    """Return the Collection for a name, raising QueryError for unknown names."""
    if isinstance(name, Collection):
        return name
    try:
        return Collection(name)
    except ValueError as e:
        raise QueryError(f"Unknown collection: {name!r}") from e
