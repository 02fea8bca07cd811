"""
Skill GraphQL type definitions
"""

import strawberry

from ...documents import SkillsDocument, SkillsOverviewDocument, SoftSkillsDocument


@strawberry.type
class SkillsOverview:
    """Skill area summary."""

    email: str
    title: str
    icon: str

    @classmethod
    def from_document(cls, document: SkillsOverviewDocument) -> "SkillsOverview":
        return cls(email=document.email, title=document.title, icon=document.icon)


@strawberry.type
class Skills:
    """A single technical skill with its mastery level."""

    name: str
    mastery: int
    skill_type: str

    @classmethod
    def from_document(cls, document: SkillsDocument) -> "Skills":
        return cls(name=document.name, mastery=document.mastery, skill_type=document.skill_type)


@strawberry.type
class SoftSkills:
    name: str
    description: str
    icon: str

    @classmethod
    def from_document(cls, document: SoftSkillsDocument) -> "SoftSkills":
        return cls(name=document.name, description=document.description, icon=document.icon)
