"""
Unit tests for document conversion
"""

import pytest

from portfolio_api.documents import (
    BlogPostDocument,
    ContentBlockDocument,
    ManifestoDocument,
    PersonalDocument,
    ProjectDocument,
    SkillsDocument,
    convert,
    flatten_content_value,
)
from portfolio_api.errors import ConversionError


@pytest.fixture
def project_raw():
    return {
        "_id": "65a1f0c2e4b0a1b2c3d4e5f6",
        "email": "user@example.com",
        "title": "X",
        "description": "d",
        "url": "http://x",
        "backgroundImage": "img.png",
    }


@pytest.fixture
def blog_post_raw():
    return {
        "email": "user@example.com",
        "title": "Hello World",
        "slug": "hello-world",
        "author": "JM",
        "date": "2024-05-01",
        "content": [
            {"type": "paragraph", "value": "First paragraph"},
            {"type": "list", "value": ["a", "b"]},
        ],
        "tags": ["intro"],
        "status": "published",
        "excerpt": "Hi",
        "createdAt": "2024-05-01T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
    }


class TestConvert:
    """Tests for convert()."""

    def test_fields_equal_source_fields(self, project_raw):
        """Renamed fields are mapped and the rest copied as-is."""
        project = convert(project_raw, ProjectDocument)

        assert project.email == "user@example.com"
        assert project.title == "X"
        assert project.description == "d"
        assert project.url == "http://x"
        assert project.background_image == "img.png"

    def test_unknown_fields_are_ignored(self, project_raw):
        project_raw["featured"] = True
        project = convert(project_raw, ProjectDocument)

        assert not hasattr(project, "featured")
        assert not hasattr(project, "_id")

    def test_personal_maps_lowercase_why_do_this(self):
        personal = convert(
            {
                "email": "user@example.com",
                "jobDescription": "Engineer",
                "lifeStory": "Story",
                "whyDothis": "Because",
                "backgroundUrl": "bg.png",
            },
            PersonalDocument,
        )

        assert personal.why_do_this == "Because"
        assert personal.job_description == "Engineer"

    def test_missing_required_field_fails(self, project_raw):
        del project_raw["backgroundImage"]

        with pytest.raises(ConversionError) as exc_info:
            convert(project_raw, ProjectDocument)

        assert exc_info.value.model_name == "ProjectDocument"
        assert exc_info.value.document_id == "65a1f0c2e4b0a1b2c3d4e5f6"

    def test_python_field_name_is_accepted(self, project_raw):
        project_raw["background_image"] = project_raw.pop("backgroundImage")

        project = convert(project_raw, ProjectDocument)
        assert project.background_image == "img.png"

    @pytest.mark.parametrize("mastery", ["5", 5.0, None])
    def test_int_field_rejects_other_types(self, mastery):
        with pytest.raises(ConversionError):
            convert({"name": "Python", "mastery": mastery, "skillType": "lang"}, SkillsDocument)

    def test_int_field_rejects_values_outside_32_bits(self):
        with pytest.raises(ConversionError):
            convert({"name": "Python", "mastery": 2**31, "skillType": "lang"}, SkillsDocument)

    def test_string_field_rejects_number(self, project_raw):
        project_raw["title"] = 42

        with pytest.raises(ConversionError):
            convert(project_raw, ProjectDocument)

    def test_list_field_rejects_non_string_items(self):
        with pytest.raises(ConversionError):
            convert({"sectionName": "Why", "content": ["a", 1], "order": 1}, ManifestoDocument)

    def test_non_mapping_fails(self):
        with pytest.raises(ConversionError):
            convert(["not", "a", "document"], ProjectDocument)  # type: ignore[arg-type]


class TestContentBlocks:
    """Tests for content block decoding and flattening."""

    def test_flatten_string_is_unchanged(self):
        assert flatten_content_value("hello") == "hello"

    def test_flatten_list_joins_with_comma_space(self):
        assert flatten_content_value(["a", "b"]) == "a, b"

    @pytest.mark.parametrize("value", ["hello", "a, b", ["a", "b"], ["single"]])
    def test_flatten_is_idempotent(self, value):
        once = flatten_content_value(value)

        assert flatten_content_value(once) == once

    def test_flatten_empty_list(self):
        assert flatten_content_value([]) == ""

    def test_string_value_keeps_scalar_form(self):
        block = convert({"type": "paragraph", "value": "text"}, ContentBlockDocument)

        assert block.value == "text"
        assert block.display_value() == "text"

    def test_list_value_keeps_list_form(self):
        block = convert({"type": "list", "value": ["a", "b"]}, ContentBlockDocument)

        assert block.value == ["a", "b"]
        assert block.display_value() == "a, b"

    @pytest.mark.parametrize("value", [3, {"a": "b"}, ["a", 2]])
    def test_other_values_fail(self, value):
        with pytest.raises(ConversionError):
            convert({"type": "x", "value": value}, ContentBlockDocument)

    def test_blog_post_converts_nested_blocks(self, blog_post_raw):
        post = convert(blog_post_raw, BlogPostDocument)

        assert post.slug == "hello-world"
        assert post.created_at == "2024-05-01T10:00:00Z"
        assert [block.block_type for block in post.content] == ["paragraph", "list"]
        assert post.content[1].value == ["a", "b"]

    def test_blog_post_with_bad_block_fails_whole_post(self, blog_post_raw):
        blog_post_raw["content"].append({"type": "paragraph"})

        with pytest.raises(ConversionError):
            convert(blog_post_raw, BlogPostDocument)
