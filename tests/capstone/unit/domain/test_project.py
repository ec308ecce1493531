"""Unit tests for the Project aggregate and its value objects."""

from uuid import UUID

import pytest

from capstone.domain.projects import (
    INDEPENDENT_PROJECT_TYPE,
    PaperStandard,
    Project,
    ProjectStatus,
    generate_project_code,
)
from capstone.domain.shared.exceptions import ErrorCode, ValidationError


class TestPaperStandard:
    @pytest.mark.parametrize("value", ["IMRAD", "IAAA", "custom"])
    def test_known_values_parse(self, value):
        assert PaperStandard.parse(value).value == value

    @pytest.mark.parametrize("value", [None, "", "imrad", "APA"])
    def test_unknown_values_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            PaperStandard.parse(value)
        assert exc.value.code == ErrorCode.INVALID_PAPER_STANDARD
        assert exc.value.message == (
            "Valid paper standard is required (IMRAD, IAAA, or custom)"
        )


class TestProjectCode:
    def test_code_is_uuid4_text(self):
        code = generate_project_code()
        assert str(UUID(code)) == code
        assert UUID(code).version == 4

    def test_codes_differ(self):
        assert generate_project_code() != generate_project_code()


class TestProjectCreate:
    def test_defaults(self):
        project = Project.create(
            title="  Solar Dryer  ",
            description="  Drying rates.  ",
            paper_standard=PaperStandard.IAAA,
            created_by="u1",
        )

        assert project.title == "Solar Dryer"
        assert project.description == "Drying rates."
        assert project.abstract == "Drying rates."
        assert project.status is ProjectStatus.DRAFT
        assert project.project_type == INDEPENDENT_PROJECT_TYPE
        assert project.created_by == "u1"
        assert project.document_reference is None
        assert UUID(project.project_code)

    @pytest.mark.parametrize(
        ("title", "description"),
        [("", "desc"), ("title", ""), ("   ", "desc"), ("title", "  ")],
    )
    def test_blank_title_or_description_rejected(self, title, description):
        with pytest.raises(ValidationError) as exc:
            Project.create(
                title=title,
                description=description,
                paper_standard=PaperStandard.IMRAD,
                created_by="u1",
            )
        assert exc.value.code == ErrorCode.MISSING_REQUIRED_FIELDS
        assert exc.value.message == "Title and description are required"

    def test_keywords_are_copied(self):
        keywords = ["solar", "drying"]
        project = Project.create(
            title="t",
            description="d",
            paper_standard=PaperStandard.CUSTOM,
            created_by="u1",
            keywords=keywords,
        )
        keywords.append("mutated")
        assert project.keywords == ["solar", "drying"]

    def test_attach_document(self):
        project = Project.create(
            title="t",
            description="d",
            paper_standard=PaperStandard.IMRAD,
            created_by="u1",
        )
        before = project.updated_at
        project.attach_document("https://storage.test/doc.pdf")
        assert project.document_reference == "https://storage.test/doc.pdf"
        assert project.updated_at >= before

    def test_equality_by_id(self):
        project = Project.create(
            title="t",
            description="d",
            paper_standard=PaperStandard.IMRAD,
            created_by="u1",
        )
        same = Project.reconstitute(
            id=project.id,
            project_code=project.project_code,
            title="other",
            description="other",
            abstract=None,
            paper_standard=PaperStandard.IAAA,
            project_type=INDEPENDENT_PROJECT_TYPE,
            status=ProjectStatus.APPROVED,
            created_by="u2",
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
        assert same == project
        assert hash(same) == hash(project)
