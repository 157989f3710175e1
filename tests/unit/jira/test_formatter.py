"""Tests for the Markdown issue report."""

import pytest

from mcp_pix_jira.jira.formatter import (
    COMPLEX_CONTENT_PLACEHOLDER,
    collect_custom_fields,
    format_comments,
    format_issue,
    format_issue_summary,
    format_rich_text,
)
from mcp_pix_jira.models.jira import JiraIssue
from tests.fixtures.jira_mocks import (
    JIRA_BASE_URL,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_MINIMAL_ISSUE_RESPONSE,
    make_issue_response,
)

EXPECTED_FULL_REPORT = """\
# PIX-1234: Login fails on mobile

## Basic Information
- **Status**: In Progress (In Progress)
- **Type**: Bug
- **Priority**: High
- **Project**: Pix (PIX)

## People
- **Assignee**: John Doe
- **Reporter**: Jane Smith

## Parent Issue
- **PIX-1000**: Authentication epic
- **Type**: Epic

## Description
Users cannot log in on mobile.

Steps to reproduce below.

## Labels
- mobile
- auth

## Fix Versions
- v4.100.0 ✓ Released (2024-03-01)
- v4.101.0 ○ Unreleased

## Related Issues
- **blocks**: PIX-1300 - Release mobile app
- **relates to**: PIX-999 - Old login bug

## Pix Custom Fields
- **Equipe Pix**: Team A, Team B
- **Appli Pix**: Pix App
- **Development**: 2 repositories, last updated 2024-03-05
- **Période de résolution**: Q1 2024

## Comments
Total comments: 4

### Recent Comments:
**Bob** (2024-03-02):
Second comment

**Carol** (2024-03-03):
Third comment

**Dave** (2024-03-04):
Fourth comment

## Timeline
- **Created**: 2024-02-28 14:30:00
- **Updated**: 2024-03-04 18:45:10

---
**View in JIRA**: https://pix-team.atlassian.net/browse/10042"""


@pytest.fixture
def full_issue():
    return JiraIssue.from_api_response(MOCK_JIRA_ISSUE_RESPONSE, base_url=JIRA_BASE_URL)


@pytest.fixture
def minimal_issue():
    return JiraIssue.from_api_response(
        MOCK_MINIMAL_ISSUE_RESPONSE, base_url=JIRA_BASE_URL
    )


class TestFormatIssue:
    """Test class for the full report."""

    def test_full_report(self, full_issue):
        assert format_issue(full_issue) == EXPECTED_FULL_REPORT

    def test_formatting_is_deterministic(self, full_issue):
        assert format_issue(full_issue) == format_issue(full_issue)

    def test_minimal_issue_omits_empty_sections(self, minimal_issue):
        report = format_issue(minimal_issue)

        assert report.startswith("# PROJ-1: Minimal issue\n\n## Basic Information")
        assert "- **Status**: In Progress (Doing)" in report
        assert "- **Assignee**: Unassigned" in report
        assert "## Labels\n- bug" in report
        for heading in (
            "## Parent Issue",
            "## Description",
            "## Fix Versions",
            "## Related Issues",
            "## Pix Custom Fields",
            "## Comments",
        ):
            assert heading not in report
        assert "- **Created**: 2024-01-15 08:00:00" in report

    def test_link_closes_report_after_rule(self, minimal_issue):
        report = format_issue(minimal_issue)
        assert report.endswith(
            f"\n\n---\n**View in JIRA**: {JIRA_BASE_URL}/browse/10001"
        )

    def test_link_falls_back_to_base_url(self):
        data = make_issue_response()
        del data["self"]
        issue = JiraIssue.from_api_response(data, base_url=f"{JIRA_BASE_URL}/")

        assert format_issue(issue).endswith(
            f"**View in JIRA**: {JIRA_BASE_URL}/browse/PIX-1234"
        )

    def test_missing_status_category_and_priority(self):
        data = make_issue_response(status={"name": "Open"}, priority=None)
        issue = JiraIssue.from_api_response(data)
        report = format_issue(issue)

        assert "- **Status**: Open\n" in report
        assert "- **Priority**: Unknown" in report

    def test_plain_text_description(self):
        issue = JiraIssue.from_api_response(
            make_issue_response(description="Plain *wiki* text")
        )
        assert "## Description\nPlain *wiki* text\n\n" in format_issue(issue)

    def test_unreadable_adf_description_uses_placeholder(self):
        issue = JiraIssue.from_api_response(
            make_issue_response(
                description={"type": "doc", "content": [{"type": "mediaSingle"}]}
            )
        )
        assert f"## Description\n{COMPLEX_CONTENT_PLACEHOLDER}" in format_issue(issue)

    def test_issue_link_without_summary(self):
        data = make_issue_response(
            issuelinks=[
                {
                    "type": {"name": "Cloners"},
                    "outwardIssue": {"key": "PIX-77"},
                }
            ]
        )
        report = format_issue(JiraIssue.from_api_response(data))
        assert "## Related Issues\n- **relates to**: PIX-77 - \n" in report


class TestCustomFields:
    """Test class for custom field selection."""

    def test_allowlist_uses_labels_in_configured_order(self, full_issue):
        labels = {"customfield_10177": "Period", "customfield_10253": "Team"}

        entries = collect_custom_fields(full_issue, "allowlist", labels)

        assert entries == [("Period", "Q1 2024"), ("Team", "Team A, Team B")]

    def test_allowlist_skips_unset_fields(self, full_issue):
        labels = {"customfield_10999": "Empty", "customfield_12345": "Missing"}
        assert collect_custom_fields(full_issue, "allowlist", labels) == []

    def test_generic_mode_lists_every_set_field_sorted(self, full_issue):
        entries = collect_custom_fields(full_issue, "generic")

        assert [field_id for field_id, _ in entries] == [
            "customfield_10000",
            "customfield_10117",
            "customfield_10177",
            "customfield_10253",
            "customfield_10500",
        ]
        assert ("customfield_10500", "5") in entries

    def test_generic_mode_in_report(self, full_issue):
        report = format_issue(full_issue, custom_fields_mode="generic")
        assert "- **customfield_10117**: Pix App" in report
        assert "**Equipe Pix**" not in report


class TestComments:
    def test_zero_total_omits_section(self, full_issue):
        issue = full_issue.model_copy(update={"comment_total": 0, "comments": []})
        assert format_comments(issue) == ""

    def test_total_without_comment_bodies(self, full_issue):
        issue = full_issue.model_copy(update={"comments": []})
        assert format_comments(issue) == "## Comments\nTotal comments: 4"

    def test_comment_without_date(self):
        data = make_issue_response(
            comment={
                "total": 1,
                "comments": [{"author": {"displayName": "Alice"}, "body": "Hi"}],
            }
        )
        section = format_comments(JiraIssue.from_api_response(data))

        assert section.endswith("### Recent Comments:\n**Alice**:\nHi")
        assert "()" not in section

    def test_only_last_three_comments(self, full_issue):
        section = format_comments(full_issue)
        assert "Alice" not in section
        assert section.index("Bob") < section.index("Carol") < section.index("Dave")


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", "text"),
            ({"type": "doc", "content": []}, COMPLEX_CONTENT_PLACEHOLDER),
            (None, "[No description]"),
        ],
    )
    def test_format_rich_text(self, value, expected):
        assert format_rich_text(value) == expected

    def test_format_issue_summary(self, full_issue, minimal_issue):
        assert (
            format_issue_summary(full_issue)
            == "PIX-1234: Login fails on mobile [In Progress] - John Doe"
        )
        assert (
            format_issue_summary(minimal_issue)
            == "PROJ-1: Minimal issue [In Progress] - Unassigned"
        )
