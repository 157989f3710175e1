"""Render JIRA issues as Markdown reports.

Each section is computed independently from a decoded ``JiraIssue``. Empty
sections are dropped, the rest are joined by a blank line, and the browse
link closes the report after a horizontal rule.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ..models.constants import UNASSIGNED, UNKNOWN
from ..models.jira import JiraComment, JiraIssue, JiraUser, adf_to_text
from ..utils.date import format_date, format_datetime
from .constants import (
    CUSTOM_FIELDS_MODE_ALLOWLIST,
    CUSTOM_FIELDS_MODE_GENERIC,
    DEFAULT_CUSTOM_FIELD_LABELS,
    RECENT_COMMENTS_LIMIT,
)

SECTION_SEPARATOR = "\n\n"
COMPLEX_CONTENT_PLACEHOLDER = "[Complex formatted content - view in JIRA]"
NO_CONTENT_PLACEHOLDER = "[No description]"


def format_rich_text(value: Any) -> str:
    """Render a description or comment body: plain text as is, ADF extracted."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return adf_to_text(value) or COMPLEX_CONTENT_PLACEHOLDER
    return NO_CONTENT_PLACEHOLDER


def _display_name(user: JiraUser | None, default: str = UNKNOWN) -> str:
    return user.display_name if user else default


def format_header(issue: JiraIssue) -> str:
    return f"# {issue.key}: {issue.summary}"


def format_basic_information(issue: JiraIssue) -> str:
    status = issue.status.name if issue.status else UNKNOWN
    if issue.status and issue.status.category:
        status = f"{status} ({issue.status.category.name})"

    project = UNKNOWN
    if issue.project:
        project = issue.project.name
        if issue.project.key:
            project = f"{project} ({issue.project.key})"

    lines = [
        "## Basic Information",
        f"- **Status**: {status}",
        f"- **Type**: {issue.issue_type.name if issue.issue_type else UNKNOWN}",
        f"- **Priority**: {issue.priority.name if issue.priority else UNKNOWN}",
        f"- **Project**: {project}",
    ]
    return "\n".join(lines)


def format_people(issue: JiraIssue) -> str:
    lines = [
        "## People",
        f"- **Assignee**: {_display_name(issue.assignee, UNASSIGNED)}",
        f"- **Reporter**: {_display_name(issue.reporter)}",
    ]
    return "\n".join(lines)


def format_parent_issue(issue: JiraIssue) -> str:
    if not issue.parent:
        return ""

    parent = issue.parent
    lines = ["## Parent Issue", f"- **{parent.key}**: {parent.summary}"]
    if parent.issue_type:
        lines.append(f"- **Type**: {parent.issue_type.name}")
    return "\n".join(lines)


def format_description(issue: JiraIssue) -> str:
    if issue.description is None or issue.description == "":
        return ""
    return f"## Description\n{format_rich_text(issue.description)}"


def format_labels(issue: JiraIssue) -> str:
    if not issue.labels:
        return ""
    return "\n".join(["## Labels", *(f"- {label}" for label in issue.labels)])


def format_fix_versions(issue: JiraIssue) -> str:
    if not issue.fix_versions:
        return ""

    lines = ["## Fix Versions"]
    for version in issue.fix_versions:
        release_status = "✓ Released" if version.released else "○ Unreleased"
        release_date = f" ({version.release_date})" if version.release_date else ""
        lines.append(f"- {version.name} {release_status}{release_date}")
    return "\n".join(lines)


def format_related_issues(issue: JiraIssue) -> str:
    lines = []
    for link in issue.issue_links:
        if link.outward_issue:
            lines.append(
                f"- **{link.type.outward}**: {link.outward_issue.key} - "
                f"{link.outward_issue.summary}"
            )
        if link.inward_issue:
            lines.append(
                f"- **{link.type.inward}**: {link.inward_issue.key} - "
                f"{link.inward_issue.summary}"
            )

    if not lines:
        return ""
    return "\n".join(["## Related Issues", *lines])


def collect_custom_fields(
    issue: JiraIssue,
    mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    labels: Mapping[str, str] | None = None,
) -> list[tuple[str, str]]:
    """
    Return ``(label, display value)`` pairs for the issue's custom fields.

    In allow-list mode only the configured identifiers are shown, under their
    friendly labels and in configuration order. In generic mode every custom
    field with a value is shown under its raw identifier, sorted.
    """
    if mode == CUSTOM_FIELDS_MODE_GENERIC:
        selected = [(field_id, field_id) for field_id in sorted(issue.custom_fields)]
    else:
        if labels is None:
            labels = DEFAULT_CUSTOM_FIELD_LABELS
        selected = list(labels.items())

    entries = []
    for field_id, label in selected:
        value = issue.get_custom_field(field_id)
        text = value.display() if value else None
        if text:
            entries.append((label, text))
    return entries


def format_custom_fields(
    issue: JiraIssue,
    mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    labels: Mapping[str, str] | None = None,
) -> str:
    entries = collect_custom_fields(issue, mode, labels)
    if not entries:
        return ""
    lines = ["## Pix Custom Fields"]
    lines.extend(f"- **{label}**: {text}" for label, text in entries)
    return "\n".join(lines)


def _comment_heading(comment: JiraComment) -> str:
    author = f"**{_display_name(comment.author)}**"
    created = format_date(comment.created)
    return f"{author} ({created}):" if created else f"{author}:"


def format_comments(issue: JiraIssue) -> str:
    if issue.comment_total == 0:
        return ""

    parts = [f"## Comments\nTotal comments: {issue.comment_total}"]

    recent = issue.comments[-RECENT_COMMENTS_LIMIT:]
    if recent:
        blocks = [
            f"{_comment_heading(comment)}\n{format_rich_text(comment.body)}"
            for comment in recent
        ]
        parts.append("### Recent Comments:\n" + SECTION_SEPARATOR.join(blocks))
    return SECTION_SEPARATOR.join(parts)


def format_timeline(issue: JiraIssue) -> str:
    lines = []
    if issue.created:
        lines.append(f"- **Created**: {format_datetime(issue.created)}")
    if issue.updated:
        lines.append(f"- **Updated**: {format_datetime(issue.updated)}")

    if not lines:
        return ""
    return "\n".join(["## Timeline", *lines])


def format_issue_link(issue: JiraIssue) -> str:
    url = issue.browse_url
    if not url:
        return ""
    return f"---\n**View in JIRA**: {url}"


def format_issue(
    issue: JiraIssue,
    custom_fields_mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    custom_field_labels: Mapping[str, str] | None = None,
) -> str:
    """
    Format a JIRA issue as a Markdown report.

    Args:
        issue: The decoded issue
        custom_fields_mode: ``allowlist`` or ``generic``
        custom_field_labels: Friendly labels for allow-list mode (defaults to
            the Pix custom fields)

    Returns:
        The report text
    """
    sections: list[Callable[[JiraIssue], str]] = [
        format_header,
        format_basic_information,
        format_people,
        format_parent_issue,
        format_description,
        format_labels,
        format_fix_versions,
        format_related_issues,
        lambda i: format_custom_fields(i, custom_fields_mode, custom_field_labels),
        format_comments,
        format_timeline,
        format_issue_link,
    ]
    rendered = (section(issue) for section in sections)
    return SECTION_SEPARATOR.join(text for text in rendered if text)


def format_issue_summary(issue: JiraIssue) -> str:
    """Format an issue as a single line: ``KEY: summary [status] - assignee``."""
    status = issue.status.name if issue.status else UNKNOWN
    assignee = _display_name(issue.assignee, UNASSIGNED)
    return f"{issue.key}: {issue.summary} [{status}] - {assignee}"
