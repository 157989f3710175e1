"""Prompt builders for the MCP Pix JIRA server."""

from .analyze_ticket import (
    AnalysisPromptResult,
    build_analysis_prompt,
    create_analysis_prompt_message,
    format_issue_for_analysis,
)

__all__ = [
    "AnalysisPromptResult",
    "build_analysis_prompt",
    "create_analysis_prompt_message",
    "format_issue_for_analysis",
]
