#!/usr/bin/env python3
"""
Repository Health Issue Formatter
=================================
Turns an AuditSummary into issue-tracker content: a one-line title and a
Markdown body listing action items and the standards already met.

Nothing is posted anywhere; callers paste or submit the content
themselves.

Author: Risk Armor
"""

from dataclasses import dataclass
from typing import Dict

from repo_health.auditing.auditor import AuditSummary

ISSUE_FOOTER = (
    "*This issue was created by the Repository Health MCP server "
    "to track compliance with enterprise standards.*"
)


@dataclass
class IssueContent:
    """Title and Markdown body of a repository health issue."""
    title: str
    body: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'title': self.title,
            'body': self.body
        }


def create_issue_content(summary: AuditSummary) -> IssueContent:
    """
    Build issue content for an audit.

    The body contains:
    - Header with the overall compliance fraction
    - "Action Items" for every standard not met (omitted if none)
    - "Standards Already Met" (omitted if none)
    - Attribution footer

    Args:
        summary: Result of a repository audit

    Returns:
        IssueContent ready to paste into an issue tracker
    """
    title = (
        f"Repository Health: {summary.compliance_percentage}% "
        f"compliance with paved-road standards"
    )

    body = "## Repository Health Audit\n\n"
    body += "This repository was audited against enterprise paved-road standards.\n\n"
    body += (
        f"**Overall Compliance:** {summary.compliance_percentage}% "
        f"({summary.compliant_standards}/{summary.total_standards} standards met)\n\n"
    )

    gaps = summary.gaps
    if gaps:
        body += "### 🔧 Action Items\n\n"
        for index, item in enumerate(gaps, start=1):
            body += f"#### {index}. {item.standard}\n"
            body += f"{item.description}\n\n"
            body += f"**Recommendation:** {item.recommendation}\n\n"

    met = summary.met
    if met:
        body += "### ✅ Standards Already Met\n\n"
        for item in met:
            body += f"- {item.standard}\n"

    body += "\n---\n"
    body += ISSUE_FOOTER

    return IssueContent(title=title, body=body)


def render_issue_preview(issue: IssueContent) -> str:
    """Human-readable preview shown alongside the structured issue."""
    return f"\n\n## Preview:\n\n### {issue.title}\n\n{issue.body}"
