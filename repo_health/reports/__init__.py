"""
Reporting Module
================
Issue-tracker rendering of audit results.
"""

from .issue_formatter import IssueContent, create_issue_content, render_issue_preview

__all__ = ['IssueContent', 'create_issue_content', 'render_issue_preview']
