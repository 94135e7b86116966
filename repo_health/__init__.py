#!/usr/bin/env python3
"""
Repository Health MCP Server
============================

Audits a repository directory against enterprise paved-road standards
(README, LICENSE, CI configuration, tests, ...) and reports:

1. A structured compliance summary with a 0-100% score
2. A natural-language narrative explaining the gaps
3. Issue-tracker content for following up on the gaps

The audits are exposed as MCP tools over stdio (see ``repo_health.server``).

Author: Risk Armor
License: Proprietary - All Rights Reserved
"""

__version__ = "1.0.0"
__author__ = "Risk Armor"

from repo_health.auditing import RepositoryAuditor, audit_repository
from repo_health.reports import create_issue_content

__all__ = ['RepositoryAuditor', 'audit_repository', 'create_issue_content']
