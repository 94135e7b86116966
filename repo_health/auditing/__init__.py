#!/usr/bin/env python3
"""
Repository Health Auditing
==========================

Checklist evaluation for repository hygiene:

1. Standards: the fixed, ordered paved-road checklist
2. Auditor: runs every standard against a path and aggregates the score
3. Summary: tiered natural-language narrative of the result

Author: Risk Armor
License: Proprietary - All Rights Reserved
"""

from .auditor import AuditSummary, RepositoryAuditor, StandardResult, audit_repository
from .standards import PAVED_ROAD_STANDARDS, Standard, list_standards
from .summary import generate_natural_language_summary

__all__ = [
    'AuditSummary',
    'RepositoryAuditor',
    'StandardResult',
    'audit_repository',
    'PAVED_ROAD_STANDARDS',
    'Standard',
    'list_standards',
    'generate_natural_language_summary'
]
