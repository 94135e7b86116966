#!/usr/bin/env python3
"""
Repository Auditor
==================
Evaluates a repository directory against the paved-road standards and
aggregates the results into an AuditSummary.

The audit is read-only. A path that does not exist or cannot be read is
not an error: every standard simply reports non-compliance and the
repository scores 0%.

Author: Risk Armor
License: Proprietary - All Rights Reserved
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from repo_health.auditing.standards import PAVED_ROAD_STANDARDS, Standard
from repo_health.auditing.summary import generate_natural_language_summary
from repo_health.security.validators import DEFAULT_MAX_PATH_LENGTH, validate_repository_path

logger = logging.getLogger(__name__)


@dataclass
class StandardResult:
    """Outcome of one standard for one repository.

    Attributes:
        standard: Human-readable name of the standard
        compliant: Whether the artifact was detected
        description: What the standard expects
        recommendation: Remediation text, only set when not compliant
    """
    standard: str
    compliant: bool
    description: str
    recommendation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'standard': self.standard,
            'compliant': self.compliant,
            'description': self.description
        }
        if self.recommendation is not None:
            data['recommendation'] = self.recommendation
        return data


@dataclass
class AuditSummary:
    """Full result of one audit.

    Attributes:
        repo_path: Path exactly as supplied by the caller
        total_standards: Number of standards evaluated
        compliant_standards: Number of standards met
        non_compliant_standards: Number of standards not met
        compliance_percentage: round(100 * compliant / total), halves rounded up
        results: Per-standard results in rule-set order
        narrative: Natural-language summary of the audit
    """
    repo_path: str
    total_standards: int
    compliant_standards: int
    non_compliant_standards: int
    compliance_percentage: int
    results: List[StandardResult] = field(default_factory=list)
    narrative: str = ""

    @property
    def met(self) -> List[StandardResult]:
        return [r for r in self.results if r.compliant]

    @property
    def gaps(self) -> List[StandardResult]:
        return [r for r in self.results if not r.compliant]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'repoPath': self.repo_path,
            'totalStandards': self.total_standards,
            'compliantStandards': self.compliant_standards,
            'nonCompliantStandards': self.non_compliant_standards,
            'compliancePercentage': self.compliance_percentage,
            'results': [r.to_dict() for r in self.results],
            'naturalLanguageSummary': self.narrative
        }


def compliance_percentage(compliant_count: int, total_count: int) -> int:
    """
    Percentage of standards met, rounded half up.

    Python's round() rounds halves to even, so 12.5 would become 12;
    halves are rounded up here instead (12.5 -> 13). An empty rule set
    scores 0.
    """
    if total_count == 0:
        return 0
    return int(math.floor(100 * compliant_count / total_count + 0.5))


class RepositoryAuditor:
    """
    Runs a set of standards against repository paths.

    The auditor holds no per-call state; one instance can serve any
    number of concurrent audits.
    """

    def __init__(self, standards: Sequence[Standard] = PAVED_ROAD_STANDARDS,
                 base_dir: Optional[str] = None,
                 max_path_length: int = DEFAULT_MAX_PATH_LENGTH):
        """
        Initialize the auditor.

        Args:
            standards: Standards to evaluate, in reporting order
            base_dir: Restrict audits to paths inside this directory
            max_path_length: Longest accepted repository path
        """
        self.standards = tuple(standards)
        self.base_dir = base_dir
        self.max_path_length = max_path_length

    async def audit(self, repo_path: str) -> AuditSummary:
        """
        Audit a repository.

        Args:
            repo_path: Path to the repository directory

        Returns:
            AuditSummary with per-standard results and the narrative

        Raises:
            ValidationError: If repo_path is not a usable path string
        """
        path = validate_repository_path(
            repo_path,
            base_dir=self.base_dir,
            max_length=self.max_path_length
        )
        logger.info(f"Auditing repository: {repo_path}")

        results = []
        for standard in self.standards:
            compliant = await standard.check(path)
            logger.debug(f"{standard.id}: {'met' if compliant else 'missing'}")
            results.append(StandardResult(
                standard=standard.name,
                compliant=compliant,
                description=standard.description,
                recommendation=None if compliant else standard.recommendation
            ))

        compliant_count = sum(1 for r in results if r.compliant)
        non_compliant_count = len(results) - compliant_count
        percentage = compliance_percentage(compliant_count, len(results))

        narrative = generate_natural_language_summary(
            results,
            compliant_count,
            non_compliant_count,
            percentage
        )

        logger.info(
            f"Audit complete for {repo_path}: "
            f"{compliant_count}/{len(results)} standards met ({percentage}%)"
        )

        return AuditSummary(
            repo_path=repo_path,
            total_standards=len(results),
            compliant_standards=compliant_count,
            non_compliant_standards=non_compliant_count,
            compliance_percentage=percentage,
            results=results,
            narrative=narrative
        )


async def audit_repository(repo_path: str) -> AuditSummary:
    """Audit ``repo_path`` against the default paved-road standards."""
    return await RepositoryAuditor().audit(repo_path)
