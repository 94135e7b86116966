#!/usr/bin/env python3
"""
Tests for the repository auditor: aggregation invariants, per-standard
results and path validation.
"""

import asyncio

import pytest

from repo_health.auditing.auditor import (
    RepositoryAuditor,
    audit_repository,
    compliance_percentage,
)
from repo_health.auditing.standards import Standard
from repo_health.security.validators import ValidationError


def audit(path, **kwargs):
    return asyncio.run(RepositoryAuditor(**kwargs).audit(str(path)))


def assert_invariants(summary):
    assert summary.compliant_standards + summary.non_compliant_standards == summary.total_standards
    assert summary.total_standards == len(summary.results)
    assert summary.compliance_percentage == compliance_percentage(
        summary.compliant_standards, summary.total_standards
    )


def test_empty_repository_scores_zero(empty_repo):
    summary = audit(empty_repo)

    assert summary.compliance_percentage == 0
    assert summary.total_standards == 10
    assert summary.compliant_standards == 0
    for result in summary.results:
        assert result.compliant is False
        assert result.recommendation
    assert_invariants(summary)


def test_nonexistent_path_scores_zero(tmp_path):
    missing = tmp_path / "nowhere"
    summary = asyncio.run(audit_repository(str(missing)))

    assert summary.repo_path == str(missing)
    assert summary.compliance_percentage == 0
    assert summary.non_compliant_standards == 10
    assert_invariants(summary)


def test_fully_compliant_repository(compliant_repo):
    summary = audit(compliant_repo)

    assert summary.compliance_percentage == 100
    assert summary.gaps == []
    assert all(r.recommendation is None for r in summary.results)
    assert_invariants(summary)


def test_case_variants_are_compliant(make_repo):
    repo = make_repo(["README.md", "License.txt", "Contributing.MD", "CHANGELOG"])
    summary = audit(repo)

    met = {r.standard for r in summary.met}
    assert met == {"README file", "LICENSE file", "CONTRIBUTING guidelines", "CHANGELOG file"}
    assert summary.compliance_percentage == 40
    assert_invariants(summary)


def test_results_follow_rule_set_order(make_repo):
    summary = audit(make_repo(["CHANGELOG.md", "README.md"]))
    names = [r.standard for r in summary.results]
    assert names[0] == "README file"
    assert names[-1] == "CHANGELOG file"


def test_audit_reads_without_writing(compliant_repo):
    before = sorted(p.relative_to(compliant_repo) for p in compliant_repo.rglob("*"))
    audit(compliant_repo)
    after = sorted(p.relative_to(compliant_repo) for p in compliant_repo.rglob("*"))
    assert before == after


def test_summary_to_dict_wire_format(make_repo):
    summary = audit(make_repo(["README.md"]))
    data = summary.to_dict()

    assert list(data) == [
        "repoPath",
        "totalStandards",
        "compliantStandards",
        "nonCompliantStandards",
        "compliancePercentage",
        "results",
        "naturalLanguageSummary",
    ]
    readme, license_ = data["results"][0], data["results"][1]
    assert readme == {
        "standard": "README file",
        "compliant": True,
        "description": "Repository should have a README.md file",
    }
    assert license_["compliant"] is False
    assert "recommendation" in license_


def test_narrative_is_attached(make_repo):
    summary = audit(make_repo(["README.md"]))
    assert summary.narrative.startswith("Repository Health Audit Summary:")
    assert "Overall Compliance: 10% (1/10 standards met)" in summary.narrative


@pytest.mark.parametrize("bad_path", [None, 42, ["repo"], "", "   ", "repo\x00name"])
def test_structurally_invalid_paths_raise(bad_path):
    with pytest.raises(ValidationError):
        asyncio.run(RepositoryAuditor().audit(bad_path))


def test_path_length_limit(tmp_path):
    with pytest.raises(ValidationError):
        audit(tmp_path / ("x" * 50), max_path_length=10)


def test_base_dir_restriction(tmp_path, make_repo):
    repo = make_repo(["README.md"])
    assert audit(repo, base_dir=str(tmp_path)).compliant_standards == 1

    with pytest.raises(ValidationError):
        audit(tmp_path.parent, base_dir=str(tmp_path))


# ================================================================================
# PERCENTAGE ROUNDING
# ================================================================================

@pytest.mark.parametrize("compliant,total,expected", [
    (0, 10, 0),
    (7, 10, 70),
    (10, 10, 100),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),     # 12.5 rounds up
    (3, 8, 38),     # 37.5 rounds up
    (5, 8, 63),     # 62.5 rounds up
    (0, 0, 0),
])
def test_compliance_percentage_rounds_half_up(compliant, total, expected):
    assert compliance_percentage(compliant, total) == expected


def _constant_standard(standard_id, result):
    async def _check(path):
        return result
    return Standard(
        id=standard_id,
        name=standard_id.title(),
        description=f"{standard_id} description",
        recommendation=f"Fix {standard_id}",
        check=_check
    )


def test_custom_rule_set_half_percentage(empty_repo):
    rules = [_constant_standard("a", True)] + [
        _constant_standard(f"gap{i}", False) for i in range(7)
    ]
    summary = audit(empty_repo, standards=rules)

    assert summary.total_standards == 8
    assert summary.compliance_percentage == 13
    assert_invariants(summary)


def test_unencodable_path_scores_zero():
    summary = asyncio.run(audit_repository("\ud800repo"))

    assert summary.compliance_percentage == 0
    assert summary.non_compliant_standards == 10
    assert_invariants(summary)
