"""
Natural-Language Audit Summary
==============================
Turns per-standard results into the tiered narrative returned with every
audit. Output is a pure function of its inputs.
"""

from typing import Sequence

# Lower bound of each tier, checked from the top; 100 is matched exactly
TIER_THRESHOLDS = {
    "good": 70,
    "fair": 40,
}

TIER_MESSAGES = {
    "excellent": "🎉 Excellent! This repository meets all enterprise paved-road standards.",
    "good": "✅ Good! This repository meets most standards but has room for improvement.",
    "fair": "⚠️  Fair. This repository meets some standards but needs significant improvements.",
    "needs_attention": "❌ Needs Attention. This repository is missing many important standards.",
}


def compliance_tier(compliance_percentage: int) -> str:
    """Map a compliance percentage to its tier key."""
    if compliance_percentage == 100:
        return "excellent"
    elif compliance_percentage >= TIER_THRESHOLDS["good"]:
        return "good"
    elif compliance_percentage >= TIER_THRESHOLDS["fair"]:
        return "fair"
    else:
        return "needs_attention"


def generate_natural_language_summary(
    results: Sequence,
    compliant_count: int,
    non_compliant_count: int,
    compliance_percentage: int
) -> str:
    """
    Build the narrative for an audit.

    Args:
        results: StandardResult objects in rule-set order
        compliant_count: Number of standards met
        non_compliant_count: Number of standards not met
        compliance_percentage: Rounded compliance percentage (0-100)

    Returns:
        Multi-line summary: header, tier line, met standards, gaps
    """
    compliant_items = [r.standard for r in results if r.compliant]
    non_compliant_items = [r for r in results if not r.compliant]

    lines = [
        "Repository Health Audit Summary:\n\n",
        f"Overall Compliance: {compliance_percentage}% "
        f"({compliant_count}/{len(results)} standards met)\n\n",
        TIER_MESSAGES[compliance_tier(compliance_percentage)] + "\n",
    ]

    if compliant_items:
        lines.append("\n✅ Standards Met:\n")
        for name in compliant_items:
            lines.append(f"  • {name}\n")

    if non_compliant_items:
        lines.append(f"\n❌ Gaps Found ({non_compliant_count}):\n")
        for item in non_compliant_items:
            lines.append(f"  • {item.standard}: {item.recommendation}\n")

    return "".join(lines)
