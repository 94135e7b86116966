#!/usr/bin/env python3
"""
Enterprise Paved-Road Standards
===============================
The fixed checklist every repository is audited against.

Each standard is an independent, side-effect-free existence check over a
repository directory. Checks look at the top-level listing only (plus one
fixed nested path where noted) and never recurse.

A check never raises: a path that is missing, unreadable or not a
directory simply provides no evidence, and the standard is reported as
not met.

Author: Risk Armor
License: Proprietary - All Rights Reserved
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

CheckFunction = Callable[[Path], Awaitable[bool]]

# ================================================================================
# DETECTION PATTERNS
# ================================================================================

# Compared against lowercased top-level names
CODE_OF_CONDUCT_FILES = frozenset([
    'code_of_conduct.md',
    'code-of-conduct.md',
    'code_of_conduct.txt',
    'code-of-conduct.txt',
    'conduct.md',
    'codeofconduct.md'
])

# Exact, case-sensitive names
CI_CONFIG_FILES = frozenset([
    '.travis.yml',
    '.circleci',
    'Jenkinsfile',
    '.gitlab-ci.yml'
])

PACKAGE_MANIFEST_FILES = frozenset([
    'package.json',         # Node.js
    'pom.xml',              # Maven
    'build.gradle',         # Gradle
    'Cargo.toml',           # Rust
    'go.mod',               # Go
    'requirements.txt',     # Python (pip)
    'setup.py',             # Python (setuptools)
    'pyproject.toml'        # Python (PEP 518)
])

TEST_DIRECTORIES = ('test', 'tests', '__tests__', 'spec')
TEST_NAME_MARKERS = ('test', 'spec')
TEST_FILE_SUFFIXES = ('.test.js', '.test.ts', '.spec.js', '.spec.ts')

GITHUB_SECURITY_POLICY = Path('.github') / 'SECURITY.md'
GITHUB_WORKFLOWS_DIR = Path('.github') / 'workflows'

# ================================================================================
# FILESYSTEM QUERIES
# ================================================================================

def _listdir(path: Path) -> List[str]:
    try:
        return os.listdir(path)
    except (OSError, ValueError) as e:
        # ValueError: path not encodable for the filesystem (lone surrogates)
        logger.debug(f"Cannot list {path}: {e}")
        return []


async def _list_entries(path: Path) -> List[str]:
    """Top-level entry names of ``path``; empty when it cannot be listed."""
    return await asyncio.to_thread(_listdir, path)


async def _exists(path: Path) -> bool:
    return await asyncio.to_thread(os.path.exists, path)


async def _is_dir(path: Path) -> bool:
    return await asyncio.to_thread(os.path.isdir, path)


# ================================================================================
# CHECKS
# ================================================================================

async def has_readme(repo_path: Path) -> bool:
    """README.md in any letter case."""
    entries = await _list_entries(repo_path)
    return any(name.lower() == 'readme.md' for name in entries)


async def has_license(repo_path: Path) -> bool:
    """LICENSE, LICENSE.md, License.txt, ..."""
    entries = await _list_entries(repo_path)
    return any(name.lower().startswith('license') for name in entries)


async def has_gitignore(repo_path: Path) -> bool:
    return await _exists(repo_path / '.gitignore')


async def has_contributing(repo_path: Path) -> bool:
    entries = await _list_entries(repo_path)
    return any(name.lower().startswith('contributing') for name in entries)


async def has_code_of_conduct(repo_path: Path) -> bool:
    entries = await _list_entries(repo_path)
    return any(name.lower() in CODE_OF_CONDUCT_FILES for name in entries)


async def has_security_policy(repo_path: Path) -> bool:
    """SECURITY* at the top level, or GitHub's .github/SECURITY.md."""
    entries = await _list_entries(repo_path)
    if any(name.lower().startswith('security') for name in entries):
        return True
    return await _exists(repo_path / GITHUB_SECURITY_POLICY)


async def has_ci_cd(repo_path: Path) -> bool:
    """
    GitHub Actions workflows directory with at least one entry, or one of
    the well-known configuration files of other CI providers.
    """
    workflows = await _list_entries(repo_path / GITHUB_WORKFLOWS_DIR)
    if workflows:
        return True

    entries = await _list_entries(repo_path)
    return any(name in CI_CONFIG_FILES for name in entries)


async def has_package_manifest(repo_path: Path) -> bool:
    entries = await _list_entries(repo_path)
    return any(name in PACKAGE_MANIFEST_FILES for name in entries)


async def has_tests(repo_path: Path) -> bool:
    """
    A conventional test directory, or a top-level file that looks like a
    test (name mentions test/spec, or uses a JS/TS test suffix).
    """
    for directory in TEST_DIRECTORIES:
        if await _is_dir(repo_path / directory):
            return True

    entries = await _list_entries(repo_path)
    for name in entries:
        lowered = name.lower()
        if any(marker in lowered for marker in TEST_NAME_MARKERS):
            return True
        if lowered.endswith(TEST_FILE_SUFFIXES):
            return True
    return False


async def has_changelog(repo_path: Path) -> bool:
    entries = await _list_entries(repo_path)
    return any(name.lower().startswith('changelog') for name in entries)


# ================================================================================
# STANDARD DEFINITIONS
# ================================================================================

@dataclass(frozen=True)
class Standard:
    """A single paved-road standard.

    Attributes:
        id: Stable identifier (e.g. ``readme``)
        name: Human-readable name used in reports
        description: What the standard expects
        recommendation: Remediation text shown when the standard is not met
        check: Coroutine function deciding compliance for a repository path
    """
    id: str
    name: str
    description: str
    recommendation: str
    check: CheckFunction

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'recommendation': self.recommendation
        }


PAVED_ROAD_STANDARDS: Tuple[Standard, ...] = (
    Standard(
        id='readme',
        name='README file',
        description='Repository should have a README.md file',
        recommendation='Add a README.md file to explain what the project does, how to install and use it.',
        check=has_readme
    ),
    Standard(
        id='license',
        name='LICENSE file',
        description='Repository should have a LICENSE file',
        recommendation='Add a LICENSE file to clarify how others can use your code.',
        check=has_license
    ),
    Standard(
        id='gitignore',
        name='.gitignore file',
        description='Repository should have a .gitignore file',
        recommendation='Add a .gitignore file to exclude build artifacts and dependencies from version control.',
        check=has_gitignore
    ),
    Standard(
        id='contributing',
        name='CONTRIBUTING guidelines',
        description='Repository should have CONTRIBUTING guidelines',
        recommendation='Add a CONTRIBUTING.md file to guide contributors on how to participate in the project.',
        check=has_contributing
    ),
    Standard(
        id='code_of_conduct',
        name='Code of Conduct',
        description='Repository should have a Code of Conduct',
        recommendation='Add a CODE_OF_CONDUCT.md file to establish community guidelines and expectations.',
        check=has_code_of_conduct
    ),
    Standard(
        id='security',
        name='Security Policy',
        description='Repository should have a security policy',
        recommendation='Add a SECURITY.md file to explain how to report security vulnerabilities.',
        check=has_security_policy
    ),
    Standard(
        id='ci_cd',
        name='CI/CD Configuration',
        description='Repository should have CI/CD configuration',
        recommendation='Add CI/CD configuration (e.g., GitHub Actions workflows) to automate testing and deployment.',
        check=has_ci_cd
    ),
    Standard(
        id='package_manifest',
        name='Package Manifest',
        description='Repository should have a package manifest file',
        recommendation='Add a package manifest file (e.g., package.json, requirements.txt) to define dependencies.',
        check=has_package_manifest
    ),
    Standard(
        id='tests',
        name='Test Files',
        description='Repository should have test files',
        recommendation='Add test files to ensure code quality and prevent regressions.',
        check=has_tests
    ),
    Standard(
        id='changelog',
        name='CHANGELOG file',
        description='Repository should have a CHANGELOG to track changes',
        recommendation='Add a CHANGELOG.md file to document version history and notable changes.',
        check=has_changelog
    ),
)


def list_standards() -> List[Dict[str, str]]:
    """Public description of every paved-road standard, in audit order."""
    return [standard.to_dict() for standard in PAVED_ROAD_STANDARDS]
