"""Known Percona operators and where their artifacts live."""

from __future__ import annotations

from percona_digests.core.errors import UnsupportedOperator
from percona_digests.models import OperatorProfile

ALL_OPERATORS = "all"

OPERATORS: dict[str, OperatorProfile] = {
    "pxc": OperatorProfile(
        name="pxc",
        github_repo="percona/percona-xtradb-cluster-operator",
        docs_base_url="https://docs.percona.com/percona-operator-for-mysql/pxc/ReleaseNotes",
        docs_pattern="Kubernetes-Operator-for-PXC-RN%s.html",
        config_file="percona-pxc-versions.json",
    ),
    "postgresql": OperatorProfile(
        name="postgresql",
        github_repo="percona/percona-postgresql-operator",
        docs_base_url="https://docs.percona.com/percona-operator-for-postgresql/2.0/ReleaseNotes",
        docs_pattern="Kubernetes-Operator-for-PostgreSQL-RN%s.html",
        config_file="percona-postgresql-versions.json",
    ),
}


def get_operator(name: str) -> OperatorProfile:
    """Look up a single operator profile by name."""
    profile = OPERATORS.get(name)
    if profile is None:
        raise UnsupportedOperator(
            f"Unsupported operator: {name}. Supported: {', '.join(OPERATORS)}"
        )
    return profile


def select_operators(name: str) -> list[OperatorProfile]:
    """Expand an --operator value into the profiles to process, in order."""
    if name == ALL_OPERATORS:
        return list(OPERATORS.values())
    return [get_operator(name)]
