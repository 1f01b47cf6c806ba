"""
Policy dataclass schema.

Immutable record of an issued term-assurance policy as seen by the
valuation engine. The engine reads policies and never writes back.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from term_assurance.config.settings import SETTINGS
from term_assurance.errors import InvalidArgumentError, validate_policy_terms


class PolicyStatus(Enum):
    """Administrative status of a policy record."""

    ACTIVE = "Active"
    PENDING_DOC = "Pending Doc"  # Issued, awaiting signed documents
    LAPSED = "Lapsed"
    MATURED = "Matured"

    @property
    def is_in_force(self) -> bool:
        """Only active policies carry a reserve."""
        return self is PolicyStatus.ACTIVE


@dataclass(frozen=True)
class Policy:
    """
    Term-assurance policy. [T1]

    Attributes
    ----------
    policy_id : str
        Policy identifier (e.g. "POL-8821")
    issue_age : float
        Age at inception (years, >= 0)
    sum_insured : float
        Death benefit (currency, > 0)
    inception_date : date
        Start of cover
    term : float
        Policy term in years (> 0). Defaults to the standard term n.
    status : PolicyStatus
        Administrative status; strings such as "Active" are accepted
    holder_name : str, optional
        Display name of the life insured

    Examples
    --------
    >>> policy = Policy(
    ...     policy_id="POL-8821",
    ...     issue_age=45,
    ...     sum_insured=500_000,
    ...     inception_date=date(2020, 5, 15),
    ... )
    >>> policy.term
    15
    """

    policy_id: str
    issue_age: float
    sum_insured: float
    inception_date: date
    term: float = SETTINGS.assumptions.n
    status: PolicyStatus = PolicyStatus.ACTIVE
    holder_name: str | None = None

    def __post_init__(self) -> None:
        """Validate policy fields."""
        validate_policy_terms(self.issue_age, self.sum_insured, self.term)
        if not isinstance(self.inception_date, date):
            raise InvalidArgumentError(
                f"CRITICAL: inception_date must be a date, got {self.inception_date!r}"
            )
        if not isinstance(self.status, PolicyStatus):
            try:
                status = PolicyStatus(self.status)
            except ValueError as e:
                valid = ", ".join(s.value for s in PolicyStatus)
                raise InvalidArgumentError(
                    f"CRITICAL: status must be one of {valid}, got {self.status!r}"
                ) from e
            # Frozen dataclass workaround: use object.__setattr__
            object.__setattr__(self, "status", status)

    @property
    def is_in_force(self) -> bool:
        """Whether the policy contributes to a portfolio valuation."""
        return self.status.is_in_force
