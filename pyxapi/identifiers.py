"""
Inverse Functional Identifiers (IFIs).

An IFI uniquely identifies an Agent or an identified Group. The family is
closed: an actor carries exactly one of Mailbox, MailboxSha1Sum, OpenID or
Account.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import ClassVar

from .validation_rules import AbsoluteIriRule, NonEmptyStringRule, PatternRule, ValidationRule, apply_rules

MAILTO_PREFIX = "mailto:"

# local@domain, no whitespace
EMAIL_PATTERN = r"[^@\s]+@[^@\s]+"
SHA1_PATTERN = r"[0-9a-fA-F]{40}"


@dataclass(frozen=True)
class Mailbox:
    """An email address, stored without the ``mailto:`` scheme."""

    address: str

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (PatternRule("address", EMAIL_PATTERN),)

    def __post_init__(self):
        if isinstance(self.address, str) and self.address.lower().startswith(MAILTO_PREFIX):
            object.__setattr__(self, "address", self.address[len(MAILTO_PREFIX) :])
        apply_rules(self, self.VALIDATION_RULES)

    @property
    def iri(self) -> str:
        """The ``mailto:`` IRI used on the wire."""
        return f"{MAILTO_PREFIX}{self.address}"

    def __str__(self) -> str:
        return self.iri


@dataclass(frozen=True)
class MailboxSha1Sum:
    """The hex-encoded SHA1 hash of a mailto IRI."""

    sha1sum: str

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (PatternRule("sha1sum", SHA1_PATTERN),)

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)
        object.__setattr__(self, "sha1sum", self.sha1sum.lower())

    @classmethod
    def from_mailbox(cls, mailbox: Mailbox) -> MailboxSha1Sum:
        """Hash a mailbox the way xAPI defines it (SHA1 of the full mailto IRI)."""
        return cls(hashlib.sha1(mailbox.iri.encode("utf-8")).hexdigest())

    def __str__(self) -> str:
        return self.sha1sum


@dataclass(frozen=True)
class OpenID:
    """An openID URI that uniquely identifies the Agent."""

    uri: str

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (AbsoluteIriRule("uri"),)

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)

    def __str__(self) -> str:
        return self.uri


@dataclass(frozen=True)
class Account:
    """A user account on an existing system, e.g. an LMS."""

    home_page: str
    name: str

    VALIDATION_RULES: ClassVar[tuple[ValidationRule, ...]] = (
        AbsoluteIriRule("home_page"),
        NonEmptyStringRule("name"),
    )

    def __post_init__(self):
        apply_rules(self, self.VALIDATION_RULES)


InverseFunctionalIdentifier = Mailbox | MailboxSha1Sum | OpenID | Account

IFI_TYPES = (Mailbox, MailboxSha1Sum, OpenID, Account)
