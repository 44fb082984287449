"""
Mock credential table.

Stands in for a user database. Credentials are plaintext and fixed for the
lifetime of the process.
"""

from .models import CredentialRecord


DEMO_CREDENTIALS: tuple[CredentialRecord, ...] = (
    CredentialRecord(
        id="1",
        email="student@example.com",
        password="password123",
        name="Alex Student",
    ),
    CredentialRecord(
        id="2",
        email="learner@example.com",
        password="learn123",
        name="Jordan Learner",
    ),
)
