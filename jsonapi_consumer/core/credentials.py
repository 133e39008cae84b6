"""Credential context passed explicitly to every upstream call."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Email/token pair accepted by the upstream token authentication."""

    email: str
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.email or not self.email.strip():
            raise ValueError("Credentials require an email.")
        if not self.token or not self.token.strip():
            raise ValueError("Credentials require a token.")

    def authorization_header(self) -> str:
        """Return the value for the upstream Authorization header."""
        return f'Token token="{self.token}", email="{self.email}"'
