from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    """Verified payload of a bearer token. Timestamps are UTC unix seconds."""
    subject: int
    issued_at: int
    expires_at: int

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
