"""Authentication token model."""

from pydantic import BaseModel, ConfigDict


class Token(BaseModel):
    """Credentials attached to every REST call. Immutable once obtained."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    auth_token: str

    def to_headers(self) -> dict[str, str]:
        """Return the request headers carrying this token."""
        return {"X-User-Id": self.user_id, "X-Auth-Token": self.auth_token}
