"""Description of a failed transit lookup, as shown to the user."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why an upstream lookup failed.

    status_code is set for HTTP failures and error_id for Navitia error
    envelopes (e.g. "unknown_object"). Transport failures carry neither.
    """

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    error_id: str | None = None

    def describe(self) -> str:
        """One-line summary such as "HTTP 503: Service Unavailable"."""
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {self.reason}"
        if self.error_id:
            return f"{self.error_id}: {self.reason}"
        return self.reason
