from ipaddress import ip_address

from pydantic import BaseModel, Field, field_validator


class IPLookupRequest(BaseModel):
    """Query parameters of /v1/ip/lookup.

    `ip` is optional: without it the caller's own address is looked up.
    """

    ip: str | None = Field(
        default=None,
        description="IPv4 or IPv6 address to locate. Omit it (or leave it blank) to locate the caller.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _validate_ip(cls, value: str | None) -> str | None:
        """Blank means "not given"; anything else must parse as an IP literal.

        Accepted addresses come back in canonical form, so IPv6 is compressed and
        lower-cased before it reaches a backend.
        """
        if value is None or not str(value).strip():
            return None

        try:
            address = ip_address(str(value).strip())
        except ValueError as exc:
            raise ValueError("ip must be a valid IPv4 or IPv6 address") from exc

        return str(address)
