from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Username of the caller, resolved from a verified bearer token.

    Built only at the API boundary and passed explicitly into every
    service call that needs to know who is acting.
    """
    username: str

    def matches(self, username: str) -> bool:
        return self.username == username
