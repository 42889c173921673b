from typing import Optional

import attrs


@attrs.define(frozen=True)
class UserEntity:
    """Authenticated caller, rebuilt from the bearer token."""

    id: int
    email: Optional[str] = None
