from datetime import date, datetime
from typing import Optional

import attrs


@attrs.define
class Enrollment:
    id: int
    user_id: int
    name: str = ''
    cpf: str = ''
    birthday: Optional[date] = None
    phone: str = ''
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
