from typing import Dict, List

from pydantic import BaseModel


class UsersResponse(BaseModel):
    msg: str = "All users"
    res: List[Dict[str, str]]
