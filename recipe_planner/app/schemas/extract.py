from typing import Optional

from pydantic import BaseModel


class ExtractRequest(BaseModel):
    url: Optional[str] = None
