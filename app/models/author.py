from pydantic import BaseModel, ConfigDict
from typing import ClassVar

#Author
class Author(BaseModel):
    """Author record held by the in-memory store. Never mutated after append."""
    id: int
    name: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
