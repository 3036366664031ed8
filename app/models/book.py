from pydantic import BaseModel, ConfigDict
from typing import ClassVar

#Book
class Book(BaseModel):
    """Book record. `author_id` is not checked against the authors collection."""
    id: int
    name: str
    author_id: int

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
