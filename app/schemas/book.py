from pydantic import BaseModel

# Book create schema (addBook arguments)
class BookCreate(BaseModel):
    name: str
    author_id: int
