from pydantic import BaseModel

# Author create schema (addAuthor arguments)
class AuthorCreate(BaseModel):
    name: str
