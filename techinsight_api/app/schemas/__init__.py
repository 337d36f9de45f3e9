"""
Pydantic schema definitions for API payloads.

Request and response bodies for accounts and blog posts.  Schemas are
separated from the stored documents to decouple the API representation
from persistence; ``services.documents`` maps between the two.
"""
