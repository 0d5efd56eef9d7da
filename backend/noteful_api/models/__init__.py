from noteful_api.models.folder import Folder
from noteful_api.models.note import Note

__all__ = ["Folder", "Note"]
