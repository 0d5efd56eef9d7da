"""
Noteful API — Resource Services
================================

What:  One service per table, sitting between routes (HTTP) and the database.

Service Inventory:
    - FolderService: list / get-by-id / insert on `folders`
    - NoteService:   list / get-by-id / insert / delete-by-id on `notes`

Each service is constructed per request around the request's AsyncSession
(see get_folder_service / get_note_service), so there is no shared mutable
state between concurrent requests.
"""
