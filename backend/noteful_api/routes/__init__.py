"""
Noteful API — API Routes Package
=================================

Route Inventory:
    - folders.py:  GET  /folders              (list folders)
                   POST /folders              (create folder)
                   GET  /folders/{id}         (get single folder)
    - notes.py:    GET  /notes                (list notes)
                   POST /notes                (create note)
                   GET  /notes/{id}           (get single note)
                   DELETE /notes/{id}         (delete note)
    - health.py:   GET  /health               (service health check)

Routes are thin: they check required fields, call a resource service,
and pick status codes and headers. Queries live in services/.
"""
