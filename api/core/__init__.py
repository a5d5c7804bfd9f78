"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks every resource uses (DB handle, settings,
logging, response envelope, error translation). Keep resource-specific SQL in
the corresponding feature package (e.g. `users/`).
"""
