"""
Service layer package.

Services hold the validation and orchestration logic of the playlist
and are the only callers of the storage layer.  The API routers call
into services; they never touch the repository directly.
"""
