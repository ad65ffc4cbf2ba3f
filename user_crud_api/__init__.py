"""
Top-level package for the User CRUD API.

All functionality lives in submodules under ``app``; import the
application as ``user_crud_api.app.main:app``.
"""
