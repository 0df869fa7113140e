"""
High-level use cases for the school board API.

Service modules orchestrate the persistence layer to implement the board's
rules (publish a post, delete a post, read the board). Routers call these
services instead of manipulating the JSON document directly.
"""
