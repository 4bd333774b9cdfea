"""
API layer for the blog backend.

Exposes the GraphQL endpoint at /graphql, the post image REST endpoints
(/post-image, /delete-image) and the top-level error formatting.
"""
