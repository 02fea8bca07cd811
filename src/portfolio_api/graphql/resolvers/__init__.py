"""Resolver package for the GraphQL schema.

Resolvers are plain async functions called by the query root. They read
through the fetch pipeline in :mod:`portfolio_api.database.pipeline`.
"""
