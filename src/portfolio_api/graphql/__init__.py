"""
GraphQL schema for portfolio content
"""
