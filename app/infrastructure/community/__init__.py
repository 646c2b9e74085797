"""
Infrastructure adapters for the community bounded context.
"""
