"""
Infrastructure adapters for the finances bounded context.
"""
