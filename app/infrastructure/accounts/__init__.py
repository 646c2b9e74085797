"""
Infrastructure adapters for the accounts bounded context.
"""
