"""
Infrastructure adapters for the operations bounded context.
"""
