"""
Interfaces for the community bounded context.
"""
