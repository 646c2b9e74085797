"""
Interfaces for the accounts bounded context.
"""
