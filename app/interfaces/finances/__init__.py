"""
Interfaces for the finances bounded context.
"""
