"""
Interfaces for the operations bounded context.
"""
