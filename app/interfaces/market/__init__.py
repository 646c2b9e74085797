"""
Interfaces for the market bounded context.
"""
