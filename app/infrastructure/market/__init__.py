"""
Infrastructure adapters for the market bounded context.
"""
