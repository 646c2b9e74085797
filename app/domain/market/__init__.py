"""
Market bounded context, domain layer.

Economic indicators from the central bank and a quote overview of
the main Brazilian market references.
"""
