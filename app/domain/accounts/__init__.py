"""
Accounts bounded context, domain layer.

Profile access lifecycle (trial expiration) and direct messages
addressed to users.
"""
