"""
Finances bounded context, domain layer.

This module contains the domain logic for personal finances:
- Recurring transaction templates and their schedule
- Ledger transactions generated from templates
- Notifications emitted when a template is executed
"""
