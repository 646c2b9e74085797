"""
Operations bounded context, domain layer.

Journal of trading operations:
- Brokerage note extraction and import confirmation
- AI-assisted strategy classification
- Bulk deletion by strategy or by date
"""
