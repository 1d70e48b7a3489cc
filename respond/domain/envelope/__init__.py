"""
Envelope bounded context: domain layer.

- Envelope entities (success / error variants)
- Error kind catalog
- Message formatting
- Transport and localization ports
"""
