"""
Mock integration clients.

These clients return fake (but realistic) upstream payloads without calling
the pricing source. They are used when:
- The upstream APEX instance is unreachable from a developer machine
- We want to exercise the endpoints end-to-end without network access

Mock clients must follow the SAME interface as the real HTTP clients.
"""
