"""
Contracts (data models).

Defines the shapes exchanged with the upstream pricing source and returned
to storefront clients:
- Canonical pricing (internal, used for every computation)
- Display pricing (the "1 month" / "12 months" JSON shape)
- Plan and billing identifiers

Both mock and real pricing source clients feed these contracts.
"""
