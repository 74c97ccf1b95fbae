"""
Test suite for primkit.

Focus areas:
- Canonical serialization determinism
- Deep equality semantics
- Query tokenizing, normalizing and filtering
- Validation predicates and transformers
"""
