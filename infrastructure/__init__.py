"""Infrastructure Layer.

Adapters between domain Value Objects and third-party representations.
The domain layer never imports from here.
"""
