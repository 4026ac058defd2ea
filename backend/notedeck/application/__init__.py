"""
Application layer.

Use cases that expose the content store, the search index and the flashcard
generation pipeline to the outside world. Every public operation returns a
Result: a Success carrying the value or a Failure carrying a structured error.

This layer contains:
- Use cases: orchestrate domain objects and ports
- Protocols: ports implemented by the infrastructure layer
- Services: pure application logic (the generation contract)
"""
