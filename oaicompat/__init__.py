"""Request and response dataclasses, endpoint request builders, stream reading, rate-limit
parsing and JSON schema helpers for OpenAI-compatible APIs."""

__version__ = "0.1.0"