"""Generators of unique identifiers."""

import abc
import uuid


class UUIDer(abc.ABC):
    @abc.abstractmethod
    def generate(self) -> str:
        """Return a new identifier."""


class RandomUUIDer(UUIDer):
    """Random version-4 UUIDs in canonical text form."""

    def generate(self) -> str:
        text = str(uuid.uuid4())
        if not text:
            raise ValueError("invalid generated uuid")
        return text