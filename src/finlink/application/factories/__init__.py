"""Factories for application-layer collaborators."""

from finlink.application.factories.repository_factory import (
    ReadTransactionProvider,
    RepositoryFactory,
)

__all__ = [
    "ReadTransactionProvider",
    "RepositoryFactory",
]
