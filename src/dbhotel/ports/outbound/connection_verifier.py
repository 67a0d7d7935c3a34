# src/dbhotel/ports/outbound/connection_verifier.py
"""
Abstract connection verifier interface.
"""

from abc import ABC, abstractmethod

from dbhotel.domain.model.connection_verification import ConnectionVerification


class ConnectionVerifier(ABC):
    """
    Opens one physical connection and reports the outcome.

    Contract: driver errors are reported as a failed ConnectionVerification,
    never raised.
    """

    @abstractmethod
    def verify(self, jdbc_url: str, username: str, password: str) -> ConnectionVerification:
        pass
