"""Classifier Port - classification capability used by the HTTP layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import ClassificationResult, ClassificationSubject


class ClassifierPort(ABC):
    """Classify a subject into a validated result.

    The production implementation is OracleGateway. Tests swap in a
    deterministic stub.
    """

    @abstractmethod
    async def classify(
        self,
        subject: ClassificationSubject,
        dirty: bool,
    ) -> ClassificationResult:
        """Classify one subject.

        Args:
            subject: text or image subject
            dirty: whether the item is soiled

        Returns:
            validated classification result

        Raises:
            OracleError: oracle unavailable, refused, or broke the contract
        """
        ...
