"""Classify Text Command - classify a typed item description."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ecosort.application.classify.ports import ClassifierPort
from ecosort.domain.exceptions import InvalidInputError
from ecosort.domain.value_objects import ClassificationResult, TextSubject

logger = logging.getLogger(__name__)


@dataclass
class ClassifyTextRequest:
    """Text classification request DTO."""

    item: str
    dirty: bool


class ClassifyTextCommand:
    """Validate a text request and delegate to the classifier."""

    def __init__(self, classifier: ClassifierPort):
        self._classifier = classifier

    async def execute(self, request: ClassifyTextRequest) -> ClassificationResult:
        """Run the command.

        Raises:
            InvalidInputError: empty item or non-boolean dirty flag
            OracleError: classifier failure
        """
        if not isinstance(request.dirty, bool):
            raise InvalidInputError("Invalid input")

        subject = TextSubject(request.item)
        logger.info(
            "Text classification requested",
            extra={"item_length": len(subject.item), "dirty": request.dirty},
        )
        return await self._classifier.classify(subject, request.dirty)
