"""Classification Request Builder.

Pure function from (subject, dirty) to the instruction sent to the oracle.
Same input always yields byte-identical text.
"""

from __future__ import annotations

from ecosort.application.classify.dto import ClassificationInstruction, ImagePart
from ecosort.domain.enums import WasteCategory
from ecosort.domain.value_objects import ClassificationSubject, ImageSubject, TextSubject

DIRTY_STATE = "DIRTY/FOOD-SOILED"
CLEAN_STATE = "CLEAN"

IMAGE_TARGET = "Identify and classify the item in this image."
TEXT_TARGET = "Classify this item: {item}"

OUTPUT_SHAPE = """{
  "category": "string (one of: %(categories)s)",
  "item_detected": "string",
  "reason": "string",
  "eco_fact": "string",
  "contamination_warning": "string",
  "wishcycling_alert": "string",
  "disclaimer": "string",
  "co2_saved_kg": number
}"""

PREAMBLE = """You are an expert waste classification AI.
RULES:
- Categories: %(categories)s.
- Item state: %(state)s.
- If DIRTY paper/cardboard -> prefer compostable or landfill.
- If DIRTY plastic -> landfill.
- Hazardous (batteries, electronics, chemicals) always stay hazardous, clean or dirty.
- Provide a short eco_fact and a wishcycling_alert if applicable.
- co2_saved_kg is a non-negative estimate in kilograms.

Return valid JSON only, with exactly these fields and types and nothing else:
%(shape)s"""


def render_preamble(dirty: bool) -> str:
    """Rule preamble and output contract for the given soiling state."""
    categories = ", ".join(WasteCategory.values())
    return PREAMBLE % {
        "categories": categories,
        "state": DIRTY_STATE if dirty else CLEAN_STATE,
        "shape": OUTPUT_SHAPE % {"categories": categories},
    }


def build_instruction(
    subject: ClassificationSubject,
    dirty: bool,
) -> ClassificationInstruction:
    """Build the oracle instruction for one subject.

    Args:
        subject: text or image subject
        dirty: whether the item is soiled

    Returns:
        instruction text; image subjects also carry an ImagePart
    """
    preamble = render_preamble(bool(dirty))

    if isinstance(subject, TextSubject):
        target = TEXT_TARGET.format(item=subject.item)
        return ClassificationInstruction(text=f"{preamble}\n\n{target}")

    if isinstance(subject, ImageSubject):
        return ClassificationInstruction(
            text=f"{preamble}\n\n{IMAGE_TARGET}",
            image=ImagePart(data=subject.data, mime_type=subject.mime_type),
        )

    raise TypeError(f"Unsupported subject type: {type(subject).__name__}")
