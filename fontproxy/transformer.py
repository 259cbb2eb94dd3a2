"""
Per-family rewriting of parsed @font-face records.

License: MIT
"""

import logging
from typing import Any, Dict, List

from fontproxy.css import generate_css, parse_css
from fontproxy.models import FamilyDescriptor, FontFace
from fontproxy.ranges import generate_range, parse_range, subtract_range

logger = logging.getLogger(__name__)


def _quoted(name: str) -> str:
    return f"'{name}'"


def _apply(font_faces: List[FontFace], family: FamilyDescriptor) -> List[FontFace]:
    result: List[FontFace] = []
    for face in font_faces:
        if face.font_family != _quoted(family.family):
            result.append(face)
            continue

        update: Dict[str, Any] = {}
        if family.rename:
            # Keep the original face ahead of its renamed duplicate
            result.append(face)
            update["font_family"] = _quoted(family.rename)
        if family.exclude and face.unicode_range:
            update["unicode_range"] = generate_range(subtract_range(
                parse_range(face.unicode_range),
                parse_range(family.exclude),
            ))
        if family.include:
            update["unicode_range"] = family.include
        result.append(face.model_copy(update=update))
    return result


def transform_font_faces(font_faces: List[FontFace], families: List[FamilyDescriptor]) -> List[FontFace]:
    """
    Apply each family descriptor, in order, to the font faces.

    A face matches when its font-family equals the quoted descriptor family.
    ``rename`` duplicates the face under the new name, ``exclude`` removes
    code points from its unicode-range and ``include`` replaces the
    unicode-range outright, overriding any exclusion.

    Args:
        font_faces: Faces parsed from the upstream stylesheet
        families: Descriptors parsed from the request

    Returns:
        New list of faces; the input is left untouched
    """
    for family in families:
        font_faces = _apply(font_faces, family)
    return font_faces


def rewrite_css(css: str, families: List[FamilyDescriptor]) -> str:
    """Parse, transform and regenerate an upstream stylesheet."""
    font_faces = parse_css(css)
    transformed = transform_font_faces(font_faces, families)
    logger.debug(f"Rewrote {len(font_faces)} font faces into {len(transformed)}")
    return generate_css(transformed)
