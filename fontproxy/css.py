"""
Parsing and generation of @font-face CSS.

The parser is line based and expects the layout the upstream font API
emits: one ``property: value;`` declaration per line inside each block.

License: MIT
"""

import re
from typing import Dict, List, Optional

from fontproxy.exceptions import MalformedCssError
from fontproxy.models import FontFace

FONT_FACE_PATTERN = re.compile(r"@font-face\s*{.*?}", re.DOTALL)

REQUIRED_PROPERTIES = ("font-family", "font-style", "font-weight", "src")
OPTIONAL_PROPERTIES = ("font-display", "unicode-range")

# Output order of declarations within a block
PROPERTY_ORDER = ("font-family", "font-style", "font-weight", "font-display", "src", "unicode-range")

_DECLARATION_PATTERNS = {
    name: re.compile(rf"^\s*{re.escape(name)}: (.*);[ \t\r]*$", re.MULTILINE)
    for name in PROPERTY_ORDER
}


def _find_property(block: str, name: str) -> Optional[str]:
    match = _DECLARATION_PATTERNS[name].search(block)
    return match.group(1) if match else None


def _parse_block(block: str) -> FontFace:
    values: Dict[str, str] = {}
    for name in REQUIRED_PROPERTIES:
        value = _find_property(block, name)
        if value is None:
            raise MalformedCssError(name, block)
        values[name] = value

    for name in OPTIONAL_PROPERTIES:
        value = _find_property(block, name)
        if value is not None:
            values[name] = value

    return FontFace.model_validate(values)


def parse_css(css: str) -> List[FontFace]:
    """
    Parse every @font-face block of a stylesheet.

    Args:
        css: Stylesheet text as returned by the upstream font API

    Returns:
        Font faces in source order

    Raises:
        MalformedCssError: If a block lacks font-family, font-style,
            font-weight or src
    """
    return [_parse_block(match.group(0)) for match in FONT_FACE_PATTERN.finditer(css)]


def _serialize(face: FontFace) -> str:
    data = face.model_dump(by_alias=True)
    lines = ["@font-face {"]
    for name in PROPERTY_ORDER:
        if name in REQUIRED_PROPERTIES or data.get(name):
            lines.append(f"  {name}: {data[name]};")
    lines.append("}")
    return "\n".join(lines)


def generate_css(font_faces: List[FontFace]) -> str:
    """Serialize font faces back to @font-face blocks joined by newlines."""
    return "\n".join(_serialize(face) for face in font_faces)
