"""
Parsing of the compact family specification used in query strings.

A specification looks like ``Roboto:wght@400;700:rename@MyRoboto:exclude@U+0-7F``:
the family name, an optional axis tuple forwarded to upstream, then any
number of ``key@value`` options.

License: MIT
"""

import logging
from typing import Dict, Iterable, List, Optional

from fontproxy.models import FamilyDescriptor

logger = logging.getLogger(__name__)


def _parse_options(tokens: Iterable[str]) -> Dict[str, Optional[str]]:
    options: Dict[str, Optional[str]] = {}
    for token in tokens:
        pieces = token.split('@')
        options[pieces[0]] = pieces[1] if len(pieces) > 1 else None
    return options


def parse_family(spec: str) -> FamilyDescriptor:
    """
    Parse one family specification into a descriptor.

    Never fails: malformed options produce a best-effort descriptor.

    Args:
        spec: Raw ``family`` query value

    Returns:
        FamilyDescriptor with positional fields taking precedence over options
    """
    family, *rest = spec.split(':')
    axis = rest[0] if rest else None
    options = _parse_options(rest[1:])

    # Positional values win over option keys of the same name
    options.pop('googleFamily', None)
    options.update(
        family=family,
        axis=axis,
        google_family=f"{family}:{axis}" if axis else family,
    )
    return FamilyDescriptor.model_validate(options)


def parse_families(specs: Iterable[str]) -> List[FamilyDescriptor]:
    """Parse every ``family`` query value, keeping request order."""
    descriptors = [parse_family(spec) for spec in specs]
    logger.debug(f"Parsed families: {[d.model_dump(by_alias=True) for d in descriptors]}")
    return descriptors
