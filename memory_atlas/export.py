"""Export and share payloads.

Builds strings only; writing them anywhere is the caller's business.
Private memories never leave through share, and are left out of exports
unless explicitly requested.
"""

import json
import math
from datetime import datetime
from typing import List, Optional

from .entry import MemoryRecord
from .sentiment import NEUTRAL
from .utils import parse_date


def _visible(records: List[MemoryRecord], include_private: bool) -> List[MemoryRecord]:
    if include_private:
        return list(records)
    return [r for r in records if not r.is_private]


def export_json(records: List[MemoryRecord], include_private: bool = False,
                indent: int = 2) -> str:
    """Serialise records as a JSON array in the app's camelCase format."""
    payload = [r.to_dict() for r in _visible(records, include_private)]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def export_text(records: List[MemoryRecord], include_private: bool = False,
                now: Optional[datetime] = None) -> str:
    """Readable markdown-style report of the memories."""
    now = now or datetime.now()
    records = _visible(records, include_private)
    lines = [
        "# Memory Atlas Export",
        "",
        f"Generated on: {now.date().isoformat()}",
        f"Total Memories: {len(records)}",
        "",
    ]
    for r in records:
        lines.append(f"## {r.title}")
        lines.append(f"**Date:** {parse_date(r.date).isoformat()}")
        lines.append(f"**Location:** {float(r.latitude):.4f}, {float(r.longitude):.4f}")
        lines.append(f"**Mood:** {r.mood or NEUTRAL}")
        lines.append("")
        lines.append(r.description)
        lines.append("")
        if r.story:
            lines.append("**AI Story:**")
            lines.append(r.story)
            lines.append("")
        if r.tags:
            lines.append(f"**Tags:** {', '.join(r.tags)}")
            lines.append("")
        lines.append("---")
        lines.append("")
    return "\n".join(lines)


def export_filename(extension: str, now: Optional[datetime] = None) -> str:
    """``memory-atlas-2026-10-18.json`` style download name."""
    now = now or datetime.now()
    return f"memory-atlas-{now.date().isoformat()}.{extension.lstrip('.')}"


def share_summary(records: List[MemoryRecord]) -> Optional[str]:
    """Share text built from public memories; None if there are none.

    Locations are counted as distinct whole-degree latitudes.
    """
    public = _visible(records, include_private=False)
    if not public:
        return None
    locations = {math.floor(float(r.latitude)) for r in public}
    return (
        f"Check out my travel memories! I've documented {len(public)} memories "
        f"across {len(locations)} different locations."
    )
