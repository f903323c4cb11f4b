"""JSON exporter for scan results (machine-friendly format)."""

import json
from typing import Dict, List, Any

from scanner.gears import ScanResult


def to_json(result: ScanResult, indent: int = 2) -> str:
    """
    Convert a scan result to JSON format.
    
    Args:
        result: The scan result to export.
        indent: JSON indentation level.
    
    Returns:
        JSON string with the total and every gear in scan order.
    """
    gears: List[Dict[str, Any]] = []
    for gear in result.gears:
        gears.append({
            "row": gear.row,
            "column": gear.column,
            "numbers": list(gear.numbers),
            "ratio": gear.ratio,
        })
    
    data: Dict[str, Any] = {
        "total": result.total,
        "gears": gears,
    }
    
    return json.dumps(data, indent=indent)
