import base64
from typing import Any, Dict, List


def _csv_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return '"' + value.replace('"', '""') + '"'
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return str(value)


def convert_to_csv(rows: List[Dict[str, Any]]) -> str:
    """Render a result set as CSV.

    The header comes from the first row and every row is written in that
    key order. Only string values are quoted. Each line, the last included,
    ends with a newline.
    """
    if not rows:
        return ""

    columns = list(rows[0].keys())
    lines = [",".join(columns)]
    for row in rows:
        lines.append(",".join(_csv_cell(row.get(column)) for column in columns))
    return "\n".join(lines) + "\n"


def format_success_response(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def format_error_response(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def to_jsonable(value: Any) -> Any:
    """Make tool output JSON-safe; blobs become base64 text."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value
