"""
Form encoding for request payloads.

The backend expects PHP-style bracketed keys in
``application/x-www-form-urlencoded`` bodies:

    {"name": "web"}                      -> name=web
    {"tags": ["a", "b"]}                 -> tags[]=a&tags[]=b
    {"servers": [{"ip": "1.1.1.1"}]}     -> servers[0][ip]=1.1.1.1
    {"minify": {"html": 1}}              -> minify[html]=1

Top-level ``None`` values are dropped.
"""

from collections.abc import Mapping
from typing import Any, List, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel


FormPairs = List[Tuple[str, str]]


def stringify(value: Any) -> str:
    """Convert a scalar to its wire form (booleans as true/false, None as null)"""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    return str(value)


def to_plain_data(payload: Any) -> Any:
    """
    Dump pydantic models to plain data, leave everything else untouched.
    
    Args:
        payload: Model, mapping or None
        
    Returns:
        A plain mapping (or the payload as given)
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_none=True)
    return payload


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _encode_value(key: str, value: Any, pairs: FormPairs) -> None:
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    
    if _is_sequence(value):
        for index, item in enumerate(value):
            if isinstance(item, BaseModel):
                item = item.model_dump(exclude_none=True)
            if isinstance(item, Mapping):
                for sub_key, sub_value in item.items():
                    _encode_value(f"{key}[{index}][{sub_key}]", sub_value, pairs)
            elif _is_sequence(item):
                for sub_index, sub_value in enumerate(item):
                    _encode_value(f"{key}[{index}][{sub_index}]", sub_value, pairs)
            else:
                pairs.append((f"{key}[]", stringify(item)))
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _encode_value(f"{key}[{sub_key}]", sub_value, pairs)
    else:
        pairs.append((key, stringify(value)))


def flatten_form(data: Any) -> FormPairs:
    """
    Flatten a payload into ordered (key, value) form pairs.
    
    Args:
        data: Mapping or pydantic model
        
    Returns:
        List of (key, value) string tuples, in payload order
    """
    data = to_plain_data(data)
    pairs: FormPairs = []
    if not data:
        return pairs
    
    for key, value in data.items():
        if value is None:
            continue
        _encode_value(str(key), value, pairs)
    
    return pairs


def encode_form(data: Any) -> str:
    """
    Encode a payload as an x-www-form-urlencoded body.
    
    Args:
        data: Mapping or pydantic model
        
    Returns:
        Encoded body string
    """
    return urlencode(flatten_form(data))
