# SPDX-License-Identifier: AGPL-3.0-only

"""
Response normalization: find the JSON object in model output and validate it.
"""
import json
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from common.errors import MalformedJson, NoJsonFound

ResultT = TypeVar("ResultT", bound=BaseModel)


def extract_first_json_object(text: str, quote_aware: bool = True) -> str:
    """
    Return the first balanced {...} substring of text.

    Scanning starts at the first '{' and stops at the '}' that brings the
    depth back to zero; anything after it is ignored. With quote_aware=False
    every brace counts, even inside string literals.

    Raises:
        NoJsonFound: no '{' in text, or the depth never returns to zero.
    """
    if not isinstance(text, str):
        raise NoJsonFound("Model output is not text")

    start = text.find("{")
    if start == -1:
        raise NoJsonFound("No JSON object found")

    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]

        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"' and quote_aware:
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    raise NoJsonFound("No complete JSON object found")


def parse_payload(payload: str, model: Type[ResultT]) -> ResultT:
    """
    Decode an extracted payload and validate it against a result model.

    Raises:
        MalformedJson: invalid JSON, JSON nested too deeply to decode, or
            valid JSON of the wrong shape.
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise MalformedJson(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedJson("JSON nested too deeply") from e

    if not isinstance(data, dict):
        raise MalformedJson(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedJson(f"Unexpected {model.__name__} shape: {e.error_count()} error(s)") from e
    except RecursionError as e:
        raise MalformedJson(f"{model.__name__} payload nested too deeply") from e
