"""
Schema Validation Components for Lodestar maze documents

This module provides JSON schema-based validation for the maze documents read
by the maze adapter and the CLI. Structural checks are delegated to
``jsonschema``; checks that a schema cannot express, such as cell coordinates
lying inside the grid, are performed afterwards.
"""

from typing import Any, Dict, List

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

DIRECTIONS = ("above", "below", "left", "right")

MAZE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "width": {"type": "integer", "minimum": 1},
        "height": {"type": "integer", "minimum": 1},
        "default_weight": {"type": "integer", "minimum": 0},
        "cells": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "x": {"type": "integer", "minimum": 0},
                    "y": {"type": "integer", "minimum": 0},
                    "walls": {
                        "type": "array",
                        "items": {"enum": list(DIRECTIONS)},
                        "uniqueItems": True,
                    },
                    "weights": {
                        "type": "object",
                        "propertyNames": {"enum": list(DIRECTIONS)},
                        "additionalProperties": {"type": "integer", "minimum": 0},
                    },
                },
                "required": ["x", "y"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["width", "height"],
    "additionalProperties": False,
}


class MazeSchemaValidator:
    """
    JSON Schema-based validator for maze documents.

    Attributes:
        schema (Dict[str, Any]): JSON schema the documents are checked against
    """

    def __init__(self, schema: Dict[str, Any] = MAZE_SCHEMA):
        self.schema = schema

    def validate(self, document: Any) -> ValidationResult:
        """
        Validate a maze document.

        Args:
            document: Parsed JSON document

        Returns:
            ValidationResult containing validation details and any errors or warnings

        Example:
            >>> validator = MazeSchemaValidator()
            >>> validator.validate({"width": 2, "height": 1}).is_valid
            True
        """
        errors: List[str] = []
        warnings: List[str] = []

        try:
            json_validate(instance=document, schema=self.schema)
        except JsonSchemaError as e:
            errors.append(f"Schema validation failed: {e.message}")
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        errors.extend(self._integer_errors(document))
        if errors:
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        width, height = document["width"], document["height"]
        seen = set()
        for cell in document.get("cells", []):
            position = (cell["x"], cell["y"])
            if cell["x"] >= width or cell["y"] >= height:
                errors.append(f"Cell {position} lies outside the {width}x{height} grid")
            if position in seen:
                errors.append(f"Cell {position} is described more than once")
            seen.add(position)
            for direction in cell.get("weights", {}):
                if direction in cell.get("walls", []):
                    warnings.append(f"Cell {position} has a weight behind its {direction} wall")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"width": width, "height": height},
        )

    @staticmethod
    def _integer_errors(document: Dict[str, Any]) -> List[str]:
        """
        Reject integral floats such as ``2.0``.

        JSON Schema's ``integer`` type accepts numbers with a zero fractional
        part, but sizes, coordinates and weights must be Python ``int``.
        """
        fields = [("width", document["width"]), ("height", document["height"])]
        if "default_weight" in document:
            fields.append(("default_weight", document["default_weight"]))
        for index, cell in enumerate(document.get("cells", [])):
            fields.append((f"cells[{index}].x", cell["x"]))
            fields.append((f"cells[{index}].y", cell["y"]))
            for direction, weight in cell.get("weights", {}).items():
                fields.append((f"cells[{index}].weights.{direction}", weight))

        return [
            f"Field '{name}' must be an integer, got {value!r}"
            for name, value in fields
            if not isinstance(value, int) or isinstance(value, bool)
        ]
