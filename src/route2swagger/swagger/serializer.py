"""Serialise a Swagger document to JSON or YAML."""

import json

import yaml

from route2swagger.swagger.annotations import Swagger

FORMATS = ("json", "yaml")


def serialize(swagger: Swagger, fmt: str = "json") -> str:
    data = swagger.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=4, ensure_ascii=False)
    raise ValueError(f"Unsupported format: {fmt}")
