"""
Serialization helpers for Packet trees.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This is a structural view of a decoded tree, not a bit-level encoder.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from bitspkt.model import LiteralValue, Operands, Packet, TypeTag


def packet_to_dict(p: Packet) -> Dict[str, Any]:
    d: Dict[str, Any] = {"version": p.version, "type": p.type_tag.name.lower()}
    if isinstance(p.payload, LiteralValue):
        d["value"] = p.payload.value
    elif isinstance(p.payload, Operands):
        d["operands"] = [packet_to_dict(child) for child in p.payload.packets]
    else:
        raise TypeError(f"Unsupported payload type: {type(p.payload)}")
    return d


def packet_from_dict(d: Dict[str, Any]) -> Packet:
    t = d.get("type")
    try:
        type_tag = TypeTag[str(t).upper()]
    except KeyError:
        raise TypeError(f"Unsupported packet dict type: {t}") from None

    version = d.get("version", 0)
    if type_tag is TypeTag.LITERAL:
        if "value" not in d:
            raise TypeError("Literal packet dict has no value")
        return Packet(version=version, type_tag=type_tag, payload=LiteralValue(d["value"]))
    operands = tuple(packet_from_dict(child) for child in d.get("operands", []))
    return Packet(version=version, type_tag=type_tag, payload=Operands(operands))


def packet_to_json(p: Packet) -> str:
    return json.dumps(packet_to_dict(p), sort_keys=True)


def packet_from_json(s: str) -> Packet:
    d = json.loads(s)
    return packet_from_dict(d)


def packet_to_yaml(p: Packet) -> str:
    return yaml.safe_dump(packet_to_dict(p), sort_keys=False)


def packet_from_yaml(s: str) -> Packet:
    d = yaml.safe_load(s)
    return packet_from_dict(d)


__all__ = [
    "packet_to_dict",
    "packet_from_dict",
    "packet_to_json",
    "packet_from_json",
    "packet_to_yaml",
    "packet_from_yaml",
]
