"""
Serializers for alfred_workflow
Convert Feedback, Items and Modifiers to Alfred's script filter JSON
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union
import json

from ..errors import SerializationError
from ..models import IconType, Item, Modifier


class BaseSerializer:
    """Base serializer with common JSON utilities"""

    def dumps(self, value: Any) -> str:
        """Compact JSON; non-ASCII stays as-is and must be valid UTF-8"""
        try:
            text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
            text.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode value as JSON: {e}") from e
        return text

    def sorted_vars(self, variables: Dict[str, str]) -> Dict[str, str]:
        return {k: variables[k] for k in sorted(variables)}


class ArgSerializer(BaseSerializer):
    """Encode an arg together with the variables that travel with it"""

    def to_value(self, arg: Optional[str], variables: Dict[str, str]) -> Union[str, Dict[str, Any]]:
        """Value form of arg + variables.

        Without variables this is the plain arg ("" when unset). With
        variables it is the ``alfredworkflow`` object Alfred unpacks.
        """
        if not variables:
            return arg if arg is not None else ""

        payload: Dict[str, Any] = {}
        if arg is not None:
            payload["arg"] = arg
        payload["variables"] = self.sorted_vars(variables)
        return {"alfredworkflow": payload}

    def encode_arg(self, arg: str, variables: Dict[str, str]) -> str:
        """The string placed in an ``arg`` field"""
        if not variables:
            return arg
        # Alfred's arg is a single string, so the object goes in as JSON text
        return self.dumps(self.to_value(arg, variables))


class ModifierSerializer(ArgSerializer):
    """Convert a Modifier to its ``mods`` entry"""

    def to_dict(self, mod: Modifier) -> Dict[str, Any]:
        out: Dict[str, Any] = {}

        if mod.arg is not None:
            out["arg"] = self.encode_arg(mod.arg, mod.vars)

        if mod.subtitle is not None:
            out["subtitle"] = mod.subtitle

        if mod.valid is not None:
            out["valid"] = mod.valid

        return out


class ItemSerializer(ArgSerializer):
    """Convert an Item to one element of ``items``"""

    def __init__(self):
        self.modifier_serializer = ModifierSerializer()

    def to_dict(self, item: Item, index: Optional[int] = None) -> Dict[str, Any]:
        if not item.title:
            where = f"Item {index}" if index is not None else "Item"
            raise SerializationError(f"{where} has an empty title")

        out: Dict[str, Any] = {"title": item.title}

        if item.subtitle is not None:
            out["subtitle"] = item.subtitle

        if item.arg is not None:
            out["arg"] = self.encode_arg(item.arg, item.vars)

        if item.autocomplete is not None:
            out["autocomplete"] = item.autocomplete

        out["valid"] = item.valid

        if item.uid is not None:
            out["uid"] = item.uid

        if item.is_file:
            out["type"] = "file"

        if item.icon is not None:
            icon: Dict[str, str] = {"path": item.icon.value}
            if item.icon.type != IconType.PLAIN:
                icon["type"] = item.icon.type.value
            out["icon"] = icon

        text: Dict[str, str] = {}
        if item.copy_text is not None:
            text["copy"] = item.copy_text
        if item.large_type_text is not None:
            text["largetype"] = item.large_type_text
        if text:
            out["text"] = text

        mods = item.modifiers
        if mods:
            out["mods"] = {
                key.value: self.modifier_serializer.to_dict(mod)
                for key, mod in mods.items()
            }

        return out


class FeedbackSerializer(BaseSerializer):
    """Convert a sequence of Items to the full feedback document"""

    def __init__(self):
        self.item_serializer = ItemSerializer()

    def to_dict(self, items: Iterable[Item]) -> Dict[str, Any]:
        # Feedback variables only reach the output through encoded args
        return {
            "items": [self.item_serializer.to_dict(item, i) for i, item in enumerate(items)]
        }

    def to_json(self, items: Iterable[Item]) -> str:
        return self.dumps(self.to_dict(items))
