from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class IconType(str, Enum):
    PLAIN = ""
    FILE_ICON = "fileicon"
    FILE_TYPE = "filetype"


class ModifierKey(str, Enum):
    CMD = "cmd"
    ALT = "alt"
    CTRL = "ctrl"
    SHIFT = "shift"
    FN = "fn"


@dataclass(frozen=True)
class Icon:
    """How Alfred should resolve an item's icon.

    ``value`` is a path for PLAIN and FILE_ICON, or a UTI such as
    ``public.folder`` for FILE_TYPE. The path is not checked; Alfred
    resolves it.
    """

    value: str
    type: IconType = IconType.PLAIN

    def __post_init__(self):
        object.__setattr__(self, "type", IconType(self.type or ""))


class VariableStore:
    """String variables owned by one entity, with read-through to a parent store.

    Lookups fall back to the parent for keys this store does not define.
    Nothing is ever copied into, or written through to, the parent.
    """

    def __init__(self, parent: Optional[VariableStore] = None):
        self._own: Dict[str, str] = {}
        self.parent = parent

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(f"variables must be str -> str, got {key!r}: {value!r}")
        self._own[key] = value

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        if key in self._own:
            return self._own[key]
        if self.parent is not None:
            return self.parent.get(key, default)
        return default

    def own(self) -> Dict[str, str]:
        return dict(self._own)

    def resolved(self) -> Dict[str, str]:
        merged = self.parent.resolved() if self.parent is not None else {}
        merged.update(self._own)
        return merged

    def __contains__(self, key: object) -> bool:
        return key in self._own or (self.parent is not None and key in self.parent)

    def __repr__(self) -> str:
        return f"VariableStore({self._own!r}, parent={'yes' if self.parent is not None else 'no'})"


class HasVariables:
    """Variable accessors shared by Feedback, Item and Modifier."""

    @property
    def variables(self) -> VariableStore:
        return self._vars

    @property
    def vars(self) -> Dict[str, str]:
        """Own variables merged over everything inherited from parents."""
        return self._vars.resolved()

    def set_var(self, key: str, value: str):
        self._vars.set(key, value)
        return self

    def get_var(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._vars.get(key, default)


class VariableModel(HasVariables, BaseModel):
    """Base for models owning a VariableStore.

    Copies get a store of their own with the same entries and parent.
    """

    _vars: VariableStore = PrivateAttr(default_factory=VariableStore)

    def __copy__(self):
        copied = super().__copy__()
        copied._after_copy(self, deep=False)
        return copied

    def __deepcopy__(self, memo=None):
        copied = super().__deepcopy__(memo)
        copied._after_copy(self, deep=True)
        return copied

    def _after_copy(self, source: VariableModel, deep: bool) -> None:
        store = VariableStore(source._vars.parent)
        for key, value in source._vars.own().items():
            store.set(key, value)
        self._vars = store


class Modifier(VariableModel):
    """Alternate behaviour of an Item while a modifier key is held.

    ``key`` is fixed once created. ``valid`` stays None until set
    explicitly and is only emitted then.
    """

    model_config = ConfigDict(validate_assignment=True)

    key: ModifierKey = Field(frozen=True)
    subtitle: Optional[str] = None
    arg: Optional[str] = None
    valid: Optional[bool] = None
    icon: Optional[Icon] = None


class Item(VariableModel):
    """One result row.

    Optional text fields are None while unset; an empty string is a value
    and is emitted as such.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str
    subtitle: Optional[str] = None
    uid: Optional[str] = None
    arg: Optional[str] = None
    autocomplete: Optional[str] = None
    valid: bool = False
    is_file: bool = False
    icon: Optional[Icon] = None
    copy_text: Optional[str] = None
    large_type_text: Optional[str] = None

    _mods: Dict[ModifierKey, Modifier] = PrivateAttr(default_factory=dict)

    @property
    def modifiers(self) -> Dict[ModifierKey, Modifier]:
        return dict(self._mods)

    def new_modifier(self, key: Union[ModifierKey, str]) -> Modifier:
        """Return the Modifier for key, creating it on first use."""
        key = ModifierKey(key)
        mod = self._mods.get(key)
        if mod is None:
            mod = self.add_modifier(Modifier(key=key))
        return mod

    def add_modifier(self, modifier: Modifier) -> Modifier:
        """Register modifier, replacing any existing one for the same key."""
        modifier.variables.parent = self._vars
        self._mods[modifier.key] = modifier
        return modifier

    def _after_copy(self, source: VariableModel, deep: bool) -> None:
        super()._after_copy(source, deep)
        # Modifiers are owned, so the copy gets its own, linked to its own store
        self._mods = {}
        for mod in source._mods.values():
            self.add_modifier(copy.deepcopy(mod) if deep else copy.copy(mod))
