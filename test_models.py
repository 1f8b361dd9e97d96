import pytest
from pydantic import ValidationError

from alfred_workflow.models import Icon, IconType, Item, Modifier, ModifierKey, VariableStore


class TestIcon:
    def test_defaults_to_plain(self):
        icon = Icon("icon.png")
        assert icon.value == "icon.png"
        assert icon.type is IconType.PLAIN

    def test_type_from_string(self):
        assert Icon("first", "fileicon").type is IconType.FILE_ICON
        assert Icon("public.folder", "filetype").type is IconType.FILE_TYPE

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            Icon("icon.png", "bogus")

    def test_immutable(self):
        icon = Icon("icon.png")
        with pytest.raises(AttributeError):
            icon.value = "other.png"

    def test_item_icon_reassignment(self):
        item = Item(title="title")
        item.icon = Icon("first", IconType.FILE_ICON)
        item.icon = Icon("second")
        assert item.icon.value == "second"
        assert item.icon.type is IconType.PLAIN


class TestVariableStore:
    def test_lookup_falls_back_to_parent(self):
        parent = VariableStore()
        parent.set("foo", "bar")
        child = VariableStore(parent)
        assert child.get("foo") == "bar"
        assert "foo" in child
        assert child.own() == {}

    def test_child_overrides_without_touching_parent(self):
        parent = VariableStore()
        parent.set("foo", "bar")
        child = VariableStore(parent)
        child.set("foo", "baz")
        child.set("ducky", "fuzz")
        assert child.resolved() == {"foo": "baz", "ducky": "fuzz"}
        assert parent.resolved() == {"foo": "bar"}

    def test_parent_changes_visible_later(self):
        parent = VariableStore()
        child = VariableStore(parent)
        parent.set("late", "1")
        assert child.get("late") == "1"

    def test_missing_key(self):
        assert VariableStore().get("nope") is None
        assert VariableStore().get("nope", "default") == "default"

    def test_rejects_non_strings(self):
        with pytest.raises(TypeError):
            VariableStore().set("n", 1)


class TestItem:
    def test_defaults(self):
        item = Item(title="title")
        assert item.subtitle is None
        assert item.arg is None
        assert item.valid is False
        assert item.is_file is False
        assert item.icon is None
        assert item.modifiers == {}
        assert item.vars == {}

    def test_empty_string_is_set(self):
        item = Item(title="title")
        item.subtitle = ""
        assert item.subtitle == ""

    def test_empty_title_constructible(self):
        assert Item(title="").title == ""

    def test_assignment_is_type_checked(self):
        item = Item(title="title")
        with pytest.raises(ValidationError):
            item.subtitle = 42

    def test_new_modifier_is_idempotent(self):
        item = Item(title="title")
        first = item.new_modifier("cmd")
        first.subtitle = "one"
        second = item.new_modifier(ModifierKey.CMD)
        assert second is first
        assert second.subtitle == "one"
        assert list(item.modifiers) == [ModifierKey.CMD]

    def test_unknown_modifier_key(self):
        with pytest.raises(ValueError):
            Item(title="title").new_modifier("hyper")

    def test_add_modifier_replaces(self):
        item = Item(title="title")
        item.new_modifier("alt").arg = "old"
        replacement = item.add_modifier(Modifier(key="alt", arg="new"))
        assert item.new_modifier("alt") is replacement
        assert item.modifiers[ModifierKey.ALT].arg == "new"

    def test_modifiers_inherit_vars(self):
        item = Item(title="title")
        item.set_var("foo", "bar")
        mod = item.new_modifier("cmd")
        assert mod.vars["foo"] == "bar"
        assert mod.get_var("foo") == "bar"

    def test_modifier_override_is_local(self):
        item = Item(title="title")
        item.set_var("foo", "bar")
        mod = item.new_modifier("shift").set_var("foo", "baz")
        assert mod.get_var("foo") == "baz"
        assert item.get_var("foo") == "bar"

    def test_modifier_valid_tristate(self):
        mod = Item(title="title").new_modifier("fn")
        assert mod.valid is None
        mod.valid = False
        assert mod.valid is False

    def test_modifier_key_is_frozen(self):
        item = Item(title="title")
        mod = item.new_modifier("cmd")
        with pytest.raises(ValidationError):
            mod.key = "alt"
        assert mod.key is ModifierKey.CMD
        assert item.new_modifier("alt") is not mod
        assert [(k, m.key) for k, m in item.modifiers.items()] == [
            (ModifierKey.CMD, ModifierKey.CMD),
            (ModifierKey.ALT, ModifierKey.ALT),
        ]


class TestCopy:
    @pytest.mark.parametrize("deep", [False, True])
    def test_item_copy_has_own_variables(self, deep):
        parent = VariableStore()
        parent.set("p", "0")
        item = Item(title="title")
        item.variables.parent = parent
        item.set_var("a", "1")

        copied = item.model_copy(deep=deep)
        copied.set_var("b", "2")

        assert item.vars == {"p": "0", "a": "1"}
        assert copied.vars == {"p": "0", "a": "1", "b": "2"}
        assert copied.variables is not item.variables
        assert copied.variables.parent is parent

    @pytest.mark.parametrize("deep", [False, True])
    def test_item_copy_has_own_modifiers(self, deep):
        item = Item(title="title")
        item.set_var("a", "1")
        item.new_modifier("cmd").subtitle = "orig"

        copied = item.model_copy(deep=deep)
        copied.set_var("a", "copy")
        mod = copied.new_modifier("cmd")
        mod.subtitle = "changed"

        assert mod is not item.new_modifier("cmd")
        assert item.new_modifier("cmd").subtitle == "orig"
        assert mod.get_var("a") == "copy"
        assert item.new_modifier("cmd").get_var("a") == "1"

    def test_modifier_copy_has_own_variables(self):
        mod = Item(title="title").new_modifier("alt").set_var("x", "1")
        copied = mod.model_copy()
        copied.set_var("y", "2")
        assert mod.vars == {"x": "1"}
        assert copied.variables.parent is mod.variables.parent


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
