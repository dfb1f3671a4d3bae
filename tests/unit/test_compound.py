"""Unit tests for CompoundOption."""

import pytest

from compound_config import (
    ArityMismatchError,
    CompoundOption,
    CompoundOptionEntry,
    CorruptValueError,
)
from compound_config.types import ActivatorBinding, Color, KeyBinding

EXAMPLE_GRID = [
    ["binding1", "5", "run-app"],
    ["binding2", "9", "toggle"],
]


class TestConstruction:
    """Tests for option construction and schema access."""

    def test_defaults(self, binding_option):
        assert binding_option.get_name() == "bindings"
        assert binding_option.get_type_hint() == "tuple"
        assert binding_option.arity == 2
        assert binding_option.get_value_untyped() == []
        assert len(binding_option) == 0

    @pytest.mark.parametrize("hint", ["plain", "dict", "tuple"])
    def test_type_hints(self, hint):
        option = CompoundOption("o", [CompoundOptionEntry(str, "a_")], hint)
        assert option.get_type_hint() == hint

    def test_invalid_type_hint(self):
        with pytest.raises(ValueError):
            CompoundOption("o", [CompoundOptionEntry(str, "a_")], "list")

    def test_empty_schema_rejected(self):
        with pytest.raises(ValueError):
            CompoundOption("o", [])

    def test_entries_in_order(self, binding_option):
        prefixes = [e.get_prefix() for e in binding_option.get_entries()]
        assert prefixes == ["key_", "cmd_"]

    def test_entries_read_only(self, binding_option):
        assert isinstance(binding_option.get_entries(), tuple)


class TestUntypedAccess:
    """Tests for set_value_untyped / get_value_untyped."""

    def test_round_trip(self, binding_option):
        assert binding_option.set_value_untyped(EXAMPLE_GRID)
        assert binding_option.get_value_untyped() == EXAMPLE_GRID

    def test_identifier_is_free_text(self, binding_option):
        assert binding_option.set_value_untyped([["any text at all!", "1", "x"]])

    def test_snapshot_not_aliased(self, populated_option):
        snapshot = populated_option.get_value_untyped()
        snapshot[0][1] = "1000"
        snapshot.append(["extra", "1", "y"])
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

    def test_input_not_aliased(self, binding_option):
        grid = [list(row) for row in EXAMPLE_GRID]
        binding_option.set_value_untyped(grid)
        grid[0][2] = "changed"
        assert binding_option.get_value_untyped() == EXAMPLE_GRID

    def test_invalid_cell_is_all_or_nothing(self, populated_option):
        """Test that one bad cell leaves the previous value in place."""
        assert not populated_option.set_value_untyped([
            ["ok", "1", "fine"],
            ["b", "not-an-int", "x"],
        ])
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

    @pytest.mark.parametrize("grid", [
        [["short", "1"]],
        [["long", "1", "x", "extra"]],
        [["typed", 1, "x"]],
        ["not-a-row"],
        "not-a-grid",
        None,
        5,
        [5],
        [None],
        [["ok", "1", "x"], 5],
    ])
    def test_malformed_grids_rejected(self, populated_option, grid):
        assert not populated_option.set_value_untyped(grid)
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

    def test_empty_grid_accepted(self, populated_option):
        assert populated_option.set_value_untyped([])
        assert populated_option.get_value_untyped() == []

    def test_arity_never_changes(self, binding_option):
        for grid in (EXAMPLE_GRID, [], [["x", "1", "y"]], [["bad", "?", "y"]]):
            binding_option.set_value_untyped(grid)
            assert len(binding_option.get_entries()) == 2


class TestTypedAccess:
    """Tests for get_value / set_value and the simple variants."""

    def test_example_scenario(self, binding_option):
        assert binding_option.set_value_untyped(EXAMPLE_GRID)
        assert binding_option.get_value(int, str) == [
            ("binding1", 5, "run-app"),
            ("binding2", 9, "toggle"),
        ]
        assert not binding_option.set_value_untyped([["b", "not-an-int", "x"]])
        assert binding_option.get_value_untyped() == EXAMPLE_GRID

    def test_types_default_to_schema(self, populated_option):
        assert populated_option.get_value() == populated_option.get_value(int, str)

    def test_types_by_tag(self, populated_option):
        assert populated_option.get_value("int", "str")[1] == ("binding2", 9, "toggle")

    def test_arity_mismatch(self, populated_option):
        with pytest.raises(ArityMismatchError):
            populated_option.get_value(int)
        with pytest.raises(ArityMismatchError):
            populated_option.set_value([("a", 1, "x")], int, str, str)

    def test_arity_mismatch_is_type_error(self, populated_option):
        with pytest.raises(TypeError):
            populated_option.get_value(int, str, float)

    def test_corrupt_cell_raises(self, populated_option):
        """Test reading a column as a type its cells don't satisfy."""
        with pytest.raises(CorruptValueError):
            populated_option.get_value(int, int)

    def test_typed_round_trip(self, binding_option):
        rows = [("first", -3, "echo hi"), ("second", 0, "")]
        binding_option.set_value(rows, int, str)
        assert binding_option.get_value(int, str) == rows
        assert binding_option.get_value_untyped() == [
            ["first", "-3", "echo hi"],
            ["second", "0", ""],
        ]

    def test_typed_round_trip_rich_types(self):
        option = CompoundOption("styles", [
            CompoundOptionEntry(Color, "color_"),
            CompoundOptionEntry(float, "alpha_"),
            CompoundOptionEntry(bool, "enabled_"),
            CompoundOptionEntry("activator", "binding_"),
        ])
        rows = [
            ("focus", Color(0.1, 0.2, 0.3, 1.0), 0.75, True,
             ActivatorBinding((KeyBinding(frozenset({"super"}), "KEY_F"),))),
            ("idle", Color(1.0, 1.0, 1.0, 1.0), 1.0, False, ActivatorBinding(())),
        ]
        option.set_value(rows)
        assert option.get_value() == rows

    def test_set_value_wrong_field_type(self, populated_option):
        with pytest.raises(TypeError):
            populated_option.set_value([("a", "five", "x")], int, str)
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

    def test_set_value_wrong_row_length(self, populated_option):
        with pytest.raises(ArityMismatchError):
            populated_option.set_value([("a", 1)], int, str)

    def test_set_value_identifier_must_be_text(self, binding_option):
        with pytest.raises(TypeError):
            binding_option.set_value([(1, 1, "x")])

    def test_set_value_explicit_types_checked_against_columns(self, populated_option, update_counter):
        """Test that cells written through other types must suit the column."""
        populated_option.add_updated_handler(update_counter)
        with pytest.raises(ValueError):
            populated_option.set_value([("a", "x", "y")], str, str)
        assert populated_option.get_value_untyped() == EXAMPLE_GRID
        assert update_counter.calls == 0

    @pytest.mark.parametrize("row", [
        ("red", Color(2.0, 0.0, 0.0, 1.0), 1),
        ("nan", Color(float("nan"), 0.0, 0.0, 1.0), 1),
    ])
    def test_set_value_unwritable_color(self, row):
        option = CompoundOption("colors", [
            CompoundOptionEntry(Color, "active_"),
            CompoundOptionEntry(int, "width_"),
        ])
        assert option.set_value_untyped([["main", "#FF0000FF", "3"]])
        with pytest.raises(ValueError):
            option.set_value([row])
        assert option.get_value_untyped() == [["main", "#FF0000FF", "3"]]

    @pytest.mark.parametrize("activator", [
        ActivatorBinding((KeyBinding(frozenset({"hyper"}), "KEY_A"),)),
        ActivatorBinding((KeyBinding(),)),
    ])
    def test_set_value_unwritable_binding(self, command_option, activator):
        assert command_option.set_value_untyped([["term", "<super> KEY_ENTER", "kitty"]])
        with pytest.raises(ValueError):
            command_option.set_value([("bad", activator, "cmd")])
        assert command_option.get_value_untyped() == [["term", "<super> KEY_ENTER", "kitty"]]

    def test_simple_variants(self, binding_option):
        binding_option.set_value_simple([(10, "a"), (20, "b")], int, str)
        assert binding_option.get_value_untyped() == [["0", "10", "a"], ["1", "20", "b"]]
        assert binding_option.get_value_simple(int, str) == [(10, "a"), (20, "b")]

    def test_get_value_simple_drops_identifier(self, populated_option):
        assert populated_option.get_value_simple() == [(5, "run-app"), (9, "toggle")]


class TestNotification:
    """Tests for change notification."""

    def test_untyped_set_notifies_once(self, binding_option, update_counter):
        binding_option.add_updated_handler(update_counter)
        binding_option.set_value_untyped(EXAMPLE_GRID)
        assert update_counter.calls == 1

    def test_failed_set_does_not_notify(self, populated_option, update_counter):
        populated_option.add_updated_handler(update_counter)
        populated_option.set_value_untyped([["b", "x", "y"]])
        assert not populated_option.set_value_str("{not: a grid}")
        assert update_counter.calls == 0

    def test_typed_set_notifies_once(self, binding_option, update_counter):
        binding_option.add_updated_handler(update_counter)
        binding_option.set_value([("a", 1, "x"), ("b", 2, "y")])
        binding_option.set_value_simple([(3, "z")])
        assert update_counter.calls == 2

    def test_reset_notifies(self, populated_option, update_counter):
        populated_option.add_updated_handler(update_counter)
        populated_option.reset_to_default()
        assert update_counter.calls == 1

    def test_handler_registration(self, binding_option, update_counter):
        binding_option.add_updated_handler(update_counter)
        binding_option.add_updated_handler(update_counter)
        binding_option.set_value_untyped([])
        assert update_counter.calls == 1

        binding_option.rm_updated_handler(update_counter)
        binding_option.rm_updated_handler(update_counter)
        binding_option.set_value_untyped([])
        assert update_counter.calls == 1

    def test_handler_sees_new_value(self, binding_option):
        seen = []
        binding_option.add_updated_handler(
            lambda: seen.append(binding_option.get_value_untyped())
        )
        binding_option.set_value_untyped(EXAMPLE_GRID)
        assert seen == [EXAMPLE_GRID]


class TestStringForm:
    """Tests for the text form and default value handling."""

    def test_value_str_round_trip(self, populated_option, binding_option):
        text = populated_option.get_value_str()
        assert binding_option.set_value_str(text)
        assert binding_option.get_value_untyped() == EXAMPLE_GRID

    def test_value_str_keeps_numeric_text(self, binding_option):
        binding_option.set_value_untyped([["007", "007", "true"]])
        clone = binding_option.clone_option()
        clone.set_value_untyped([])
        assert clone.set_value_str(binding_option.get_value_str())
        assert clone.get_value_untyped() == [["007", "007", "true"]]

    @pytest.mark.parametrize("text", [
        "\x85", "\u2028", "\u2029", "a\nb", "line\r\n", "tab\t", "\x07", " padded ", "",
    ])
    def test_value_str_keeps_control_characters(self, binding_option, text):
        """Test that line breaks and control characters survive the text form."""
        assert binding_option.set_value_untyped([[text, "1", text]])
        clone = binding_option.clone_option()
        clone.set_value_untyped([])
        assert clone.set_value_str(binding_option.get_value_str())
        assert clone.get_value_untyped() == [[text, "1", text]]

    def test_value_str_is_one_line(self, binding_option):
        binding_option.set_value_untyped([["a\nb", "1", "\u2028"]])
        assert "\n" not in binding_option.get_value_str()

    def test_empty_value_str(self, binding_option):
        assert binding_option.get_value_str() == "[]"

    def test_hand_written_text(self, binding_option):
        assert binding_option.set_value_str("[[term, 5, kitty], [menu, 6, wofi]]")
        assert binding_option.get_value(int, str) == [("term", 5, "kitty"), ("menu", 6, "wofi")]

    @pytest.mark.parametrize("text", [
        "[[a, x, y]]",
        "[[a, 1]]",
        "{a: 1}",
        "[a, b]",
        "[[a, null, y]]",
        "[[a, 1, [y]]]",
        "[[unclosed",
    ])
    def test_invalid_value_str(self, populated_option, text):
        assert not populated_option.set_value_str(text)
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

    def test_default_value(self, binding_option, update_counter):
        binding_option.add_updated_handler(update_counter)
        assert binding_option.get_default_value_str() == "[]"
        assert binding_option.set_default_value_str("[[d, '1', cmd]]")
        assert update_counter.calls == 0
        assert binding_option.get_value_untyped() == []

        binding_option.reset_to_default()
        assert binding_option.get_value_untyped() == [["d", "1", "cmd"]]
        assert update_counter.calls == 1

    def test_invalid_default_rejected(self, binding_option):
        binding_option.set_default_value_str("[[d, 1, cmd]]")
        assert not binding_option.set_default_value_str("[[d, one, cmd]]")
        assert binding_option.get_default_value_str() == "[[d, '1', cmd]]"
        binding_option.reset_to_default()
        assert binding_option.get_value_untyped() == [["d", "1", "cmd"]]

    def test_default_not_aliased_by_reset(self, binding_option):
        binding_option.set_default_value_str("[[d, 1, cmd]]")
        binding_option.reset_to_default()
        binding_option.set_value_untyped([])
        binding_option.reset_to_default()
        assert binding_option.get_value_untyped() == [["d", "1", "cmd"]]


class TestClone:
    """Tests for clone_option."""

    def test_clone_copies_everything(self, populated_option):
        populated_option.set_default_value_str("[[d, 1, cmd]]")
        clone = populated_option.clone_option()
        assert clone is not populated_option
        assert clone.get_name() == populated_option.get_name()
        assert clone.get_type_hint() == populated_option.get_type_hint()
        assert clone.get_value_untyped() == EXAMPLE_GRID
        assert clone.get_default_value_str() == populated_option.get_default_value_str()
        assert list(clone.get_entries()) == list(populated_option.get_entries())

    def test_clone_entries_independent(self, populated_option):
        clone = populated_option.clone_option()
        for original, cloned in zip(populated_option.get_entries(), clone.get_entries()):
            assert original is not cloned

    def test_clone_keeps_type_hint(self):
        option = CompoundOption("o", [CompoundOptionEntry(str, "a_")], "plain")
        assert option.clone_option().get_type_hint() == "plain"

    def test_clone_independence(self, populated_option):
        clone = populated_option.clone_option()

        clone.set_value_untyped([["c", "1", "clone"]])
        assert populated_option.get_value_untyped() == EXAMPLE_GRID

        populated_option.set_value([("o", 2, "orig")])
        assert clone.get_value_untyped() == [["c", "1", "clone"]]

    def test_clone_does_not_copy_handlers(self, populated_option, update_counter):
        populated_option.add_updated_handler(update_counter)
        clone = populated_option.clone_option()
        clone.set_value_untyped([])
        assert update_counter.calls == 0


class TestPresentation:
    """Tests for to_frame and repr."""

    def test_to_frame(self, populated_option):
        frame = populated_option.to_frame()
        assert list(frame.columns) == ["keycode", "command"]
        assert list(frame.index) == ["binding1", "binding2"]
        assert frame.index.name == "id"
        assert frame.loc["binding2", "keycode"] == "9"

    def test_to_frame_uses_prefix_when_unnamed(self):
        option = CompoundOption("o", [CompoundOptionEntry(int, "key_")])
        option.set_value_untyped([["a", "1"]])
        assert list(option.to_frame().columns) == ["key_"]

    def test_to_frame_empty(self, binding_option):
        frame = binding_option.to_frame()
        assert frame.empty
        assert list(frame.columns) == ["keycode", "command"]

    def test_repr(self, populated_option):
        assert "arity=2" in repr(populated_option)
        assert "rows=2" in repr(populated_option)
