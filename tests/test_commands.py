import pytest
from banner_formatter.commands import CommandRegistry, SingleLineBannerCommand, _BannerCommandBase, insertion_context
from banner_formatter.editor import InMemoryEditor
from banner_formatter.models import Position, Selection
from banner_formatter.sources import BuiltinTokenSource


def make_registry(reports=None):
    return CommandRegistry(BuiltinTokenSource(), reporter=reports.append if reports is not None else None)


def test_registry_names():
    registry = make_registry()
    assert registry.names() == ["banner.singleLine", "banner.multiLine"]
    with pytest.raises(KeyError):
        registry.get("banner.unknown")


def test_context_uses_first_non_whitespace_column():
    editor = InMemoryEditor("    Section  ", "python", Selection.caret(0, 1))
    ctx = insertion_context(editor)
    assert (ctx.column, ctx.end, ctx.text) == (4, 13, "Section")


def test_context_blank_line_uses_cursor():
    editor = InMemoryEditor("      ", "python", Selection.caret(0, 3))
    ctx = insertion_context(editor)
    assert (ctx.column, ctx.end, ctx.text) == (3, 6, "")


def test_single_line_on_blank_line():
    editor = InMemoryEditor("x = 1\n    \ny = 2", "python", Selection.caret(1, 4))
    result = make_registry().execute("banner.singleLine", editor)

    assert result.inserted
    assert result.text == "## " + "-" * 73
    assert editor.line_text(1) == "    ## " + "-" * 73
    assert len(editor.line_text(1)) == 80
    assert editor.line_text(2) == "y = 2"
    assert result.cursor == Position(1, 80)
    assert editor.selection == Selection.caret(1, 80)


def test_single_line_embeds_line_content():
    editor = InMemoryEditor("    Section", "python", Selection.caret(0, 0))
    make_registry().execute("banner.singleLine", editor)
    assert editor.text == "    ## --- Section " + "-" * 61
    assert len(editor.text) == 80


def test_single_line_embeds_selection():
    editor = InMemoryEditor("Hello world", "cpp", Selection(anchor=Position(0, 0), active=Position(0, 5)))
    make_registry().execute("banner.singleLine", editor)
    assert editor.text == "// --- Hello " + "-" * 67


def test_multi_line_block_language():
    editor = InMemoryEditor("", "css", Selection.caret(0, 0))
    result = make_registry().execute("banner.multiLine", editor)

    assert result.inserted
    assert editor.text == "/*\n* \n*/\n\n/* " + "-" * 74 + " */"
    assert result.cursor == Position(1, 2)
    assert editor.selection == Selection.caret(1, 2)
    assert editor.revealed == Position(1, 2)


def test_multi_line_indented_line_language():
    editor = InMemoryEditor("def f():\n    Intro\n", "javascript", Selection.caret(1, 6))
    result = make_registry().execute("banner.multiLine", editor)

    lines = editor.text.split("\n")
    assert lines[0] == "def f():"
    assert lines[1] == "    //"
    assert lines[2] == "    // Intro"
    assert lines[3] == "    "
    assert lines[4] == ""
    assert lines[5] == "    // " + "-" * 73
    assert result.cursor == Position(2, 7)


def test_unknown_language_reports_and_leaves_buffer():
    reports = []
    editor = InMemoryEditor("some text", "brainfuck", Selection.caret(0, 0))
    result = make_registry(reports).execute("banner.singleLine", editor)

    assert not result.inserted
    assert "brainfuck" in result.error
    assert reports == [result.error]
    assert editor.text == "some text"


def test_no_editor_is_silent_noop():
    reports = []
    result = make_registry(reports).execute("banner.multiLine", None)
    assert not result.inserted
    assert result.error is None
    assert reports == []


def test_buffer_edit_failure_is_reported():
    reports = []
    editor = InMemoryEditor("title", "python", Selection.caret(0, 0), read_only=True)
    result = make_registry(reports).execute("banner.singleLine", editor)

    assert not result.inserted
    assert "read-only" in result.error
    assert len(reports) == 1
    assert editor.text == "title"


def test_cursor_outside_document_is_reported():
    reports = []
    editor = InMemoryEditor("one line", "python", Selection.caret(5, 0))
    result = make_registry(reports).execute("banner.singleLine", editor)
    assert not result.inserted
    assert editor.text == "one line"


def test_blank_line_banner_replaces_trailing_whitespace():
    editor = InMemoryEditor("      ", "python", Selection.caret(0, 3))
    make_registry().execute("banner.singleLine", editor)
    assert editor.text == "   ## " + "-" * 74
    assert len(editor.text) == 80


def test_explicit_text_overrides_line_content():
    editor = InMemoryEditor("  old heading", "cpp", Selection.caret(0, 0))
    result = make_registry().execute("banner.singleLine", editor, "  New  ")
    assert result.inserted
    assert editor.text == "  // --- New " + "-" * 67


def test_explicit_text_in_multi_line_banner():
    editor = InMemoryEditor("", "css", Selection.caret(0, 0))
    make_registry().execute("banner.multiLine", editor, "Layout")
    assert editor.line_text(1) == "* Layout"


def test_command_base_requires_build():
    with pytest.raises(TypeError):
        _BannerCommandBase(BuiltinTokenSource(), None)
    command = SingleLineBannerCommand(BuiltinTokenSource(), make_registry().formatter)
    assert command.name == "banner.singleLine"
