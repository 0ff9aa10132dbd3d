import pytest

from alertfixer.config import EditorConfig
from alertfixer.errors import UnterminatedBlockError
from alertfixer.migration.editor import BufferEditor, line_ending, perform
from alertfixer.migration.fields import extract_fields
from alertfixer.migration.rewriter import build_replacement

from samples import BLOCK_CONTROLLER_HEAD, BLOCK_OPEN, INLINE_ALERT, INLINE_CONTROLLER


def test_inline_alert_is_replaced_in_place():
    buffer = ["- (void)show {\n", INLINE_ALERT + "\n", "}\n"]
    report = BufferEditor().run(buffer)
    assert buffer == ["- (void)show {\n", INLINE_CONTROLLER + "\n", "}\n"]
    assert report.rewrites == 1
    assert report.inline_rewrites == 1
    assert report.changed


def test_single_line_without_terminator():
    buffer = [INLINE_ALERT]
    BufferEditor().run(buffer)
    assert buffer == [INLINE_CONTROLLER]


def test_tap_block_collapses_into_one_line():
    body = ["    NSLog(@\"tapped %ld\", (long)buttonIndex);\n", "    [self dismiss];\n"]
    buffer = [BLOCK_OPEN, *body, "  }];\n", "  return;\n"]
    report = BufferEditor().run(buffer)
    assert len(buffer) == 2
    assert buffer[0] == BLOCK_CONTROLLER_HEAD + "\n" + "".join(body) + "  }];\n"
    assert buffer[1] == "  return;\n"
    assert report.block_rewrites == 1
    assert report.details == ["Rewrote UIAlertView call with tap block at lines 1-4"]


def test_buffer_shrinks_by_block_length():
    buffer = ["a\n", BLOCK_OPEN, "    x;\n", "\n", "    y;\n", "  }];\n", "b\n"]
    BufferEditor().run(buffer)
    # lines 1..5 became one line
    assert len(buffer) == 3
    assert buffer[0] == "a\n"
    assert buffer[2] == "b\n"
    assert "    x;\n\n    y;\n" in buffer[1]


def test_three_alerts_all_converted():
    buffer = [INLINE_ALERT + "\n", "x = 1;\n", INLINE_ALERT + "\n", "\n", INLINE_ALERT + "\n"]
    report = BufferEditor().run(buffer)
    assert report.rewrites == 3
    assert buffer == [INLINE_CONTROLLER + "\n", "x = 1;\n", INLINE_CONTROLLER + "\n", "\n", INLINE_CONTROLLER + "\n"]


def test_block_then_inline_alert():
    buffer = [BLOCK_OPEN, "    [self a];\n", "  }];\n", INLINE_ALERT + "\n"]
    report = BufferEditor().run(buffer)
    assert report.rewrites == 2
    assert len(buffer) == 2
    assert buffer[0].startswith(BLOCK_CONTROLLER_HEAD)
    assert buffer[1] == INLINE_CONTROLLER + "\n"


def test_second_pass_is_a_no_op():
    buffer = [BLOCK_OPEN, "    [self a];\n", "  }];\n", INLINE_ALERT + "\n"]
    BufferEditor().run(buffer)
    snapshot = list(buffer)
    report = BufferEditor().run(buffer)
    assert buffer == snapshot
    assert report.rewrites == 0
    assert not report.changed


def test_crlf_line_endings_are_kept():
    buffer = [BLOCK_OPEN.replace("\n", "\r\n"), "    [self a];\r\n", "  }];\r\n"]
    BufferEditor().run(buffer)
    assert buffer == [BLOCK_CONTROLLER_HEAD + "\r\n    [self a];\r\n  }];\r\n"]


def test_line_ending():
    assert line_ending("a\r\n") == "\r\n"
    assert line_ending("a\n") == "\n"
    assert line_ending("a") == ""


def test_perform_calls_completion_once_on_success():
    calls = []
    buffer = [INLINE_ALERT + "\n"]
    report = perform(buffer, calls.append)
    assert calls == [None]
    assert report.rewrites == 1


def test_perform_on_clean_buffer_leaves_it_unchanged():
    calls = []
    buffer = ["int main() {\n", "  return 0;\n", "}\n"]
    report = perform(buffer, calls.append)
    assert buffer == ["int main() {\n", "  return 0;\n", "}\n"]
    assert calls == [None]
    assert report.rewrites == 0


def test_unterminated_block_is_skipped_by_default():
    buffer = [BLOCK_OPEN, "    [self a];\n", INLINE_ALERT + "\n"]
    report = BufferEditor().run(buffer)
    assert buffer[0] == BLOCK_OPEN
    assert buffer[1] == "    [self a];\n"
    assert buffer[2] == INLINE_CONTROLLER + "\n"
    assert report.unterminated == [0]
    assert report.rewrites == 1
    assert len(report.warnings) == 1
    assert "line 1" in report.warnings[0]


def test_unterminated_block_collapse_rewrites_opening_line_only():
    buffer = [BLOCK_OPEN, "    [self a];\n"]
    report = BufferEditor(EditorConfig(on_unterminated="collapse")).run(buffer)
    assert buffer == [build_replacement("  ", extract_fields(BLOCK_OPEN), "") + "\n", "    [self a];\n"]
    assert report.unterminated == [0]
    assert report.rewrites == 1


def test_unterminated_block_error_policy_raises():
    buffer = [INLINE_ALERT + "\n", BLOCK_OPEN, "    [self a];\n"]
    with pytest.raises(UnterminatedBlockError) as excinfo:
        BufferEditor(EditorConfig(on_unterminated="error")).run(buffer)
    assert excinfo.value.line == 2
    # edits made before the failure stay applied
    assert buffer[0] == INLINE_CONTROLLER + "\n"
    assert buffer[1] == BLOCK_OPEN


def test_perform_reports_unterminated_block_to_handler():
    calls = []
    buffer = [BLOCK_OPEN]
    report = perform(buffer, calls.append, config=EditorConfig(on_unterminated="error"))
    assert report is None
    assert len(calls) == 1
    assert isinstance(calls[0], UnterminatedBlockError)
