"""Unit tests for MaskingSession."""

from clipboard_masker_lib.anonymizer import MaskingSession
from clipboard_masker_lib.data_models.settings import Configuration


def test_masks_and_counts():
    session = MaskingSession()
    result = session.process("mail a@b.com")
    assert result.changed
    assert result.output == "mail [EMAIL]"
    assert session.mask_count == 1
    assert session.last_masked_content == "mail a@b.com"


def test_unchanged_content_not_counted():
    session = MaskingSession()
    result = session.process("a@b.com")
    assert not result.changed
    assert session.mask_count == 0
    assert session.last_masked_content is None


def test_own_output_is_ignored():
    session = MaskingSession()
    output = session.process("mail a@b.com").output
    again = session.process(output)
    assert not again.changed
    assert session.mask_count == 1


def test_restore_last_is_not_masked_again():
    session = MaskingSession()
    session.process("mail a@b.com")
    restored = session.restore_last()
    assert restored == "mail a@b.com"
    assert not session.process(restored).changed

    assert session.process("mail c@d.org").changed
    assert session.mask_count == 2


def test_restore_without_history():
    assert MaskingSession().restore_last() is None


def test_uses_config_provider():
    session = MaskingSession(config_provider=lambda: Configuration(mask_emails=False))
    assert not session.process("mail a@b.com").changed


def test_reset():
    session = MaskingSession()
    session.process("mail a@b.com")
    session.reset()
    assert session.mask_count == 0
    assert session.last_masked_content is None
    assert session.process("mail [EMAIL]").output == "mail [EMAIL]"
