import pytest

from pin_input.core.errors import ConfigurationError, StateInconsistencyError
from pin_input.core.field_config import PinFieldConfig
from pin_input.core.text_buffer import PinTextBuffer, TextSelection
from pin_input.state.input_state import InputStateController, RedrawReason, clamp_text


def make_controller(config):
    controller = InputStateController(config.pin_length)
    controller.attach(config.buffer)
    reasons = []
    controller.add_listener(reasons.append)
    return controller, reasons


class TestClamp:

    @pytest.mark.parametrize("raw, n, expected", [
        ("", 4, ""),
        ("12", 4, "12"),
        ("1234", 4, "1234"),
        ("123456", 4, "1234"),
        ("a😀b😀c", 3, "a😀b"),
        ("e\u0301x", 1, "e"),
    ])
    def test_clamp_length_is_min_of_codepoints_and_slots(self, raw, n, expected):
        result = clamp_text(raw, n)
        assert result == expected
        assert len(result) == min(len(raw), n)

    def test_rejects_non_positive_pin_length(self):
        with pytest.raises(ConfigurationError):
            InputStateController(0)


class TestAttach:

    def test_internal_buffer_created(self):
        controller, _ = make_controller(PinFieldConfig(pin_length=4))
        assert controller.owns_buffer
        assert isinstance(controller.buffer, PinTextBuffer)
        assert controller.display_text == ""

    def test_external_buffer_is_borrowed(self):
        external = PinTextBuffer("123456789")
        controller, _ = make_controller(PinFieldConfig(pin_length=4, buffer=external))

        assert not controller.owns_buffer
        assert controller.buffer is external
        assert external.listener_count == 1
        # Existing text is clamped right away, the buffer itself is untouched
        assert controller.display_text == "1234"
        assert external.text == "123456789"

    def test_double_attach_raises(self):
        controller, _ = make_controller(PinFieldConfig())
        with pytest.raises(StateInconsistencyError):
            controller.attach()

    def test_use_before_attach_raises(self):
        controller = InputStateController(4)
        with pytest.raises(StateInconsistencyError):
            controller.buffer
        with pytest.raises(StateInconsistencyError):
            controller.on_buffer_changed()


class TestBufferChanges:

    def test_display_text_follows_buffer(self):
        controller, reasons = make_controller(PinFieldConfig(pin_length=4))

        controller.buffer.text = "12"
        assert controller.display_text == "12"

        controller.buffer.text = "123456"
        assert controller.display_text == "1234"
        assert reasons == [RedrawReason.TEXT_CHANGED, RedrawReason.TEXT_CHANGED]

    def test_no_redraw_when_display_text_unchanged(self):
        controller, reasons = make_controller(PinFieldConfig(pin_length=4))
        controller.buffer.text = "1234"
        reasons.clear()

        # Extra characters beyond the slots do not change what is displayed
        controller.buffer.text = "12345"
        controller.buffer.selection = TextSelection(0, 1)

        assert controller.display_text == "1234"
        assert reasons == []

    def test_truncation_never_splits_a_character(self):
        controller, _ = make_controller(PinFieldConfig(pin_length=2))
        controller.buffer.text = "\U0001F600\U0001F44D\U0001F3FD"
        assert controller.display_text == "\U0001F600\U0001F44D"
        assert all(len(ch.encode("utf-8")) == 4 for ch in controller.display_text)


class TestReconcile:

    def test_internal_to_external_resyncs(self):
        old = PinFieldConfig(pin_length=4)
        controller, reasons = make_controller(old)
        internal = controller.buffer
        internal.text = "12"
        reasons.clear()

        external = PinTextBuffer("987654")
        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=external))

        assert controller.buffer is external
        assert controller.display_text == "9876"
        assert reasons == [RedrawReason.TEXT_CHANGED]
        assert internal.is_disposed
        assert external.listener_count == 1

    def test_internal_to_external_with_same_text_does_not_redraw(self):
        old = PinFieldConfig(pin_length=4)
        controller, reasons = make_controller(old)
        controller.buffer.text = "12"
        reasons.clear()

        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=PinTextBuffer("12")))

        assert controller.display_text == "12"
        assert reasons == []

    def test_external_to_internal_keeps_value(self):
        external = PinTextBuffer("123")
        old = PinFieldConfig(pin_length=4, buffer=external)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=4))

        assert controller.owns_buffer
        assert controller.buffer is not external
        assert controller.buffer.text == "123"
        assert controller.display_text == "123"
        assert external.listener_count == 0
        assert not external.is_disposed
        assert reasons == []

        # The old buffer no longer drives the field
        external.text = "999"
        assert controller.display_text == "123"

    def test_external_swap_has_no_forced_resync(self):
        first = PinTextBuffer("11")
        second = PinTextBuffer("22")
        old = PinFieldConfig(pin_length=4, buffer=first)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=second))

        assert controller.buffer is second
        assert first.listener_count == 0
        assert second.listener_count == 1
        assert controller.display_text == "11"
        assert reasons == []

        second.text = "223"
        assert controller.display_text == "223"
        assert reasons == [RedrawReason.TEXT_CHANGED]

    def test_same_external_buffer_is_left_alone(self):
        external = PinTextBuffer("11")
        old = PinFieldConfig(pin_length=4, buffer=external)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=external, enabled=False))

        assert external.listener_count == 1
        assert reasons == []

    def test_shrinking_truncates_text_and_buffer(self):
        old = PinFieldConfig(pin_length=6)
        controller, reasons = make_controller(old)
        controller.buffer.text = "123456"
        controller.buffer.selection = TextSelection(0, 2)
        reasons.clear()

        controller.reconcile(old, PinFieldConfig(pin_length=4))

        assert controller.display_text == "1234"
        assert controller.buffer.text == "1234"
        assert controller.buffer.selection == TextSelection.collapsed(4)
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

        # Discarded, not hidden
        controller.reconcile(PinFieldConfig(pin_length=4), PinFieldConfig(pin_length=6))
        assert controller.display_text == "1234"

    def test_shrinking_external_buffer_writes_through(self):
        external = PinTextBuffer("a😀b😀c")
        old = PinFieldConfig(pin_length=5, buffer=external)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=2, buffer=external))

        assert controller.display_text == "a😀"
        assert external.text == "a😀"
        assert external.selection == TextSelection.collapsed(2)
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

    def test_shrinking_above_text_length_keeps_text(self):
        old = PinFieldConfig(pin_length=6)
        controller, reasons = make_controller(old)
        controller.buffer.text = "12"
        reasons.clear()

        controller.reconcile(old, PinFieldConfig(pin_length=4))

        assert controller.buffer.text == "12"
        assert controller.pin_length == 4
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

    def test_growing_requests_redraw(self):
        old = PinFieldConfig(pin_length=4)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=8))

        assert controller.pin_length == 8
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

    def test_growing_reveals_text_beyond_old_slots(self):
        external = PinTextBuffer("12345678")
        old = PinFieldConfig(pin_length=6, buffer=external)
        controller, reasons = make_controller(old)
        assert controller.display_text == "123456"

        controller.reconcile(old, PinFieldConfig(pin_length=8, buffer=external))

        assert controller.display_text == "12345678"
        assert external.text == "12345678"
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

    def test_swap_and_shrink_keeps_new_buffer_text(self):
        first = PinTextBuffer("123456")
        second = PinTextBuffer("98")
        old = PinFieldConfig(pin_length=6, buffer=first)
        controller, reasons = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=second))

        assert second.text == "98"
        assert first.text == "123456"
        assert controller.display_text == "98"
        assert reasons == [RedrawReason.DIMENSIONS_CHANGED]

    def test_swap_and_shrink_truncates_new_buffer_only(self):
        first = PinTextBuffer("123456")
        second = PinTextBuffer("987654")
        old = PinFieldConfig(pin_length=6, buffer=first)
        controller, _ = make_controller(old)

        controller.reconcile(old, PinFieldConfig(pin_length=4, buffer=second))

        assert second.text == "9876"
        assert second.selection == TextSelection.collapsed(4)
        assert first.text == "123456"
        assert controller.display_text == "9876"

    def test_adopting_long_external_buffer_while_shrinking(self):
        old = PinFieldConfig(pin_length=6)
        controller, _ = make_controller(old)
        controller.buffer.text = "12"

        external = PinTextBuffer("987654321")
        controller.reconcile(old, PinFieldConfig(pin_length=3, buffer=external))

        assert controller.display_text == "987"
        assert len(controller.display_text) <= controller.pin_length


class TestDetach:

    def test_internal_buffer_disposed_once(self):
        controller, _ = make_controller(PinFieldConfig())
        internal = controller.buffer

        controller.detach()

        assert internal.is_disposed
        assert not controller.is_attached
        with pytest.raises(StateInconsistencyError):
            controller.detach()

    def test_external_buffer_survives(self):
        external = PinTextBuffer("12")
        controller, _ = make_controller(PinFieldConfig(buffer=external))

        controller.detach()

        assert not external.is_disposed
        assert external.listener_count == 0
        external.text = "34"
        assert controller.display_text == "12"
