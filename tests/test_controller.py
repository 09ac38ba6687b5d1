from pathlib import Path
from unittest.mock import MagicMock

import pytest

from billgen.controller import BillFormController, SubmitState
from billgen.errors import ExportError
from billgen.feedback import ImpactStyle, NotificationType


@pytest.fixture
def exporter():
    exporter = MagicMock()
    exporter.export.return_value = Path("/tmp/INV-0001.pdf")
    return exporter


@pytest.fixture
def controller(exporter):
    return BillFormController(alert=MagicMock(), exporter=exporter, haptics=MagicMock())


def _fill(controller, rows):
    first = list(controller.items)[0]
    ids = [first.id] + [controller.add_item().id for _ in rows[1:]]
    for item_id, (name, quantity, price) in zip(ids, rows):
        controller.update_item(item_id, "name", name)
        controller.update_item(item_id, "quantity", quantity)
        controller.update_item(item_id, "price", price)
    return ids


def test_live_total_tracks_edits(controller):
    _fill(controller, [("Bulb", "3", "20"), ("Wire", "2", "5.5")])
    assert controller.total == pytest.approx(71)
    assert controller.formatted_total == "₹71.00"


def test_add_item_pulses_light(controller):
    controller.add_item()
    assert len(controller.items) == 2
    controller.haptics.impact.assert_called_once_with(ImpactStyle.LIGHT)


def test_remove_item_pulses_medium(controller):
    extra = controller.add_item()
    assert controller.remove_item(extra.id) is True
    controller.haptics.impact.assert_called_with(ImpactStyle.MEDIUM)
    controller.alert.assert_not_called()


def test_remove_last_item_warns(controller):
    only = list(controller.items)[0]
    assert controller.remove_item(only.id) is False
    assert len(controller.items) == 1
    controller.alert.assert_called_once_with(
        "warning", "Cannot Remove", "You must have at least one item."
    )
    controller.haptics.impact.assert_not_called()


def test_submit_without_customer_is_invalid(controller, exporter):
    _fill(controller, [("Fan", "2", "100")])
    assert controller.submit() is SubmitState.INVALID
    controller.alert.assert_called_once_with("warning", "Error", "Please enter customer name.")
    exporter.export.assert_not_called()
    assert controller.state is SubmitState.IDLE


def test_submit_without_valid_items_is_invalid(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("", "1", "5")])
    assert controller.submit() is SubmitState.INVALID
    controller.alert.assert_called_once_with(
        "warning", "Error", "Please add at least one valid item to the bill."
    )
    exporter.export.assert_not_called()


def test_submit_exports_invoice(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "2", "100"), ("", "", "")])

    assert controller.submit() is SubmitState.EXPORTED

    markup, filename = exporter.export.call_args.args
    assert "Fan" in markup
    assert "₹200.00" in markup
    assert filename.startswith("INV-") and filename.endswith(".pdf")
    assert controller.last_export == Path("/tmp/INV-0001.pdf")
    controller.alert.assert_called_once_with("info", "Success", "PDF has been generated and saved.")
    controller.haptics.notification.assert_called_once_with(NotificationType.SUCCESS)
    assert controller.state is SubmitState.IDLE


def test_submit_export_failure_keeps_form_usable(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "2", "100")])
    exporter.export.side_effect = ExportError("boom")

    assert controller.submit() is SubmitState.FAILED
    controller.alert.assert_called_once_with("error", "Error", "Failed to generate PDF.")
    controller.haptics.notification.assert_called_once_with(NotificationType.ERROR)
    assert controller.state is SubmitState.IDLE

    exporter.export.side_effect = None
    assert controller.submit() is SubmitState.EXPORTED


def test_submit_while_in_flight_is_ignored(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "2", "100")])
    controller.state = SubmitState.GENERATING

    assert controller.submit() is SubmitState.GENERATING
    exporter.export.assert_not_called()
    controller.alert.assert_not_called()


def test_reentrant_submit_during_export_is_ignored(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "2", "100")])
    nested = []
    exporter.export.side_effect = lambda *args: nested.append(controller.submit()) or Path("x.pdf")

    assert controller.submit() is SubmitState.EXPORTED
    assert nested == [SubmitState.GENERATING]
    assert exporter.export.call_count == 1


def test_live_total_of_huge_price(controller):
    _fill(controller, [("Fan", "2", "99999999999999999999999999")])
    assert controller.formatted_total.endswith(".00")


def test_render_error_is_reported_as_failure(exporter):
    builder = MagicMock()
    builder.render.side_effect = ValueError("bad template")
    controller = BillFormController(
        alert=MagicMock(), exporter=exporter, haptics=MagicMock(), document_builder=builder
    )
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "1", "10")])

    assert controller.submit() is SubmitState.FAILED
    controller.alert.assert_called_once_with("error", "Error", "Failed to generate PDF.")
    controller.haptics.notification.assert_called_once_with(NotificationType.ERROR)
    exporter.export.assert_not_called()
    assert controller.state is SubmitState.IDLE


def test_submit_with_huge_price_exports(controller, exporter):
    controller.set_customer_name("Ali")
    _fill(controller, [("Fan", "1", "1e30")])
    assert controller.submit() is SubmitState.EXPORTED
    markup, _ = exporter.export.call_args.args
    assert "000.00" in markup
