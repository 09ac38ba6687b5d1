from billgen import config
from billgen.models.invoice import Invoice, LineItem
from billgen.printing.invoice_document import render_invoice_html


def _invoice(**overrides):
    fields = dict(
        customer_name="Ali",
        date="October 19, 2026",
        invoice_number="INV-0042",
        line_items=[
            LineItem(serial_number=1, name="Bulb", quantity=3, unit_price=20.0),
            LineItem(serial_number=2, name="Copper Wire", quantity=1000, unit_price=5.5),
        ],
    )
    fields.update(overrides)
    return Invoice(**fields)


def test_header_and_customer_block():
    html = render_invoice_html(_invoice())
    assert config.BUSINESS_NAME in html
    assert config.BUSINESS_TAGLINE in html
    assert config.PROPRIETOR in html
    assert "October 19, 2026" in html
    assert "INV-0042" in html
    assert "Ali" in html
    for line in config.FOOTER_LINES:
        assert line in html


def test_line_items_and_totals_use_currency_format():
    html = render_invoice_html(_invoice())
    assert "<td>Copper Wire</td>" in html
    assert "<td>1000</td>" in html
    assert "₹5.50" in html
    assert "₹5,500.00" in html
    assert "Total: ₹5,560.00" in html
    assert "Price (₹)" in html


def test_user_text_is_escaped():
    invoice = _invoice(
        customer_name="<b>Ali</b>",
        line_items=[LineItem(serial_number=1, name="Plug & Socket", quantity=1, unit_price=1)],
    )
    html = render_invoice_html(invoice)
    assert "&lt;b&gt;Ali&lt;/b&gt;" in html
    assert "Plug &amp; Socket" in html
