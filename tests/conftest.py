import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "System Serial Number 7XK2Q")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_html_bytes() -> bytes:
    return (
        b"<html><body><table>"
        b"<tr><td>System Model</td><td>OptiPlex 3050 (Dell Inc.)</td></tr>"
        b"<tr><td>System Serial Number</td><td>7XK2Q</td></tr>"
        b"</table></body></html>"
    )


@pytest.fixture()
def sample_mhtml_bytes() -> bytes:
    """A two-part web archive: an HTML page followed by an image part."""
    return (
        b"MIME-Version: 1.0\r\n"
        b'Content-Type: multipart/related; boundary="----=_NextPart_000"\r\n'
        b"\r\n"
        b"------=_NextPart_000\r\n"
        b'Content-Type: text/html; charset="utf-8"\r\n'
        b"Content-Transfer-Encoding: quoted-printable\r\n"
        b"Content-Location: file:///C:/report.html\r\n"
        b"\r\n"
        b"<html><body>Computer Name: PC-0042</body></html>\r\n"
        b"------=_NextPart_000\r\n"
        b"Content-Type: image/png\r\n"
        b"Content-Transfer-Encoding: base64\r\n"
        b"\r\n"
        b"iVBORw0KGgo=\r\n"
        b"------=_NextPart_000--\r\n"
    )
