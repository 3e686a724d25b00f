"""Checks on PEM encoded X.509 certificates."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime, timezone

from cryptography import x509

_PEM_BLOCK = re.compile(
    rb"-----BEGIN ([^-\r\n]+)-----\r?\n(.*?)-----END \1-----", re.DOTALL
)


class CertificateError(ValueError):
    """A certificate could not be decoded or parsed."""


def _first_pem_block(data: bytes) -> bytes | None:
    match = _PEM_BLOCK.search(data)
    if match is None:
        return None
    body = b"".join(match.group(2).split())
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError):
        return None


def _not_after(cert: x509.Certificate) -> datetime:
    value = getattr(cert, "not_valid_after_utc", None)
    if value is None:
        value = cert.not_valid_after.replace(tzinfo=timezone.utc)
    return value


def is_certificate_expired(data: bytes | str) -> bool:
    """Tell whether the first certificate in PEM data is past its expiry."""
    if isinstance(data, str):
        data = data.encode()
    der = _first_pem_block(data)
    if der is None:
        raise CertificateError("failed to decode certificate from PEM")
    try:
        cert = x509.load_der_x509_certificate(der)
    except ValueError as exc:
        raise CertificateError(f"failed to parse certificate: {exc}") from exc
    return _not_after(cert) < datetime.now(timezone.utc)