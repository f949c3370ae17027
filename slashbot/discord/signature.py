"""Ed25519 verification of inbound interaction requests.

The platform signs ``timestamp + body`` with the application's private key
and sends the hex signature and the timestamp as headers. Every request
that fails verification must be rejected with 401.
"""

from __future__ import annotations

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey


def verify_request(
    body: bytes | None,
    *,
    timestamp: str | None,
    signature: str | None,
    public_key: str | None,
) -> bool:
    # Anything missing means we cannot verify, so deny.
    if public_key is None or timestamp is None or signature is None or body is None:
        return False
    try:
        key = VerifyKey(bytes.fromhex(public_key))
        key.verify(timestamp.encode("utf-8") + body, bytes.fromhex(signature))
    except (BadSignatureError, ValueError, TypeError):
        return False
    return True
