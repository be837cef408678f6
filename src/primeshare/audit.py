"""Offline audit trail with Ed25519 signatures and hash chaining.

Records hold the event name, the threshold parameters and a timestamp. Secrets,
coefficients and share values are never written. Each record names the chain
hash of its predecessor; ``chain.state`` holds the hash of the newest one.
"""

from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

GENESIS = "GENESIS"


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def _chain_hash(message: bytes, signature: bytes) -> str:
    return hashlib.sha3_512(message + signature).hexdigest()


class AuditTrail:
    """Append-only audit records stored as JSON files in ``directory``."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"

    def _signing_key(self) -> Ed25519PrivateKey:
        """Return the trail's signing key, creating it on first use."""
        if not self.key_path.exists():
            key = Ed25519PrivateKey.generate()
            pem = key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
            self.key_path.write_bytes(pem)
            return key
        return serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)

    def _verifying_key(self) -> Ed25519PublicKey | None:
        if not self.key_path.exists():
            return None
        private_key = serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)
        return private_key.public_key()

    def head(self) -> str:
        """Chain hash of the newest record, or ``GENESIS`` for an empty trail."""
        if not self.chain_state_path.exists():
            return GENESIS
        return self.chain_state_path.read_text().strip()

    def record_event(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        now = int(time.time())
        payload = {
            "event": event,
            "details": dict(details or {}),
            "timestamp": now,
            "prev_hash": self.head(),
        }
        message = _canonical(payload)
        signature = self._signing_key().sign(message)
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": _chain_hash(message, signature),
        }

        path = self.directory / f"audit_{now}_{uuid.uuid4().hex}.json"
        path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(entry["chain_hash"])
        return path

    def _verified_entry(
        self, path: os.PathLike[str] | str, public_key: Ed25519PublicKey
    ) -> Dict[str, Any] | None:
        try:
            entry = json.loads(Path(path).read_text())
            message = _canonical(entry["payload"])
            signature = bytes.fromhex(entry["signature"])
            public_key.verify(signature, message)
        except (OSError, ValueError, KeyError, TypeError, InvalidSignature):
            return None
        if not isinstance(entry["payload"], dict):
            return None
        if entry.get("chain_hash") != _chain_hash(message, signature):
            return None
        return entry

    def verify_log(self, path: os.PathLike[str] | str) -> bool:
        """Check the signature and chain hash of a single record."""
        public_key = self._verifying_key()
        if public_key is None:
            return False
        return self._verified_entry(path, public_key) is not None

    def verify_chain(self) -> bool:
        """Check every record and that they link from ``GENESIS`` to the head.

        A removed, reordered or forked record makes the chain invalid.
        """
        paths = list(self.directory.glob("audit_*.json"))
        if not paths:
            return self.head() == GENESIS
        public_key = self._verifying_key()
        if public_key is None:
            return False

        by_prev: Dict[str, Dict[str, Any]] = {}
        for path in paths:
            entry = self._verified_entry(path, public_key)
            if entry is None:
                return False
            prev_hash = entry["payload"].get("prev_hash")
            if prev_hash in by_prev:
                return False
            by_prev[prev_hash] = entry

        cursor = GENESIS
        while cursor in by_prev:
            cursor = by_prev.pop(cursor)["chain_hash"]
        return not by_prev and cursor == self.head()


__all__ = ["AuditTrail", "GENESIS"]
