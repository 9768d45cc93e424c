"""
Ledger identifiers.

A ledger id names the network a client talks to and carries a one-byte
wire value. Parsing accepts either the network name or the hex form of
that byte.
"""

from dataclasses import dataclass
from typing import Dict

from smartconfig.errors import InvalidLedgerId

# =============================================================================
# Known Ledgers
# =============================================================================

MAINNET = "mainnet"
TESTNET = "testnet"
PREVIEWNET = "previewnet"
LOCAL_NODE = "local-node"

LEDGER_BYTES: Dict[str, int] = {
    MAINNET: 0x00,
    TESTNET: 0x01,
    PREVIEWNET: 0x02,
    LOCAL_NODE: 0x03,
}

# Client environment names that map onto a ledger with a different name
ALIASES: Dict[str, str] = {
    "local": LOCAL_NODE,
}

_BYTE_TO_NAME = {value: name for name, value in LEDGER_BYTES.items()}


@dataclass(frozen=True)
class LedgerId:
    """A parsed ledger identifier."""
    name: str

    def __post_init__(self):
        if self.name not in LEDGER_BYTES:
            raise InvalidLedgerId(self.name)

    @classmethod
    def from_string(cls, value: str) -> "LedgerId":
        """
        Parse a ledger id from its name or hex byte form.

        Args:
            value: e.g. ``testnet``, ``local-node``, ``local`` or ``01``

        Returns:
            LedgerId instance

        Raises:
            InvalidLedgerId: If the value names no known ledger
        """
        if not isinstance(value, str):
            raise InvalidLedgerId(repr(value))

        key = value.strip().lower()
        key = ALIASES.get(key, key)
        if key in LEDGER_BYTES:
            return cls(key)

        try:
            raw = bytes.fromhex(key)
        except ValueError:
            raise InvalidLedgerId(value) from None

        if len(raw) != 1 or raw[0] not in _BYTE_TO_NAME:
            raise InvalidLedgerId(value)
        return cls(_BYTE_TO_NAME[raw[0]])

    @classmethod
    def from_bytes(cls, data: bytes) -> "LedgerId":
        """Parse a ledger id from its one-byte wire form."""
        if len(data) != 1 or data[0] not in _BYTE_TO_NAME:
            raise InvalidLedgerId(data.hex())
        return cls(_BYTE_TO_NAME[data[0]])

    def to_bytes(self) -> bytes:
        return bytes([LEDGER_BYTES[self.name]])

    def is_mainnet(self) -> bool:
        return self.name == MAINNET

    def is_testnet(self) -> bool:
        return self.name == TESTNET

    def is_previewnet(self) -> bool:
        return self.name == PREVIEWNET

    def is_local_node(self) -> bool:
        return self.name == LOCAL_NODE

    def __str__(self) -> str:
        return self.name
