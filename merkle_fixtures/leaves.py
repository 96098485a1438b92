import re
from typing import List, Sequence

from eth_utils import is_hex_address, to_checksum_address
from web3 import Web3

from merkle_fixtures.config import LEAF_TYPES, UINT256_MAX
from merkle_fixtures.exceptions import InvalidAddressError, InvalidUintError
from merkle_fixtures.logging_config import get_logger

logger = get_logger(__name__)

_DECIMAL = re.compile(r"^[0-9]+$")
_HEX = re.compile(r"^0[xX][0-9a-fA-F]+$")


# --- HELPERS ---

def parse_uint256(text: str, name: str = "value") -> int:
    """Parse a decimal or 0x-prefixed hex string into a uint256."""
    raw = text.strip() if isinstance(text, str) else ""
    if raw.startswith("-") and _DECIMAL.match(raw[1:]):
        raise InvalidUintError(name, text, "is negative")
    if _DECIMAL.match(raw):
        value = int(raw, 10)
    elif _HEX.match(raw):
        value = int(raw, 16)
    else:
        raise InvalidUintError(name, text, "is not a decimal or 0x-hex integer")
    if value > UINT256_MAX:
        raise InvalidUintError(name, text, "exceeds uint256")
    logger.debug("parsed_uint256", name=name, value=value)
    return value


def ensure_uint256(value: int, name: str = "value") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidUintError(name, repr(value), "is not an integer")
    if value < 0:
        raise InvalidUintError(name, str(value), "is negative")
    if value > UINT256_MAX:
        raise InvalidUintError(name, str(value), "exceeds uint256")


def normalize_address(addr: str) -> str:
    a = addr.strip()
    if not a.startswith("0x"):
        a = "0x" + a
    if not is_hex_address(a):
        raise InvalidAddressError(f"Invalid address: {addr}")
    return to_checksum_address(a)


# --- HASHING ---

def member_leaf(member: str, val: int, price: int) -> bytes:
    """
    keccak256(abi.encodePacked(member(address), val(uint256), price(uint256)))
    """
    ensure_uint256(val, "val")
    ensure_uint256(price, "price")
    return bytes(Web3.solidity_keccak(list(LEAF_TYPES), [normalize_address(member), val, price]))


def member_leaves(members: Sequence[str], val: int, price: int) -> List[bytes]:
    leaves = [member_leaf(m, val, price) for m in members]
    logger.debug("hashed_leaves", count=len(leaves), val=val, price=price)
    return leaves
