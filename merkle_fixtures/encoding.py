from eth_abi import encode

from merkle_fixtures.exceptions import EncodingError


def encode_root(root: bytes) -> bytes:
    """abi.encode(bytes32 root)"""
    if len(root) != 32:
        raise EncodingError(f"Root must be 32 bytes to encode as bytes32, got {len(root)}")
    return encode(["bytes32"], [bytes(root)])


def encode_root_hex(root: bytes) -> str:
    return "0x" + encode_root(root).hex()
