from eth_utils import keccak


def packed_leaf(member: str, val: int, price: int) -> bytes:
    """keccak256(address20 || val32 || price32), built by hand."""
    return keccak(bytes.fromhex(member[2:]) + val.to_bytes(32, "big") + price.to_bytes(32, "big"))
