from typing import List, Sequence

from eth_utils import keccak

from merkle_fixtures.logging_config import get_logger

logger = get_logger(__name__)


def hash_pair(a: bytes, b: bytes, sort_pairs: bool = True) -> bytes:
    if sort_pairs and a > b:
        a, b = b, a
    return keccak(a + b)


class MerkleTree:
    """
    Binary keccak256 tree over 32-byte leaves.

    With sort_leaves the leaf layer is ordered before hashing, and with
    sort_pairs every pair is hashed as keccak256(min || max), so the root
    does not depend on the order leaves were supplied in and proofs verify
    with OpenZeppelin's MerkleProof. An odd node at the end of a level is
    promoted to the next level unchanged.
    """

    def __init__(self, leaves: Sequence[bytes], sort_leaves: bool = True, sort_pairs: bool = True):
        for leaf in leaves:
            if len(leaf) != 32:
                raise ValueError(f"Leaf must be 32 bytes, got {len(leaf)}")
        self.sort_pairs = sort_pairs
        self.leaves: List[bytes] = [bytes(leaf) for leaf in leaves]
        if sort_leaves:
            self.leaves.sort()
        self.layers = self._build_tree(self.leaves)
        logger.debug("built_tree", leaves=len(self.leaves), depth=len(self.layers) - 1)

    def _build_tree(self, leaves: List[bytes]) -> List[List[bytes]]:
        if not leaves:
            return [[]]
        tree = [leaves]
        current = leaves
        while len(current) > 1:
            nxt: List[bytes] = []
            for i in range(0, len(current), 2):
                if i + 1 < len(current):
                    nxt.append(hash_pair(current[i], current[i + 1], self.sort_pairs))
                else:
                    nxt.append(current[i])
            tree.append(nxt)
            current = nxt
        return tree

    def get_root(self) -> bytes:
        return self.layers[-1][0] if self.layers[-1] else b""

    def get_hex_root(self) -> str:
        return "0x" + self.get_root().hex()

    def get_leaf_index(self, leaf: bytes) -> int:
        return self.leaves.index(bytes(leaf))

    def get_proof(self, index: int) -> List[bytes]:
        if not (0 <= index < len(self.leaves)):
            raise IndexError(f"Leaf index {index} out of range")
        proof: List[bytes] = []
        idx = index
        for level in range(len(self.layers) - 1):
            curr = self.layers[level]
            sibling = idx ^ 1
            if sibling < len(curr):
                proof.append(curr[sibling])
            idx //= 2
        return proof

    @staticmethod
    def verify_proof(leaf: bytes, proof: Sequence[bytes], root: bytes) -> bool:
        computed = bytes(leaf)
        for p in proof:
            computed = hash_pair(computed, bytes(p))
        return computed == bytes(root)
